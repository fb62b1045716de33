"""
Ticker APScheduler — avance les timers d'une page une fois par seconde.

Le callback reçoit les ids de section à re-rendre ; un timer arrivé à zéro
n'y figure plus.
"""
import logging
from typing import Callable, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .timers import TimerRegistry

log = logging.getLogger(__name__)


class TimerTicker:
    def __init__(self, timers: TimerRegistry, on_tick: Callable[[List[str]], None],
                 interval_seconds: int = 1):
        self.timers = timers
        self.on_tick = on_tick
        self.interval_seconds = interval_seconds
        self._scheduler: Optional[BackgroundScheduler] = None

    @property
    def running(self) -> bool:
        return bool(self._scheduler and self._scheduler.running)

    def step(self) -> List[str]:
        """Un tick : décrémente les timers actifs, notifie si besoin."""
        ids = self.timers.tick(self.interval_seconds)
        if ids:
            self.on_tick(ids)
        return ids

    def start(self):
        """Démarre le ticker. Idempotent."""
        if self.running:
            return
        self._scheduler = BackgroundScheduler(timezone="UTC")
        self._scheduler.add_job(
            self.step,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id="timer_tick",
            replace_existing=True,
            max_instances=1,
        )
        self._scheduler.start()
        log.info("Ticker démarré — %d timer(s)", len(self.timers))

    def stop(self):
        if self.running:
            self._scheduler.shutdown(wait=False)
            log.info("Ticker arrêté")
        self._scheduler = None
