"""
Timers des sections à comportement temporel (CountdownTimer).

État privé par instance rendue, jamais sérialisé dans le PageSchema.
Un timer arrivé à zéro s'arrête : plus de décrément, plus de re-render.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

log = logging.getLogger(__name__)


@dataclass
class CountdownState:
    """Compte à rebours d'une instance de section (secondes)."""
    section_id: str
    duration: int
    remaining: int
    cancelled: bool = False

    @property
    def active(self) -> bool:
        return not self.cancelled and self.remaining > 0

    def tick(self, seconds: int = 1) -> bool:
        """Décrémente sans jamais passer sous zéro. Retourne True si un re-render est requis."""
        if not self.active:
            return False
        self.remaining = max(0, self.remaining - seconds)
        return True

    def cancel(self):
        self.cancelled = True

    def formatted(self) -> str:
        minutes, seconds = divmod(self.remaining, 60)
        return f"{minutes:02d}:{seconds:02d}"


class TimerRegistry:
    """
    Timers actifs d'une page rendue, indexés par id de section.

    Usage:
        >>> timers = TimerRegistry()
        >>> state = timers.countdown("timer-1", duration_minutes=10)
        >>> timers.tick()          # → ["timer-1"]
        >>> timers.sync(["other"])  # timer-1 annulé (section supprimée)
    """

    def __init__(self):
        self._timers: Dict[str, CountdownState] = {}
        self._lock = threading.Lock()

    def countdown(self, section_id: str, duration_minutes: float) -> CountdownState:
        """Retourne le timer de la section, créé au premier rendu."""
        duration = max(0, int(duration_minutes * 60))
        with self._lock:
            state = self._timers.get(section_id)
            if state is None or state.cancelled:
                state = CountdownState(section_id=section_id, duration=duration, remaining=duration)
                self._timers[section_id] = state
            return state

    def get(self, section_id: str) -> Optional[CountdownState]:
        return self._timers.get(section_id)

    def tick(self, seconds: int = 1) -> List[str]:
        """Avance tous les timers actifs ; retourne les ids à re-rendre."""
        with self._lock:
            return [sid for sid, state in self._timers.items() if state.tick(seconds)]

    def cancel(self, section_id: str):
        with self._lock:
            state = self._timers.pop(section_id, None)
        if state is not None:
            state.cancel()
            log.debug("Timer annulé : %s", section_id)

    def sync(self, live_ids: Iterable[str]):
        """Annule les timers des sections qui ne sont plus dans le schéma."""
        live = set(live_ids)
        for section_id in [sid for sid in self._timers if sid not in live]:
            self.cancel(section_id)

    def clear(self):
        for section_id in list(self._timers):
            self.cancel(section_id)

    def __contains__(self, section_id: str) -> bool:
        return section_id in self._timers

    def __len__(self) -> int:
        return len(self._timers)
