"""Rendu HTML des pages : renderers par type de section + moteur + timers."""
from .base import RenderContext, RenderMode, SectionRenderer
from .engine import RenderedPage, RenderedSection, render, render_document, inline_edit, register_renderer
from .ticker import TimerTicker
from .timers import CountdownState, TimerRegistry

__all__ = [
    "RenderContext", "RenderMode", "SectionRenderer",
    "RenderedPage", "RenderedSection", "render", "render_document", "inline_edit", "register_renderer",
    "CountdownState", "TimerRegistry", "TimerTicker",
]
