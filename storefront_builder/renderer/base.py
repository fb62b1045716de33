"""
Contrat des renderers de section + contexte de rendu.
"""
from enum import Enum
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_CURRENCY, DEFAULT_LANGUAGE
from ..sections.base import BaseSection
from .timers import TimerRegistry


class RenderMode(str, Enum):
    VIEW = "view"
    EDIT = "edit"


class RenderContext(BaseModel):
    """Contexte externe passé tel quel aux renderers (store, langue, devise...)."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    store_id: str = ""
    store_slug: Optional[str] = None
    language: str = DEFAULT_LANGUAGE
    currency: str = DEFAULT_CURRENCY
    mode: RenderMode = RenderMode.VIEW
    selected_id: Optional[str] = None
    timers: Optional[TimerRegistry] = None
    extra: Dict[str, Any] = Field(default_factory=dict)

    @property
    def editable(self) -> bool:
        return self.mode == RenderMode.EDIT


@runtime_checkable
class SectionRenderer(Protocol):
    def __call__(self, section: BaseSection, ctx: RenderContext) -> str: ...
