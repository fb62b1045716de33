"""
Session d'édition — propriétaire exclusif du PageSchema en mémoire.

États :
  VIEWING  → enter_edit() → EDITING
  EDITING  → begin_drag() → DRAGGING → end_drag() / cancel_drag() → EDITING
  EDITING  → save()       → SAVING   → EDITING (succès ou échec)

Les mutations sont synchrones et sérialisées ; la seule suspension est la
sauvegarde. Une sauvegarde envoie l'instantané pris à l'appel, les mutations
continuent pendant qu'elle est en vol. Une seconde sauvegarde attend la première.
"""
import asyncio
import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_LANGUAGE, SAVE_RETRIES, SAVE_RETRY_DELAY
from ..core.errors import (
    InvalidPatch, InvalidTransition, PersistenceFailure, ProtectedSection, SectionNotAllowed,
    SectionNotFound, UnknownComponentType, UnknownTemplate,
)
from ..core.events import (
    ContentPatch, EditorEvent, SelectionChanged, SettingsPatch, apply_content_patch,
)
from ..core.registry import addable_types, defaults_for, is_known_type, protected_types
from ..core.schemas import ComponentSchema, GlobalSettings, PageSchema
from ..gateway import PersistenceGateway
from ..layouts import get_template, instantiate, load_or_synthesize
from ..renderer import RenderContext, RenderMode, RenderedPage, TimerRegistry, inline_edit, render

log = logging.getLogger(__name__)


class SessionState(str, Enum):
    VIEWING  = "viewing"
    EDITING  = "editing"
    DRAGGING = "dragging"
    SAVING   = "saving"


class SaveResult(BaseModel):
    success:  bool
    attempts: int = 0
    error:    Optional[str] = None
    saved_at: Optional[datetime] = None


def new_section_id(section_type: str) -> str:
    return f"{section_type.lower()}-{uuid.uuid4().hex[:12]}"


class EditorSession:
    """
    Usage:
        >>> session = EditorSession(InMemoryGateway(), owner_id="store-1", page_slug="checkout")
        >>> await session.enter_edit()
        >>> section = session.add_section("TrustBadges")
        >>> session.reorder_section(section.id, 0)
        >>> result = await session.save()
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        owner_id: str,
        page_slug: str = "home",
        language: str = DEFAULT_LANGUAGE,
        retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        timers: Optional[TimerRegistry] = None,
    ):
        self.gateway     = gateway
        self.owner_id    = owner_id
        self.page_slug   = page_slug
        self.language    = language
        self.retries     = SAVE_RETRIES if retries is None else retries
        self.retry_delay = SAVE_RETRY_DELAY if retry_delay is None else retry_delay
        self.timers      = timers or TimerRegistry()

        self.schema: Optional[PageSchema] = None
        self.selected_id: Optional[str] = None
        self.stored = False
        self.last_error: Optional[str] = None
        self.last_saved_at: Optional[datetime] = None

        self._revision = 0
        self._saved_revision = 0
        self._saves_in_flight = 0
        self._save_lock = asyncio.Lock()
        self._drag_id: Optional[str] = None
        self._drag_target: Optional[int] = None

    # ── État ────────────────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        if self.schema is None:
            return SessionState.VIEWING
        if self._drag_id is not None:
            return SessionState.DRAGGING
        if self._saves_in_flight:
            return SessionState.SAVING
        return SessionState.EDITING

    @property
    def dirty(self) -> bool:
        return self._revision != self._saved_revision

    def _require_editable(self) -> PageSchema:
        if self.schema is None:
            raise InvalidTransition("Session non ouverte en édition")
        if self._drag_id is not None:
            raise InvalidTransition("Glisser-déposer en cours")
        return self.schema

    def _require_section(self, section_id: str) -> ComponentSchema:
        section = self._require_editable().find(section_id)
        if section is None:
            raise SectionNotFound(section_id)
        return section

    def _replace(self, section: ComponentSchema):
        schema = self._require_editable()
        schema.sections[schema.index_of(section.id)] = section
        self._touch()

    def _touch(self):
        self._revision += 1

    # ── Ouverture / fermeture ───────────────────────────────────────────────

    async def enter_edit(self) -> PageSchema:
        """Charge le document stocké, ou synthétise le layout par défaut."""
        if self.schema is not None:
            raise InvalidTransition(f"Session déjà en état {self.state.value}")
        try:
            raw = await self.gateway.load(self.owner_id, self.page_slug)
        except PersistenceFailure as e:
            log.warning("Chargement %s/%s impossible : %s", self.owner_id, self.page_slug, e.reason)
            self.last_error = e.reason
            raw = None
        self.schema, self.stored = load_or_synthesize(raw, self.page_slug)
        self.selected_id = None
        self._revision = self._saved_revision = 0
        log.info("Édition ouverte : %s/%s (%d sections, stocké=%s)",
                 self.owner_id, self.page_slug, len(self.schema.sections), self.stored)
        return self.schema

    def close(self):
        """Retour en VIEWING : timers annulés, état d'édition abandonné."""
        self.timers.clear()
        self.schema = None
        self.selected_id = None
        self._drag_id = self._drag_target = None

    # ── Sélection ───────────────────────────────────────────────────────────

    def select(self, section_id: Optional[str]):
        """Sélectionne une section (None = désélection). Id inconnu → SectionNotFound."""
        if section_id is not None:
            self._require_section(section_id)
        elif self.schema is None:
            raise InvalidTransition("Session non ouverte en édition")
        self.selected_id = section_id

    # ── Mutations ───────────────────────────────────────────────────────────

    def add_section(self, section_type: str) -> ComponentSchema:
        """Ajoute une section en fin de page, valeurs par défaut du registry + id neuf."""
        schema = self._require_editable()
        if not is_known_type(section_type):
            raise UnknownComponentType(section_type)
        if section_type not in addable_types(self.page_slug):
            raise SectionNotAllowed(f"{section_type} non disponible sur la page {self.page_slug!r}")
        section = ComponentSchema(id=new_section_id(section_type), type=section_type,
                                  **defaults_for(section_type))
        schema.sections.append(section)
        self._touch()
        log.debug("Section ajoutée : %s (%s)", section.id, section_type)
        return section

    def delete_section(self, section_id: str):
        schema = self._require_editable()
        section = self._require_section(section_id)
        if section.type in protected_types(self.page_slug):
            raise ProtectedSection(f"{section.type} est requis sur la page {self.page_slug!r}")
        schema.sections.pop(schema.index_of(section_id))
        if self.selected_id == section_id:
            self.selected_id = None
        self.timers.cancel(section_id)
        self._touch()

    def reorder_section(self, section_id: str, new_index: int):
        """Déplace la section à new_index (borné), ordre relatif des autres conservé."""
        schema = self._require_editable()
        self._require_section(section_id)
        current = schema.index_of(section_id)
        target = max(0, min(new_index, len(schema.sections) - 1))
        if target == current:
            return
        schema.sections.insert(target, schema.sections.pop(current))
        self._touch()

    def move_up(self, section_id: str):
        self.reorder_section(section_id, self._require_editable().index_of(section_id) - 1)

    def move_down(self, section_id: str):
        self.reorder_section(section_id, self._require_editable().index_of(section_id) + 1)

    def patch_section(self, section_id: str, patch: Dict[str, Any]) -> ComponentSchema:
        """
        Merge-patch d'une section : {"settings": {...}, "content": {...}}.
        Clés absentes du patch inchangées. Toute autre clé → InvalidPatch.
        """
        section = self._require_section(section_id)
        unknown = set(patch) - {"settings", "content"}
        if unknown:
            raise InvalidPatch(f"Clés de patch inconnues : {sorted(unknown)}")
        for key in ("settings", "content"):
            if key in patch and not isinstance(patch[key], dict):
                raise InvalidPatch(f"`{key}` doit être un objet, reçu {type(patch[key]).__name__}")
        updated = section.model_copy(update={
            "settings": {**section.settings, **patch.get("settings", {})},
            "content": {**section.content, **patch.get("content", {})},
        })
        self._replace(updated)
        return updated

    def update_global_settings(self, patch: Dict[str, Any]) -> GlobalSettings:
        schema = self._require_editable()
        current = schema.global_settings.model_dump()
        merged = {
            **current,
            **{k: v for k, v in patch.items() if k != "colors"},
            "colors": {**current["colors"], **patch.get("colors", {})},
        }
        try:
            schema.global_settings = GlobalSettings.model_validate(merged)
        except ValidationError as e:
            raise InvalidPatch(f"Réglages globaux invalides : {e}") from e
        self._touch()
        return schema.global_settings

    def apply_template(self, template_id: str) -> PageSchema:
        """Remplace toute la page d'accueil par une copie du template (ids régénérés)."""
        self._require_editable()
        if self.page_slug == "checkout":
            raise SectionNotAllowed("Templates non applicables à la page checkout")
        template = get_template(template_id)
        if template is None:
            raise UnknownTemplate(template_id)
        self.timers.clear()
        self.schema = instantiate(template)
        self.selected_id = None
        self._touch()
        log.info("Template %r appliqué à %s/%s", template_id, self.owner_id, self.page_slug)
        return self.schema

    def dispatch(self, event: EditorEvent):
        """Point d'entrée unique des événements émis par les renderers."""
        if isinstance(event, SelectionChanged):
            self.select(event.section_id)
        elif isinstance(event, ContentPatch):
            section = self._require_section(event.section_id)
            content = apply_content_patch(section.content, event.field_path, event.new_value)
            self._replace(section.model_copy(update={"content": content}))
        elif isinstance(event, SettingsPatch):
            self.patch_section(event.section_id, {"settings": event.settings})
        else:
            raise TypeError(f"Événement non supporté : {type(event).__name__}")

    def edit_text(self, section_id: str, field_path: str, value: str) -> ContentPatch:
        """Édition inline dans la langue active (les autres langues sont conservées)."""
        patch = inline_edit(self._require_editable(), section_id, field_path, value, self.language)
        self.dispatch(patch)
        return patch

    # ── Glisser-déposer ─────────────────────────────────────────────────────

    def begin_drag(self, section_id: str):
        self._require_section(section_id)
        self._drag_id = section_id
        self._drag_target = None

    def drag_over(self, index: int):
        if self._drag_id is None:
            raise InvalidTransition("Aucun glisser-déposer en cours")
        self._drag_target = index

    def end_drag(self):
        if self._drag_id is None:
            raise InvalidTransition("Aucun glisser-déposer en cours")
        section_id, target = self._drag_id, self._drag_target
        self._drag_id = self._drag_target = None
        if target is not None:
            self.reorder_section(section_id, target)

    def cancel_drag(self):
        self._drag_id = self._drag_target = None

    # ── Rendu ───────────────────────────────────────────────────────────────

    def render(self, context: Optional[RenderContext] = None) -> RenderedPage:
        """Rendu mode édition avec la sélection et les timers de la session."""
        schema = self.schema
        if schema is None:
            raise InvalidTransition("Session non ouverte en édition")
        ctx = (context or RenderContext(store_id=self.owner_id)).model_copy(update={
            "language": self.language,
            "selected_id": self.selected_id,
            "timers": self.timers,
        })
        return render(schema, RenderMode.EDIT, ctx)

    # ── Sauvegarde ──────────────────────────────────────────────────────────

    async def save(self) -> SaveResult:
        """
        Sauvegarde l'instantané courant du schéma (retries inclus).
        Échec final : schéma en mémoire intact, last_error renseigné, pas d'exception.
        """
        if self.schema is None:
            raise InvalidTransition("Session non ouverte en édition")
        snapshot = self.schema.model_copy(deep=True)
        revision = self._revision

        self._saves_in_flight += 1
        try:
            async with self._save_lock:
                return await self._save_snapshot(snapshot, revision)
        finally:
            self._saves_in_flight -= 1

    async def _save_snapshot(self, snapshot: PageSchema, revision: int) -> SaveResult:
        attempts = 0
        error: Optional[str] = None
        for attempt in range(self.retries + 1):
            if attempt:
                await asyncio.sleep(self.retry_delay)
            attempts += 1
            try:
                await self.gateway.save(self.owner_id, self.page_slug, snapshot)
            except PersistenceFailure as e:
                error = e.reason
                log.warning("Sauvegarde %s/%s — tentative %d/%d échouée : %s",
                            self.owner_id, self.page_slug, attempts, self.retries + 1, e.reason)
                continue
            self.last_error = None
            self.last_saved_at = datetime.utcnow()
            self.stored = True
            self._saved_revision = max(self._saved_revision, revision)
            return SaveResult(success=True, attempts=attempts, saved_at=self.last_saved_at)

        self.last_error = error
        return SaveResult(success=False, attempts=attempts, error=error)

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def section_ids(self) -> List[str]:
        return self.schema.section_ids if self.schema is not None else []

    def addable_types(self) -> List[str]:
        return addable_types(self.page_slug)
