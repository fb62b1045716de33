"""
Schémas Pydantic du document de page.
Structure : PageSchema → globalSettings + sections ordonnées (ComponentSchema)

Les sections sont persistées comme des sacs ouverts (settings/content dict) ;
la vue typée par type de section vit dans `sections/`.
"""
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Injectés tels quels dans le <style> de la page
_COLOR_RE = re.compile(r"^(#[0-9a-fA-F]{3}|#[0-9a-fA-F]{6}|#[0-9a-fA-F]{8}|[a-zA-Z]+)$")
_FONT_RE = re.compile(r"^[\w \-]+$")


class GlobalColors(BaseModel):
    primary: str = "#0f172a"
    secondary: str = "#475569"
    background: str = "#ffffff"
    text: str = "#1e293b"

    @field_validator("primary", "secondary", "background", "text")
    @classmethod
    def _css_color(cls, value: str) -> str:
        value = value.strip()
        if not _COLOR_RE.match(value):
            raise ValueError(f"Couleur invalide : {value!r} (hex ou nom CSS)")
        return value


class GlobalSettings(BaseModel):
    """Réglages partagés par toutes les sections de la page."""
    colors: GlobalColors = Field(default_factory=GlobalColors)
    font: str = "Inter"

    @field_validator("font")
    @classmethod
    def _font_name(cls, value: str) -> str:
        value = value.strip()
        if not _FONT_RE.match(value):
            raise ValueError(f"Police invalide : {value!r} (lettres, chiffres, espaces, tirets)")
        return value


class ComponentSchema(BaseModel):
    """Section : un bloc configurable de la page."""
    id: str = Field(..., min_length=1, description="Identifiant unique dans la page")
    type: str = Field(..., description="Tag de type (Hero, TrustBadges, ...)")
    settings: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)


class PageSchema(BaseModel):
    """
    Document persisté d'une page.
    L'ordre de `sections` est l'ordre de rendu (haut → bas).
    """
    model_config = ConfigDict(populate_by_name=True)

    global_settings: GlobalSettings = Field(default_factory=GlobalSettings, alias="globalSettings")
    sections: List[ComponentSchema] = Field(default_factory=list)

    @field_validator("sections")
    @classmethod
    def _unique_ids(cls, sections: List[ComponentSchema]) -> List[ComponentSchema]:
        seen = set()
        for section in sections:
            if section.id in seen:
                raise ValueError(f"id de section dupliqué : {section.id!r}")
            seen.add(section.id)
        return sections

    # ── Lecture ──────────────────────────────────────────────────────────────

    def find(self, section_id: str) -> Optional[ComponentSchema]:
        return next((s for s in self.sections if s.id == section_id), None)

    def index_of(self, section_id: str) -> int:
        """Position de la section, -1 si absente."""
        for i, section in enumerate(self.sections):
            if section.id == section_id:
                return i
        return -1

    @property
    def section_ids(self) -> List[str]:
        return [s.id for s in self.sections]

    def to_document(self) -> dict:
        """Forme stockée (clés camelCase, ex: globalSettings)."""
        return self.model_dump(mode="json", by_alias=True)
