"""
Sections typées — vue stricte par type sur les sacs settings/content persistés.
Settings/Content séparés + BaseSection discriminé par `type`.
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class SectionSettings(BaseModel):
    """Réglages d'affichage d'une section. Clés inconnues ignorées."""
    model_config = ConfigDict(extra="ignore")


class SectionContent(BaseModel):
    """Contenu d'une section (textes LocalizedText, URLs, listes). Clés inconnues ignorées."""
    model_config = ConfigDict(extra="ignore")


class BaseSection(BaseModel):
    """Section de base (classe parente de toutes les sections typées)."""
    id: str
    type: str


class UnknownSection(BaseSection):
    """Type hors registry : données brutes conservées pour le placeholder."""
    settings: Dict[str, Any] = {}
    content: Dict[str, Any] = {}
