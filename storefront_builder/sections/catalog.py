"""Section ProductGrid — grille produits du store (produits fournis par le contexte de rendu)."""
from typing import Literal, Optional

from ..core.i18n import LocalizedText
from .base import BaseSection, SectionSettings, SectionContent


class ProductGridSettings(SectionSettings):
    limit: int = 8
    columns: int = 4
    categoryId: str = "all"
    style: str = "cards"


class ProductGridContent(SectionContent):
    title: LocalizedText = ""
    subtitle: Optional[LocalizedText] = None


class ProductGridSection(BaseSection):
    type: Literal["ProductGrid"] = "ProductGrid"
    settings: ProductGridSettings = ProductGridSettings()
    content: ProductGridContent = ProductGridContent()
