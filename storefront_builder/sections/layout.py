"""Sections Header / Footer — navigation et pied de page de la boutique."""
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel

from ..core.i18n import LocalizedText
from .base import BaseSection, SectionSettings, SectionContent


class NavLink(BaseModel):
    label: LocalizedText = ""
    url: str = "#"


class HeaderSettings(SectionSettings):
    layout: str = "left"
    sticky: bool = False
    backgroundColor: str = "transparent"


class HeaderContent(SectionContent):
    logo: Optional[str] = None
    storeName: LocalizedText = ""
    links: List[NavLink] = []


class HeaderSection(BaseSection):
    type: Literal["Header"] = "Header"
    settings: HeaderSettings = HeaderSettings()
    content: HeaderContent = HeaderContent()


class FooterSettings(SectionSettings):
    backgroundColor: str = "slate-900"
    textColor: str = "white"


class FooterContent(SectionContent):
    aboutTitle: Optional[LocalizedText] = None
    aboutText: Optional[LocalizedText] = None
    copyright: LocalizedText = ""
    links: List[NavLink] = []
    email: str = "support@store.com"
    phone: str = "+1 234 567 890"
    socials: Dict[str, str] = {}


class FooterSection(BaseSection):
    type: Literal["Footer"] = "Footer"
    settings: FooterSettings = FooterSettings()
    content: FooterContent = FooterContent()
