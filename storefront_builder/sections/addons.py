"""Add-ons checkout — badges de confiance, urgence, bump offer, preuve sociale, popup de sortie."""
from typing import List, Literal, Union
from pydantic import BaseModel, Field

from ..core.i18n import LocalizedText
from .base import BaseSection, SectionSettings, SectionContent

# Durée max d'un compte à rebours : 24 h
MAX_COUNTDOWN_MINUTES = 24 * 60


class TrustBadge(BaseModel):
    icon: str = "ShieldCheck"
    label: LocalizedText = ""


class TrustBadgesSettings(SectionSettings):
    align: str = "left"
    style: str = "color"


class TrustBadgesContent(SectionContent):
    badges: List[TrustBadge] = []


class TrustBadgesSection(BaseSection):
    type: Literal["TrustBadges"] = "TrustBadges"
    settings: TrustBadgesSettings = TrustBadgesSettings()
    content: TrustBadgesContent = TrustBadgesContent()


class CountdownTimerSettings(SectionSettings):
    durationMinutes: float = Field(10, ge=0, le=MAX_COUNTDOWN_MINUTES)
    backgroundColor: str = "#fef2f2"
    textColor: str = "#dc2626"


class CountdownTimerContent(SectionContent):
    message: LocalizedText = ""


class CountdownTimerSection(BaseSection):
    type: Literal["CountdownTimer"] = "CountdownTimer"
    settings: CountdownTimerSettings = CountdownTimerSettings()
    content: CountdownTimerContent = CountdownTimerContent()


class BumpOfferSettings(SectionSettings):
    price: float = 0
    backgroundColor: str = "#fefce8"
    borderColor: str = "#facc15"


class BumpOfferContent(SectionContent):
    title: LocalizedText = ""
    description: LocalizedText = ""
    productName: LocalizedText = ""


class BumpOfferSection(BaseSection):
    type: Literal["BumpOffer"] = "BumpOffer"
    settings: BumpOfferSettings = BumpOfferSettings()
    content: BumpOfferContent = BumpOfferContent()


class SocialProofSettings(SectionSettings):
    position: str = "bottom-left"
    delay: int = 5000


class SocialProofContent(SectionContent):
    messages: List[LocalizedText] = []


class SocialProofSection(BaseSection):
    type: Literal["SocialProof"] = "SocialProof"
    settings: SocialProofSettings = SocialProofSettings()
    content: SocialProofContent = SocialProofContent()


class ExitIntentPopupSettings(SectionSettings):
    discountCode: str = ""
    discountAmount: Union[str, float] = ""


class ExitIntentPopupContent(SectionContent):
    title: LocalizedText = ""
    description: LocalizedText = ""
    buttonText: LocalizedText = ""


class ExitIntentPopupSection(BaseSection):
    type: Literal["ExitIntentPopup"] = "ExitIntentPopup"
    settings: ExitIntentPopupSettings = ExitIntentPopupSettings()
    content: ExitIntentPopupContent = ExitIntentPopupContent()
