"""Sections checkout — en-tête sécurisé, formulaire client, récapitulatif de commande."""
from typing import Literal, Optional

from ..core.i18n import LocalizedText
from .base import BaseSection, SectionSettings, SectionContent


class CheckoutHeaderSettings(SectionSettings):
    backgroundColor: str = "white"
    showLockIcon: bool = False


class CheckoutHeaderContent(SectionContent):
    logo: Optional[str] = None
    storeName: LocalizedText = ""


class CheckoutHeaderSection(BaseSection):
    type: Literal["CheckoutHeader"] = "CheckoutHeader"
    settings: CheckoutHeaderSettings = CheckoutHeaderSettings()
    content: CheckoutHeaderContent = CheckoutHeaderContent()


class CheckoutFormSettings(SectionSettings):
    layout: str = "default"
    inputStyle: str = "outline"
    showLabels: bool = False
    backgroundColor: Optional[str] = None


class CheckoutFormContent(SectionContent):
    title: LocalizedText = ""


class CheckoutFormSection(BaseSection):
    type: Literal["CheckoutForm"] = "CheckoutForm"
    settings: CheckoutFormSettings = CheckoutFormSettings()
    content: CheckoutFormContent = CheckoutFormContent()


class OrderSummarySettings(SectionSettings):
    sticky: bool = False
    backgroundColor: Optional[str] = None


class OrderSummaryContent(SectionContent):
    title: LocalizedText = ""


class OrderSummarySection(BaseSection):
    type: Literal["OrderSummary"] = "OrderSummary"
    settings: OrderSummarySettings = OrderSummarySettings()
    content: OrderSummaryContent = OrderSummaryContent()
