"""
Sections typées — exports publics + SectionUnion discriminé + parse_section.
"""
from typing import Annotated, Dict, Type, Union, get_args
from pydantic import Field

from ..core.schemas import ComponentSchema
from .base import BaseSection, SectionSettings, SectionContent, UnknownSection
from .layout import HeaderSection, HeaderSettings, HeaderContent, NavLink, FooterSection, FooterSettings, FooterContent
from .marketing import (
    HeroSection, HeroSettings, HeroContent, HeroSlide,
    BannerSection, BannerSettings, BannerContent,
    FeaturesSection, FeaturesSettings, FeaturesContent, FeatureItem,
    TestimonialsSection, TestimonialsSettings, TestimonialsContent, TestimonialEntry,
    FAQSection, FAQSettings, FAQContent, FAQEntry,
    RichTextSection, RichTextSettings, RichTextContent,
    ContactFormSection, ContactFormSettings, ContactFormContent,
    NewsletterSection, NewsletterSettings, NewsletterContent,
)
from .catalog import ProductGridSection, ProductGridSettings, ProductGridContent
from .checkout import (
    CheckoutHeaderSection, CheckoutHeaderSettings, CheckoutHeaderContent,
    CheckoutFormSection, CheckoutFormSettings, CheckoutFormContent,
    OrderSummarySection, OrderSummarySettings, OrderSummaryContent,
)
from .addons import (
    TrustBadgesSection, TrustBadgesSettings, TrustBadgesContent, TrustBadge,
    CountdownTimerSection, CountdownTimerSettings, CountdownTimerContent,
    BumpOfferSection, BumpOfferSettings, BumpOfferContent,
    SocialProofSection, SocialProofSettings, SocialProofContent,
    ExitIntentPopupSection, ExitIntentPopupSettings, ExitIntentPopupContent,
)

# Union discriminée par type — utilisable dans Pydantic avec discriminator
SectionUnion = Annotated[
    Union[
        HeaderSection,
        FooterSection,
        HeroSection,
        ProductGridSection,
        FeaturesSection,
        BannerSection,
        TestimonialsSection,
        FAQSection,
        RichTextSection,
        ContactFormSection,
        NewsletterSection,
        CheckoutHeaderSection,
        CheckoutFormSection,
        OrderSummarySection,
        TrustBadgesSection,
        CountdownTimerSection,
        BumpOfferSection,
        SocialProofSection,
        ExitIntentPopupSection,
    ],
    Field(discriminator="type"),
]

SECTION_MODELS: Dict[str, Type[BaseSection]] = {
    cls.model_fields["type"].default: cls
    for cls in get_args(get_args(SectionUnion)[0])
}


def parse_section(section: ComponentSchema) -> BaseSection:
    """
    Vue typée d'une section persistée.
    Type hors registry → UnknownSection (données brutes conservées).
    Lève pydantic.ValidationError si settings/content ont une forme invalide.
    """
    model = SECTION_MODELS.get(section.type)
    if model is None:
        return UnknownSection(**section.model_dump())
    return model.model_validate(section.model_dump())


__all__ = [
    # Base
    "BaseSection", "SectionSettings", "SectionContent", "UnknownSection",
    # Layout
    "HeaderSection", "HeaderSettings", "HeaderContent", "NavLink",
    "FooterSection", "FooterSettings", "FooterContent",
    # Vitrine
    "HeroSection", "HeroSettings", "HeroContent", "HeroSlide",
    "BannerSection", "BannerSettings", "BannerContent",
    "FeaturesSection", "FeaturesSettings", "FeaturesContent", "FeatureItem",
    "TestimonialsSection", "TestimonialsSettings", "TestimonialsContent", "TestimonialEntry",
    "FAQSection", "FAQSettings", "FAQContent", "FAQEntry",
    "RichTextSection", "RichTextSettings", "RichTextContent",
    "ContactFormSection", "ContactFormSettings", "ContactFormContent",
    "NewsletterSection", "NewsletterSettings", "NewsletterContent",
    "ProductGridSection", "ProductGridSettings", "ProductGridContent",
    # Checkout
    "CheckoutHeaderSection", "CheckoutHeaderSettings", "CheckoutHeaderContent",
    "CheckoutFormSection", "CheckoutFormSettings", "CheckoutFormContent",
    "OrderSummarySection", "OrderSummarySettings", "OrderSummaryContent",
    "TrustBadgesSection", "TrustBadgesSettings", "TrustBadgesContent", "TrustBadge",
    "CountdownTimerSection", "CountdownTimerSettings", "CountdownTimerContent",
    "BumpOfferSection", "BumpOfferSettings", "BumpOfferContent",
    "SocialProofSection", "SocialProofSettings", "SocialProofContent",
    "ExitIntentPopupSection", "ExitIntentPopupSettings", "ExitIntentPopupContent",
    # Union
    "SectionUnion", "SECTION_MODELS", "parse_section",
]
