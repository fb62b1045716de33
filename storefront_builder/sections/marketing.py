"""Sections vitrine — Hero, Banner, Features, Testimonials, FAQ, RichText, ContactForm, Newsletter."""
from typing import List, Literal, Optional
from pydantic import BaseModel

from ..core.i18n import LocalizedText
from .base import BaseSection, SectionSettings, SectionContent


# ── Hero ──────────────────────────────────────────────────────────────────────

class HeroSlide(BaseModel):
    title: LocalizedText = ""
    subtitle: LocalizedText = ""
    buttonText: Optional[LocalizedText] = None
    buttonLink: str = "#"
    backgroundImage: Optional[str] = None


class HeroSettings(SectionSettings):
    height: str = "large"
    align: str = "center"
    overlayOpacity: float = 50


class HeroContent(SectionContent):
    title: LocalizedText = ""
    subtitle: LocalizedText = ""
    buttonText: Optional[LocalizedText] = None
    buttonLink: str = "#"
    backgroundImage: Optional[str] = None
    slides: Optional[List[HeroSlide]] = None


class HeroSection(BaseSection):
    type: Literal["Hero"] = "Hero"
    settings: HeroSettings = HeroSettings()
    content: HeroContent = HeroContent()


# ── Banner ────────────────────────────────────────────────────────────────────

class BannerSettings(SectionSettings):
    height: str = "small"
    align: str = "left"


class BannerContent(SectionContent):
    title: LocalizedText = ""
    description: LocalizedText = ""
    buttonText: Optional[LocalizedText] = None
    buttonLink: str = "#"
    backgroundImage: Optional[str] = None


class BannerSection(BaseSection):
    type: Literal["Banner"] = "Banner"
    settings: BannerSettings = BannerSettings()
    content: BannerContent = BannerContent()


# ── Features ──────────────────────────────────────────────────────────────────

class FeatureItem(BaseModel):
    title: LocalizedText = ""
    description: LocalizedText = ""
    icon: str = "Star"


class FeaturesSettings(SectionSettings):
    columns: int = 3
    style: str = "cards"


class FeaturesContent(SectionContent):
    title: Optional[LocalizedText] = None
    features: List[FeatureItem] = []


class FeaturesSection(BaseSection):
    type: Literal["Features"] = "Features"
    settings: FeaturesSettings = FeaturesSettings()
    content: FeaturesContent = FeaturesContent()


# ── Testimonials ──────────────────────────────────────────────────────────────

class TestimonialEntry(BaseModel):
    name: LocalizedText = ""
    role: LocalizedText = ""
    text: LocalizedText = ""
    avatar: str = ""


class TestimonialsSettings(SectionSettings):
    style: str = "grid"
    columns: int = 3


class TestimonialsContent(SectionContent):
    title: LocalizedText = ""
    items: List[TestimonialEntry] = []


class TestimonialsSection(BaseSection):
    type: Literal["Testimonials"] = "Testimonials"
    settings: TestimonialsSettings = TestimonialsSettings()
    content: TestimonialsContent = TestimonialsContent()


# ── FAQ ───────────────────────────────────────────────────────────────────────

class FAQEntry(BaseModel):
    question: LocalizedText = ""
    answer: LocalizedText = ""


class FAQSettings(SectionSettings):
    pass


class FAQContent(SectionContent):
    title: LocalizedText = ""
    items: List[FAQEntry] = []


class FAQSection(BaseSection):
    type: Literal["FAQ"] = "FAQ"
    settings: FAQSettings = FAQSettings()
    content: FAQContent = FAQContent()


# ── RichText ──────────────────────────────────────────────────────────────────

class RichTextSettings(SectionSettings):
    padding: str = "medium"


class RichTextContent(SectionContent):
    text: LocalizedText = ""


class RichTextSection(BaseSection):
    type: Literal["RichText"] = "RichText"
    settings: RichTextSettings = RichTextSettings()
    content: RichTextContent = RichTextContent()


# ── ContactForm / Newsletter ──────────────────────────────────────────────────

class ContactFormSettings(SectionSettings):
    backgroundColor: str = "white"


class ContactFormContent(SectionContent):
    title: LocalizedText = ""
    description: LocalizedText = ""
    emailPlaceholder: LocalizedText = ""
    messagePlaceholder: LocalizedText = ""
    buttonText: LocalizedText = ""


class ContactFormSection(BaseSection):
    type: Literal["ContactForm"] = "ContactForm"
    settings: ContactFormSettings = ContactFormSettings()
    content: ContactFormContent = ContactFormContent()


class NewsletterSettings(SectionSettings):
    backgroundColor: str = "slate-900"
    textColor: str = "white"


class NewsletterContent(SectionContent):
    title: LocalizedText = ""
    description: LocalizedText = ""
    placeholder: LocalizedText = ""
    buttonText: LocalizedText = ""


class NewsletterSection(BaseSection):
    type: Literal["Newsletter"] = "Newsletter"
    settings: NewsletterSettings = NewsletterSettings()
    content: NewsletterContent = NewsletterContent()
