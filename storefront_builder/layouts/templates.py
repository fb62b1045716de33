"""
Templates de boutique — pages d'accueil complètes prêtes à l'emploi.

Chaque section d'un template part des valeurs par défaut du registry,
surchargées par le contenu propre au template.
"""
import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..core.i18n import LocalizedText
from ..core.registry import defaults_for
from ..core.schemas import ComponentSchema, GlobalColors, GlobalSettings, PageSchema


class StoreTemplate(BaseModel):
    id: str
    name: LocalizedText
    description: LocalizedText
    icon: str
    color: str
    schema_: PageSchema

    def summary(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "color": self.color,
            "sections": [s.type for s in self.schema_.sections],
        }


def _section(section_type: str, content: Optional[dict] = None, settings: Optional[dict] = None) -> ComponentSchema:
    base = defaults_for(section_type)
    return ComponentSchema(
        id=f"{section_type.lower()}-{uuid.uuid4().hex[:8]}",
        type=section_type,
        settings={**base["settings"], **(settings or {})},
        content={**base["content"], **(content or {})},
    )


def _colors(primary: str, secondary: str, background: str, text: str) -> GlobalSettings:
    return GlobalSettings(colors=GlobalColors(primary=primary, secondary=secondary,
                                              background=background, text=text), font="Inter")


def _build_templates() -> List[StoreTemplate]:
    return [
        StoreTemplate(
            id="modern",
            name={"en": "Modern Vogue", "ar": "عصري وحديث"},
            description={
                "en": "Bold typography and full-width imagery. Perfect for fashion and lifestyle.",
                "ar": "خطوط عريضة وصور كاملة العرض. مثالي للأزياء ونمط الحياة.",
            },
            icon="Zap",
            color="bg-indigo-500",
            schema_=PageSchema(
                global_settings=_colors("#6366f1", "#1e293b", "#ffffff", "#0f172a"),
                sections=[
                    _section("Header", {
                        "storeName": {"en": "STORE", "ar": "المتجر"},
                        "links": [
                            {"label": {"en": "Home", "ar": "الرئيسية"}, "url": "/"},
                            {"label": {"en": "Shop", "ar": "التسوق"}, "url": "/products"},
                            {"label": {"en": "About", "ar": "من نحن"}, "url": "/about"},
                        ],
                    }),
                    _section("Hero", {
                        "title": {"en": "New Collection", "ar": "تشكيلة جديدة"},
                        "subtitle": {"en": "Discover our latest arrivals for the season.",
                                     "ar": "اكتشف أحدث منتجاتنا لهذا الموسم."},
                        "buttonText": {"en": "Shop Now", "ar": "تسوق الآن"},
                    }, {"height": "large", "align": "center", "overlayOpacity": 40}),
                    _section("Features", {
                        "title": {"en": "Why Choose Us", "ar": "لماذا تختارنا"},
                        "features": [
                            {"title": {"en": "Fast Shipping", "ar": "شحن سريع"},
                             "description": {"en": "Free delivery on all orders", "ar": "توصيل مجاني لجميع الطلبات"},
                             "icon": "Truck"},
                            {"title": {"en": "Premium Quality", "ar": "جودة عالية"},
                             "description": {"en": "Certified top materials", "ar": "مواد معتمدة عالية الجودة"},
                             "icon": "Star"},
                            {"title": {"en": "24/7 Support", "ar": "دعم فني"},
                             "description": {"en": "We are here to help", "ar": "نحن هنا للمساعدة على مدار الساعة"},
                             "icon": "Headphones"},
                        ],
                    }),
                    _section("ProductGrid", {"title": {"en": "Trending Now", "ar": "الأكثر مبيعاً"}}, {"limit": 8}),
                    _section("Newsletter", {
                        "title": {"en": "Join Our Newsletter", "ar": "اشترك في نشرتنا البريدية"},
                        "description": {"en": "Get 10% off your first order", "ar": "احصل على خصم 10% على طلبك الأول"},
                    }),
                    _section("Footer", {
                        "copyright": {"en": "© 2024 All Rights Reserved", "ar": "© 2024 جميع الحقوق محفوظة"},
                    }),
                ],
            ),
        ),
        StoreTemplate(
            id="classic",
            name={"en": "Classic Store", "ar": "المتجر الكلاسيكي"},
            description={
                "en": "Traditional and trustworthy layout. Great for electronics and general retail.",
                "ar": "تصميم تقليدي وموثوق. ممتاز للإلكترونيات وتجارة التجزئة العامة.",
            },
            icon="Store",
            color="bg-emerald-600",
            schema_=PageSchema(
                global_settings=_colors("#059669", "#475569", "#f8fafc", "#334155"),
                sections=[
                    _section("Header"),
                    _section("Banner", {
                        "title": {"en": "Special Offer: 50% Off Selected Items", "ar": "عرض خاص: خصم 50% على أصناف مختارة"},
                    }),
                    _section("Hero", {
                        "title": {"en": "Welcome to Our Store", "ar": "مرحباً بكم في متجرنا"},
                        "subtitle": {"en": "Best products at best prices", "ar": "أفضل المنتجات بأفضل الأسعار"},
                        "buttonText": {"en": "View Offers", "ar": "عرض العروض"},
                    }, {"height": "medium", "align": "left"}),
                    _section("ProductGrid", {"title": {"en": "Featured Products", "ar": "منتجات مميزة"}}, {"limit": 4}),
                    _section("Banner", {
                        "title": {"en": "Free Shipping on orders over $100", "ar": "شحن مجاني للطلبات فوق 100 دولار"},
                    }),
                    _section("Testimonials", {"title": {"en": "What Customers Say", "ar": "آراء العملاء"}}),
                    _section("FAQ"),
                    _section("Footer"),
                ],
            ),
        ),
        StoreTemplate(
            id="minimal",
            name={"en": "Minimalist", "ar": "بسيط (Minimal)"},
            description={
                "en": "Clean, whitespace-heavy design. Ideal for art, decor, and luxury goods.",
                "ar": "تصميم نظيف وبسيط. مثالي للفن، الديكور، والسلع الفاخرة.",
            },
            icon="Feather",
            color="bg-slate-800",
            schema_=PageSchema(
                global_settings=_colors("#18181b", "#71717a", "#ffffff", "#09090b"),
                sections=[
                    _section("Header", {"storeName": {"en": "M I N I M A L", "ar": "ب س ي ط"}},
                             {"backgroundColor": "#fff"}),
                    _section("Hero", {
                        "title": {"en": "Less is More", "ar": "الأبسط هو الأجمل"},
                        "subtitle": {"en": "Curated essentials for your home.", "ar": "أساسيات مختارة لمنزلك."},
                        "buttonText": {"en": "Explore", "ar": "استكشف"},
                    }, {"height": "medium"}),
                    _section("ProductGrid", {"title": {"en": "Collection", "ar": "المجموعة"}}, {"limit": 12}),
                    _section("ContactForm", {"title": {"en": "Get in Touch", "ar": "تواصل معنا"}}),
                    _section("Footer"),
                ],
            ),
        ),
    ]


STORE_TEMPLATES: Dict[str, StoreTemplate] = {t.id: t for t in _build_templates()}


def get_template(template_id: str) -> Optional[StoreTemplate]:
    return STORE_TEMPLATES.get(template_id)


def instantiate(template: StoreTemplate) -> PageSchema:
    """Copie profonde du schéma du template, ids de section régénérés."""
    schema = template.schema_.model_copy(deep=True)
    for section in schema.sections:
        section.id = f"{section.type.lower()}-{uuid.uuid4().hex[:8]}"
    return schema
