"""
Layouts par défaut — page sans document stocké (ou document illisible).

checkout : CheckoutHeader, CheckoutForm, OrderSummary, TrustBadges
home     : Hero, Features, ProductGrid (tout autre slug → home)
"""
import copy

from ..core.registry import defaults_for
from ..core.schemas import ComponentSchema, GlobalColors, GlobalSettings, PageSchema

DEFAULT_GLOBAL_SETTINGS = GlobalSettings(
    colors=GlobalColors(primary="#0f172a", secondary="#475569", background="#ffffff", text="#1e293b"),
    font="Inter",
)

_STORE_SECTIONS = [
    {
        "id": "hero-1",
        "type": "Hero",
        "settings": {"height": "large", "align": "center", "overlayOpacity": 50},
        "content": {
            "title": {"en": "Welcome to Our Premium Store", "ar": "أهلاً بك في متجرنا المميز"},
            "subtitle": {
                "en": "Discover our exclusive collection of high-quality products.",
                "ar": "اكتشف مجموعتنا الحصرية من المنتجات عالية الجودة.",
            },
            "buttonText": {"en": "Shop Now", "ar": "تسوق الآن"},
            "buttonLink": "#products",
            "backgroundImage": "https://images.unsplash.com/photo-1441986300917-64674bd600d8?q=80&w=1200",
        },
    },
    {
        "id": "features-1",
        "type": "Features",
        "settings": {"columns": 3, "style": "cards"},
        "content": {
            "features": [
                {
                    "title": {"en": "Fast Shipping", "ar": "شحن سريع"},
                    "description": {
                        "en": "We deliver specifically to you with speed and care.",
                        "ar": "نقوم بالتوصيل لك بسرعة وعناية فائقة.",
                    },
                    "icon": "Truck",
                },
                {
                    "title": {"en": "Quality Guarantee", "ar": "ضمان الجودة"},
                    "description": {
                        "en": "Every product is verified for top-tier quality.",
                        "ar": "يتم فحص كل منتج لضمان أعلى معايير الجودة.",
                    },
                    "icon": "CheckCircle",
                },
                {
                    "title": {"en": "24/7 Support", "ar": "دعم فني 24/7"},
                    "description": {
                        "en": "Our team is here to help you anytime, anywhere.",
                        "ar": "فريقنا متواجد لمساعدتك في أي وقت.",
                    },
                    "icon": "Headphones",
                },
            ]
        },
    },
    {
        "id": "products-1",
        "type": "ProductGrid",
        "settings": {"limit": 8, "columns": 4},
        "content": {
            "title": {"en": "Featured Collection", "ar": "منتجات مختارة"},
            "subtitle": {"en": "Hand-picked items just for you", "ar": "تم اختيارها بعناية لك"},
        },
    },
]

# (id, type) — sections construites depuis le registry
_CHECKOUT_SECTIONS = [
    ("header-1", "CheckoutHeader"),
    ("form-1", "CheckoutForm"),
    ("summary-1", "OrderSummary"),
    ("badges-1", "TrustBadges"),
]


def default_store_layout() -> PageSchema:
    return PageSchema(
        global_settings=DEFAULT_GLOBAL_SETTINGS.model_copy(deep=True),
        sections=[ComponentSchema(**copy.deepcopy(s)) for s in _STORE_SECTIONS],
    )


def default_checkout_layout() -> PageSchema:
    return PageSchema(
        global_settings=DEFAULT_GLOBAL_SETTINGS.model_copy(deep=True),
        sections=[ComponentSchema(id=sid, type=t, **defaults_for(t)) for sid, t in _CHECKOUT_SECTIONS],
    )


def synthesize(page_slug: str) -> PageSchema:
    """Layout par défaut d'une page, toujours un nouvel objet."""
    if page_slug == "checkout":
        return default_checkout_layout()
    return default_store_layout()
