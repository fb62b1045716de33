"""
Registry des valeurs par défaut — type de section → {settings, content}.
Utilisé à l'ajout d'une section et à la synthèse des layouts par défaut.
"""
import copy
from enum import Enum
from typing import Dict, FrozenSet, List

from .errors import UnknownComponentType


class ComponentType(str, Enum):
    # Storefront
    HEADER        = "Header"
    FOOTER        = "Footer"
    HERO          = "Hero"
    PRODUCT_GRID  = "ProductGrid"
    FEATURES      = "Features"
    BANNER        = "Banner"
    TESTIMONIALS  = "Testimonials"
    FAQ           = "FAQ"
    RICH_TEXT     = "RichText"
    CONTACT_FORM  = "ContactForm"
    NEWSLETTER    = "Newsletter"
    # Checkout
    CHECKOUT_HEADER   = "CheckoutHeader"
    CHECKOUT_FORM     = "CheckoutForm"
    ORDER_SUMMARY     = "OrderSummary"
    TRUST_BADGES      = "TrustBadges"
    COUNTDOWN_TIMER   = "CountdownTimer"
    BUMP_OFFER        = "BumpOffer"
    SOCIAL_PROOF      = "SocialProof"
    EXIT_INTENT_POPUP = "ExitIntentPopup"


CHECKOUT_TYPES: FrozenSet[str] = frozenset({
    "CheckoutHeader", "CheckoutForm", "OrderSummary",
    "TrustBadges", "CountdownTimer", "BumpOffer",
    "SocialProof", "ExitIntentPopup",
})

# Types génériques autorisés aussi sur la page checkout
_CHECKOUT_EXTRAS: FrozenSet[str] = frozenset({"Banner", "RichText"})

# Sections non supprimables, par slug de page
PROTECTED_TYPES: Dict[str, FrozenSet[str]] = {
    "checkout": frozenset({"CheckoutForm", "OrderSummary"}),
}


def _text(en: str, ar: str) -> dict:
    return {"en": en, "ar": ar}


COMPONENT_DEFAULTS: Dict[str, dict] = {
    "Header": {
        "settings": {"layout": "center", "sticky": True, "backgroundColor": "white"},
        "content": {
            "logo": "/placeholder-logo.png",
            "storeName": _text("My Store", "متجري"),
            "links": [
                {"label": _text("Home", "الرئيسية"), "url": "/"},
                {"label": _text("Products", "المنتجات"), "url": "/products"},
                {"label": _text("About", "من نحن"), "url": "/about"},
            ],
        },
    },
    "Footer": {
        "settings": {"backgroundColor": "slate-900", "textColor": "white"},
        "content": {
            "copyright": _text("© 2024 My Store. All rights reserved.", "© 2024 متجري. جميع الحقوق محفوظة."),
            "links": [
                {"label": _text("Privacy Policy", "سياسة الخصوصية"), "url": "/privacy"},
                {"label": _text("Terms of Service", "شروط الخدمة"), "url": "/terms"},
            ],
            "socials": {"facebook": "#", "instagram": "#", "twitter": "#"},
        },
    },
    "Hero": {
        "settings": {"height": "large", "align": "center", "overlayOpacity": 50},
        "content": {
            "title": _text("New Hero Section", "قسم رئيسي جديد"),
            "subtitle": _text("Add a catchy subtitle here.", "أضف وصفاً جذاباً هنا."),
            "buttonText": _text("Shop Now", "تسوق الآن"),
            "buttonLink": "#",
            "backgroundImage": "https://images.unsplash.com/photo-1441986300917-64674bd600d8?q=80&w=1200",
        },
    },
    "Features": {
        "settings": {"columns": 3, "style": "cards"},
        "content": {
            "features": [
                {"title": _text("Feature 1", "ميزة 1"), "description": _text("Description 1", "وصف الميزة 1"), "icon": "Star"},
                {"title": _text("Feature 2", "ميزة 2"), "description": _text("Description 2", "وصف الميزة 2"), "icon": "Truck"},
                {"title": _text("Feature 3", "ميزة 3"), "description": _text("Description 3", "وصف الميزة 3"), "icon": "Shield"},
            ],
        },
    },
    "ProductGrid": {
        "settings": {"limit": 8, "columns": 4, "categoryId": "all"},
        "content": {
            "title": _text("New Product Collection", "مجموعة منتجات جديدة"),
            "subtitle": _text("Check out our latest items", "اكتشف أحدث منتجاتنا"),
        },
    },
    "Banner": {
        "settings": {"height": "small", "align": "left"},
        "content": {
            "title": _text("Special Offer", "عرض خاص"),
            "description": _text("Get 50% off on selected items.", "احصل على خصم 50% على منتجات مختارة."),
            "buttonText": _text("View Offer", "شاهد العرض"),
            "buttonLink": "#offer",
            "backgroundImage": "https://images.unsplash.com/photo-1557804506-669a67965ba0?q=80&w=1200",
        },
    },
    "Testimonials": {
        "settings": {"style": "grid", "columns": 3},
        "content": {
            "title": _text("What our customers say", "آراء عملائنا"),
            "items": [
                {"name": _text("John Doe", "أحمد محمد"), "role": _text("Customer", "عميل"), "text": _text("Great products!", "منتجات رائعة!"), "avatar": ""},
                {"name": _text("Jane Smith", "سارة علي"), "role": _text("Customer", "عميل"), "text": _text("Fast shipping!", "شحن سريع!"), "avatar": ""},
                {"name": _text("Bob Johnson", "خالد عمر"), "role": _text("Customer", "عميل"), "text": _text("Excellent support.", "دعم ممتاز."), "avatar": ""},
            ],
        },
    },
    "FAQ": {
        "settings": {},
        "content": {
            "title": _text("Frequently Asked Questions", "الأسئلة الشائعة"),
            "items": [
                {"question": _text("Shipping time?", "كم مدة الشحن؟"), "answer": _text("2-3 days.", "2-3 أيام عمل.")},
                {"question": _text("Return policy?", "سياسة الاسترجاع؟"), "answer": _text("30 days.", "30 يوماً.")},
            ],
        },
    },
    "RichText": {
        "settings": {"padding": "medium"},
        "content": {
            "text": _text(
                "<h2>Rich Text Section</h2><p>Add your custom content here.</p>",
                "<h2>قسم نصي</h2><p>أضف المحتوى الخاص بك هنا.</p>",
            ),
        },
    },
    "ContactForm": {
        "settings": {"backgroundColor": "white"},
        "content": {
            "title": _text("Contact Us", "تواصل معنا"),
            "description": _text("We would love to hear from you.", "نسعد بسماع آرائكم."),
            "emailPlaceholder": _text("Your Email", "بريدك الإلكتروني"),
            "messagePlaceholder": _text("Your Message", "رسالتك"),
            "buttonText": _text("Send Message", "إرسال الرسالة"),
        },
    },
    "Newsletter": {
        "settings": {"backgroundColor": "slate-900", "textColor": "white"},
        "content": {
            "title": _text("Subscribe to our newsletter", "اشترك في نشرتنا البريدية"),
            "description": _text("Get the latest updates and offers.", "احصل على آخر التحديثات والعروض."),
            "placeholder": _text("Enter your email", "أدخل بريدك الإلكتروني"),
            "buttonText": _text("Subscribe", "اشترك"),
        },
    },
    # ── Checkout ──────────────────────────────────────────────────────────────
    "CheckoutHeader": {
        "settings": {"backgroundColor": "white", "showLockIcon": True},
        "content": {
            "logo": "/placeholder-logo.png",
            "storeName": _text("My Store", "متجري"),
        },
    },
    "CheckoutForm": {
        "settings": {"layout": "default", "inputStyle": "outline", "showLabels": True},
        "content": {"title": _text("Customer Information", "بيانات العميل")},
    },
    "OrderSummary": {
        "settings": {"sticky": True, "backgroundColor": "slate-50"},
        "content": {"title": _text("Order Summary", "ملخص الطلب")},
    },
    "TrustBadges": {
        "settings": {"align": "center", "style": "color"},
        "content": {
            "badges": [
                {"icon": "Lock", "label": _text("Secure Payment", "دفع آمن")},
                {"icon": "ShieldCheck", "label": _text("Data Protection", "حماية البيانات")},
                {"icon": "Truck", "label": _text("Fast Shipping", "شحن سريع")},
            ],
        },
    },
    "CountdownTimer": {
        "settings": {"durationMinutes": 10, "backgroundColor": "#fef2f2", "textColor": "#dc2626"},
        "content": {
            "message": _text("🔥 High demand! Order reserved for:", "🔥 طلب عالٍ! تم حجز طلبك لمدة:"),
        },
    },
    "BumpOffer": {
        "settings": {"price": 5, "backgroundColor": "#fefce8", "borderColor": "#facc15"},
        "content": {
            "title": _text("One-Time Offer", "عرض لمرة واحدة"),
            "description": _text(
                "Add Priority Processing for just {{price}}",
                "أضف خدمة التجهيز السريع مقابل {{price}} فقط",
            ),
            "productName": _text("Priority Processing", "تجهيز سريع"),
        },
    },
    "SocialProof": {
        "settings": {"position": "bottom-left", "delay": 5000},
        "content": {
            "messages": [
                _text("Someone from Riyadh just bought this", "شخص من الرياض قام بالشراء للتو"),
                _text("15 people are viewing this right now", "15 شخص يشاهدون هذا المنتج الآن"),
            ],
        },
    },
    "ExitIntentPopup": {
        "settings": {"discountCode": "SAVE10", "discountAmount": "10%"},
        "content": {
            "title": _text("Wait! Don't go yet", "انتظر! لا تذهب يرحل"),
            "description": _text("Complete your order now and get 10% OFF", "أكمل طلبك الآن واحصل على خصم 10%"),
            "buttonText": _text("Apply Discount", "طبق الخصم"),
        },
    },
}


def is_known_type(component_type: str) -> bool:
    return component_type in COMPONENT_DEFAULTS


def defaults_for(component_type: str) -> dict:
    """
    Retourne {"settings": ..., "content": ...} pour un type de section.
    Copie profonde : l'appelant peut muter le résultat sans toucher au registry.
    Lève UnknownComponentType si le tag n'est pas enregistré.
    """
    if isinstance(component_type, ComponentType):
        component_type = component_type.value
    entry = COMPONENT_DEFAULTS.get(component_type)
    if entry is None:
        raise UnknownComponentType(component_type)
    return copy.deepcopy(entry)


def addable_types(page_slug: str) -> List[str]:
    """Types ajoutables sur une page (ordre du catalogue)."""
    if page_slug == "checkout":
        allowed = CHECKOUT_TYPES | _CHECKOUT_EXTRAS
    else:
        allowed = frozenset(COMPONENT_DEFAULTS) - CHECKOUT_TYPES
    return [t.value for t in ComponentType if t.value in allowed]


def protected_types(page_slug: str) -> FrozenSet[str]:
    return PROTECTED_TYPES.get(page_slug, frozenset())
