"""
Renderers HTML des sections — une fonction pure par type.
Entrée : section typée (sections/) + RenderContext. Sortie : fragment HTML.

Tous les champs LocalizedText passent par i18n.resolve avant affichage.
En mode édition, les textes éditables portent contenteditable + data-field.
"""
from html import escape
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.i18n import localize, resolve, text_direction
from ..sections import (
    HeaderSection, FooterSection, HeroSection, ProductGridSection, FeaturesSection,
    BannerSection, TestimonialsSection, FAQSection, RichTextSection, ContactFormSection,
    NewsletterSection, CheckoutHeaderSection, CheckoutFormSection, OrderSummarySection,
    TrustBadgesSection, CountdownTimerSection, BumpOfferSection, SocialProofSection,
    ExitIntentPopupSection,
)
from .base import RenderContext


# ── Helpers ─────────────────────────────────────────────────────────────────

def _t(field: Any, ctx: RenderContext, placeholders: Optional[dict] = None) -> str:
    return escape(localize(field, ctx.language, placeholders))


def _editable(ctx: RenderContext, path: str) -> str:
    return f' contenteditable="true" data-field="{path}"' if ctx.editable else ""


def _classes(*names: str) -> str:
    return " ".join(n for n in names if n)


def format_price(amount: float, currency: str) -> str:
    return f"{amount:,.2f} {currency}".strip()


_PADDING = {"small": "16px", "medium": "32px", "large": "48px"}
_HERO_HEIGHT = {"large": "600px", "medium": "400px", "small": "300px"}
_BANNER_HEIGHT = {"large": "400px", "medium": "300px", "small": "200px"}
_ALIGN = {"left": "start", "right": "end", "center": "center"}
_PLACEHOLDER_LOGO = "/placeholder-logo.png"


def _cols(n: int, allowed=(2, 3, 4), default: int = 3) -> int:
    return n if n in allowed else default


# ── Vitrine ─────────────────────────────────────────────────────────────────

def render_header(b: HeaderSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    classes = _classes("header", f"header--{escape(s.layout)}", "header--sticky" if s.sticky else "")
    if d.logo and d.logo != _PLACEHOLDER_LOGO:
        logo_html = f'<img src="{escape(d.logo)}" alt="{_t(d.storeName, ctx)}" class="header__logo">'
    else:
        logo_html = f'<h2 class="header__store-name"{_editable(ctx, "storeName")}>{_t(d.storeName, ctx)}</h2>'

    links_html = "".join(
        f'<li><a href="{escape(link.url)}" class="header__link"{_editable(ctx, f"links.{i}.label")}>'
        f'{_t(link.label, ctx)}</a></li>'
        for i, link in enumerate(d.links)
    )

    return f"""<header class="{classes}" style="background:{escape(s.backgroundColor)}">
  <div class="container header__inner">
    {logo_html}
    <ul class="header__links">{links_html}</ul>
  </div>
</header>"""


def render_footer(b: FooterSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    about_title = _t(d.aboutTitle, ctx) if d.aboutTitle else ("من نحن" if ctx.language == "ar" else "About Us")
    about_text = _t(d.aboutText, ctx) if d.aboutText else (
        "اكتب وصفاً قصيراً عن متجرك هنا." if ctx.language == "ar"
        else "Write a short description about your store here."
    )
    links_html = "".join(
        f'<li><a href="{escape(link.url)}"{_editable(ctx, f"links.{i}.label")}>{_t(link.label, ctx)}</a></li>'
        for i, link in enumerate(d.links)
    )
    socials_html = "".join(
        f'<a href="{escape(url)}" class="footer__social footer__social--{escape(platform)}">{escape(platform)}</a>'
        for platform, url in d.socials.items()
    )

    return f"""<footer class="footer footer--bg-{escape(s.backgroundColor)} footer--text-{escape(s.textColor)}">
  <div class="container grid grid--cols-3">
    <div class="footer__about">
      <h3{_editable(ctx, "aboutTitle")}>{about_title}</h3>
      <p{_editable(ctx, "aboutText")}>{about_text}</p>
    </div>
    <ul class="footer__links">{links_html}</ul>
    <div class="footer__contact"><span>{escape(d.email)}</span><span>{escape(d.phone)}</span></div>
  </div>
  <div class="footer__bottom">
    <p class="footer__copyright"{_editable(ctx, "copyright")}>{_t(d.copyright, ctx)}</p>
    <div class="footer__socials">{socials_html}</div>
  </div>
</footer>"""


def render_hero(b: HeroSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    height = _HERO_HEIGHT.get(s.height, _HERO_HEIGHT["small"])
    align = s.align if s.align in _ALIGN else "center"
    opacity = max(0.0, min(100.0, s.overlayOpacity)) / 100

    # Contenu legacy à un seul slide → premier slide
    slides = d.slides or [d]
    slide = slides[0]
    prefix = "slides.0." if d.slides else ""

    bg = f"background-image:url('{escape(slide.backgroundImage)}');" if slide.backgroundImage else ""
    button = ""
    if slide.buttonText:
        button = (f'<a href="{escape(slide.buttonLink)}" class="btn btn-primary"'
                  f'{_editable(ctx, prefix + "buttonText")}>{_t(slide.buttonText, ctx)}</a>')

    return f"""<div class="hero hero--align-{align}" style="min-height:{height};{bg}">
  <div class="hero__overlay" style="opacity:{opacity:.2f}"></div>
  <div class="hero__content">
    <h1 class="hero__title"{_editable(ctx, prefix + "title")}>{_t(slide.title, ctx)}</h1>
    <p class="hero__subtitle"{_editable(ctx, prefix + "subtitle")}>{_t(slide.subtitle, ctx)}</p>
    {button}
  </div>
</div>"""


def render_banner(b: BannerSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    height = _BANNER_HEIGHT.get(s.height, _BANNER_HEIGHT["small"])
    align = s.align if s.align in _ALIGN else "left"
    bg = (f"background-image:url('{escape(d.backgroundImage)}')" if d.backgroundImage
          else "background:var(--color-primary)")
    button = ""
    if d.buttonText:
        button = (f'<a href="{escape(d.buttonLink)}" class="btn btn-primary"'
                  f'{_editable(ctx, "buttonText")}>{_t(d.buttonText, ctx)}</a>')

    return f"""<div class="banner banner--align-{align}" style="min-height:{height};{bg}">
  <h2 class="banner__title"{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>
  <p class="banner__description"{_editable(ctx, "description")}>{_t(d.description, ctx)}</p>
  {button}
</div>"""


def render_features(b: FeaturesSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    title_html = f'<h2 class="features__title"{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>' if d.title else ""
    items_html = "".join(
        f"""<div class="features__item features__item--{escape(s.style)}">
  <span class="features__icon" data-icon="{escape(item.icon)}"></span>
  <h3{_editable(ctx, f"features.{i}.title")}>{_t(item.title, ctx)}</h3>
  <p{_editable(ctx, f"features.{i}.description")}>{_t(item.description, ctx)}</p>
</div>"""
        for i, item in enumerate(d.features)
    )
    return f"""<div class="features">
  {title_html}
  <div class="grid grid--cols-{_cols(s.columns)}">{items_html}</div>
</div>"""


def render_product_grid(b: ProductGridSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    # Produits fournis par l'appelant (le core ne requête pas le catalogue)
    products = ctx.extra.get("products", [])
    if s.categoryId != "all":
        products = [p for p in products if str(p.get("category_id")) == s.categoryId]
    products = products[: max(0, s.limit)]

    subtitle = (f'<p class="products__subtitle"{_editable(ctx, "subtitle")}>{_t(d.subtitle, ctx)}</p>'
                if d.subtitle else "")
    cards = "".join(
        f"""<div class="product-card">
  <h3 class="product-card__name">{_t(p.get("name", ""), ctx)}</h3>
  <span class="product-card__price">{escape(format_price(float(p.get("price", 0)), ctx.currency))}</span>
</div>"""
        for p in products
    )
    return f"""<div class="products products--{escape(s.style)}">
  <h2 class="products__title"{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>
  {subtitle}
  <div class="grid grid--cols-{_cols(s.columns, default=4)}">{cards}</div>
</div>"""


def render_testimonials(b: TestimonialsSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    items_html = "".join(
        f"""<blockquote class="testimonial">
  <p class="testimonial__text"{_editable(ctx, f"items.{i}.text")}>{_t(item.text, ctx)}</p>
  <footer>
    <strong{_editable(ctx, f"items.{i}.name")}>{_t(item.name, ctx)}</strong>
    <span{_editable(ctx, f"items.{i}.role")}>{_t(item.role, ctx)}</span>
  </footer>
</blockquote>"""
        for i, item in enumerate(d.items)
    )
    return f"""<div class="testimonials testimonials--{escape(s.style)}">
  <h2{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>
  <div class="grid grid--cols-{_cols(s.columns)}">{items_html}</div>
</div>"""


def render_faq(b: FAQSection, ctx: RenderContext) -> str:
    d = b.content

    items_html = "".join(
        f"""<details class="faq__item">
  <summary class="faq__question"{_editable(ctx, f"items.{i}.question")}>{_t(item.question, ctx)}</summary>
  <div class="faq__answer"{_editable(ctx, f"items.{i}.answer")}>{_t(item.answer, ctx)}</div>
</details>"""
        for i, item in enumerate(d.items)
    )
    return f"""<div class="faq">
  <h2 class="faq__title"{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>
  {items_html}
</div>"""


def render_rich_text(b: RichTextSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    padding = _PADDING.get(s.padding, _PADDING["medium"])
    # HTML marchand : rendu tel quel
    return f"""<div class="rich-text" style="padding:{padding}">
  <div class="rich-text__body"{_editable(ctx, "text")}>{resolve(d.text, ctx.language)}</div>
</div>"""


def render_contact_form(b: ContactFormSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    return f"""<div class="contact contact--bg-{escape(s.backgroundColor)}">
  <h2{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>
  <p{_editable(ctx, "description")}>{_t(d.description, ctx)}</p>
  <form class="contact__form">
    <input type="email" placeholder="{_t(d.emailPlaceholder, ctx)}">
    <textarea placeholder="{_t(d.messagePlaceholder, ctx)}"></textarea>
    <button type="submit" class="btn btn-primary"{_editable(ctx, "buttonText")}>{_t(d.buttonText, ctx)}</button>
  </form>
</div>"""


def render_newsletter(b: NewsletterSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    theme = "light" if s.backgroundColor == "white" else "dark"
    return f"""<div class="newsletter newsletter--{theme}">
  <h2{_editable(ctx, "title")}>{_t(d.title, ctx)}</h2>
  <p{_editable(ctx, "description")}>{_t(d.description, ctx)}</p>
  <form class="newsletter__form">
    <input type="email" placeholder="{_t(d.placeholder, ctx)}">
    <button type="submit" class="btn btn-primary"{_editable(ctx, "buttonText")}>{_t(d.buttonText, ctx)}</button>
  </form>
</div>"""


# ── Checkout ────────────────────────────────────────────────────────────────

def render_checkout_header(b: CheckoutHeaderSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    store_name = _t(d.storeName, ctx) or "My Store"
    if d.logo and d.logo != _PLACEHOLDER_LOGO:
        brand = f'<img src="{escape(d.logo)}" alt="{store_name}" class="checkout-header__logo">'
    else:
        brand = f'<h1 class="checkout-header__name"{_editable(ctx, "storeName")}>{store_name}</h1>'

    lock = ""
    if s.showLockIcon:
        label = "دفع آمن 100%" if ctx.language == "ar" else "100% Secure Payment"
        lock = f'<div class="checkout-header__secure" data-icon="Lock"><span>{label}</span></div>'

    return f"""<div class="checkout-header" style="background-color:{escape(s.backgroundColor)}">
  {brand}
  {lock}
</div>"""


_FORM_FIELDS = (
    ("name", "Full Name", "الاسم الكامل", "text"),
    ("phone", "Phone Number", "رقم الهاتف", "tel"),
    ("city", "City / Governorate", "المدينة / المحافظة", "text"),
    ("address", "Address Details", "العنوان التفصيلي", "text"),
    ("notes", "Order Notes (Optional)", "ملاحظات إضافية (اختياري)", "text"),
)


def render_checkout_form(b: CheckoutFormSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    title = _t(d.title, ctx) or "Customer Information"
    fields_html = ""
    for name, label_en, label_ar, kind in _FORM_FIELDS:
        label = f'<label for="{name}">{label_ar if ctx.language == "ar" else label_en}</label>' if s.showLabels else ""
        fields_html += f'<div class="checkout-form__field">{label}<input id="{name}" name="{name}" type="{kind}"></div>'

    return f"""<div class="checkout-form checkout-form--{escape(s.layout)} checkout-form--input-{escape(s.inputStyle)}">
  <h2 class="checkout-form__title"{_editable(ctx, "title")}>{title}</h2>
  <form>{fields_html}</form>
</div>"""


def render_order_summary(b: OrderSummarySection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    title = _t(d.title, ctx) or "Order Summary"
    # Lignes panier fournies par l'appelant : [{"name": ..., "quantity": ..., "price": ...}]
    lines = ctx.extra.get("cart", [])
    total = sum(float(l.get("price", 0)) * int(l.get("quantity", 1)) for l in lines)
    lines_html = "".join(
        f'<li class="order-summary__line"><span>{_t(l.get("name", ""), ctx)} × {int(l.get("quantity", 1))}</span>'
        f'<span>{escape(format_price(float(l.get("price", 0)) * int(l.get("quantity", 1)), ctx.currency))}</span></li>'
        for l in lines
    )
    classes = _classes("order-summary", "order-summary--sticky" if s.sticky else "")
    return f"""<div class="{classes}">
  <h2 class="order-summary__title"{_editable(ctx, "title")}>{title}</h2>
  <ul class="order-summary__lines">{lines_html}</ul>
  <div class="order-summary__total">{escape(format_price(total, ctx.currency))}</div>
</div>"""


_BADGE_ICONS = {"ShieldCheck", "Lock", "Truck", "CreditCard", "RotateCcw", "BadgeCheck"}


def render_trust_badges(b: TrustBadgesSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    justify = "center" if s.align == "center" else "start"
    cols = len(d.badges) if len(d.badges) in (2, 3) else 4
    badges_html = "".join(
        f"""<div class="trust-badge{' trust-badge--grayscale' if s.style == 'grayscale' else ''}">
  <span class="trust-badge__icon" data-icon="{badge.icon if badge.icon in _BADGE_ICONS else 'ShieldCheck'}"></span>
  <span class="trust-badge__label"{_editable(ctx, f"badges.{i}.label")}>{_t(badge.label, ctx)}</span>
</div>"""
        for i, badge in enumerate(d.badges)
    )
    return f"""<div class="trust-badges grid grid--cols-{cols}" style="justify-content:{justify}">{badges_html}</div>"""


def render_countdown_timer(b: CountdownTimerSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    duration = s.durationMinutes or 10
    if ctx.timers is not None:
        state = ctx.timers.countdown(b.id, duration)
        if state.remaining == 0:
            return ""
        remaining = state.formatted()
    else:
        seconds = int(duration * 60)
        remaining = f"{seconds // 60:02d}:{seconds % 60:02d}"

    message = _t(d.message, ctx) or "Offer expires in:"
    return f"""<div class="countdown" style="background-color:{escape(s.backgroundColor)};color:{escape(s.textColor)}">
  <span class="countdown__message"{_editable(ctx, "message")}>{message}</span>
  <span class="countdown__time">{remaining}</span>
</div>"""


def render_bump_offer(b: BumpOfferSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    price = format_price(s.price or 0, ctx.currency)
    title = _t(d.title, ctx) or "One-Time Offer"
    product = _t(d.productName, ctx) or "Special Item"
    description = _t(d.description, ctx, {"price": price})
    return f"""<div class="bump-offer" style="background-color:{escape(s.backgroundColor)};border-color:{escape(s.borderColor)}">
  <label class="bump-offer__choice"><input type="checkbox" name="bump_offer" value="{escape(b.id)}">
    <strong class="bump-offer__title"{_editable(ctx, "title")}>{title}</strong>
  </label>
  <p class="bump-offer__product"{_editable(ctx, "productName")}>{product}</p>
  <p class="bump-offer__description"{_editable(ctx, "description")}>{description}</p>
</div>"""


def render_social_proof(b: SocialProofSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    if not d.messages:
        return ""
    messages_html = "".join(
        f'<li class="social-proof__message"{_editable(ctx, f"messages.{i}")}>{_t(m, ctx)}</li>'
        for i, m in enumerate(d.messages)
    )
    return f"""<div class="social-proof social-proof--{escape(s.position)}" data-delay="{int(s.delay)}">
  <ul>{messages_html}</ul>
</div>"""


def render_exit_intent_popup(b: ExitIntentPopupSection, ctx: RenderContext) -> str:
    s, d = b.settings, b.content

    title = _t(d.title, ctx) or "Wait!"
    description = _t(d.description, ctx) or "Don't miss this offer!"
    button = _t(d.buttonText, ctx) or "Apply Discount"
    code = f'<div class="exit-popup__code">{escape(s.discountCode)}</div>' if s.discountCode else ""
    # Visible d'emblée en édition, déclenché à la sortie en vue publique
    hidden = "" if ctx.editable else " hidden"
    return f"""<div class="exit-popup" data-discount="{escape(str(s.discountAmount))}"{hidden}>
  <h2{_editable(ctx, "title")}>{title}</h2>
  <p{_editable(ctx, "description")}>{description}</p>
  {code}
  <button class="btn btn-primary" data-coupon="{escape(s.discountCode)}"{_editable(ctx, "buttonText")}>{button}</button>
</div>"""


# ── Placeholder ─────────────────────────────────────────────────────────────

def render_placeholder(section_id: str, section_type: str, reason: str = "") -> str:
    """Bloc inerte visible en édition pour une section non rendable."""
    detail = f" ({escape(reason)})" if reason else ""
    return (f'<div class="sf-placeholder" data-section-id="{escape(section_id)}">'
            f'Section non disponible : {escape(section_type)}{detail}</div>')


# ── Registry type → renderer ─────────────────────────────────────────────────

SECTION_RENDERERS: Dict[str, Callable[[Any, RenderContext], str]] = {
    "Header":          render_header,
    "Footer":          render_footer,
    "Hero":            render_hero,
    "ProductGrid":     render_product_grid,
    "Features":        render_features,
    "Banner":          render_banner,
    "Testimonials":    render_testimonials,
    "FAQ":             render_faq,
    "RichText":        render_rich_text,
    "ContactForm":     render_contact_form,
    "Newsletter":      render_newsletter,
    "CheckoutHeader":  render_checkout_header,
    "CheckoutForm":    render_checkout_form,
    "OrderSummary":    render_order_summary,
    "TrustBadges":     render_trust_badges,
    "CountdownTimer":  render_countdown_timer,
    "BumpOffer":       render_bump_offer,
    "SocialProof":     render_social_proof,
    "ExitIntentPopup": render_exit_intent_popup,
}

# Champs éditables inline par type ("*" = index de liste)
EDITABLE_FIELDS: Dict[str, Tuple[str, ...]] = {
    "Header":          ("storeName", "links.*.label"),
    "Footer":          ("aboutTitle", "aboutText", "copyright", "links.*.label"),
    "Hero":            ("title", "subtitle", "buttonText", "slides.*.title", "slides.*.subtitle", "slides.*.buttonText"),
    "ProductGrid":     ("title", "subtitle"),
    "Features":        ("title", "features.*.title", "features.*.description"),
    "Banner":          ("title", "description", "buttonText"),
    "Testimonials":    ("title", "items.*.text", "items.*.name", "items.*.role"),
    "FAQ":             ("title", "items.*.question", "items.*.answer"),
    "RichText":        ("text",),
    "ContactForm":     ("title", "description", "buttonText"),
    "Newsletter":      ("title", "description", "buttonText"),
    "CheckoutHeader":  ("storeName",),
    "CheckoutForm":    ("title",),
    "OrderSummary":    ("title",),
    "TrustBadges":     ("badges.*.label",),
    "CountdownTimer":  ("message",),
    "BumpOffer":       ("title", "description", "productName"),
    "SocialProof":     ("messages.*",),
    "ExitIntentPopup": ("title", "description", "buttonText"),
}


def is_editable_field(section_type: str, field_path: str) -> bool:
    parts = field_path.split(".")
    for pattern in EDITABLE_FIELDS.get(section_type, ()):
        expected = pattern.split(".")
        if len(expected) == len(parts) and all(
            e == p or (e == "*" and p.isdigit()) for e, p in zip(expected, parts)
        ):
            return True
    return False


def section_wrapper(inner: str, section_id: str, section_type: str, ctx: RenderContext,
                    index: int, count: int) -> str:
    """Enveloppe d'une section : affordances de sélection en édition, simple <section> en vue."""
    dir_attr = f' dir="{text_direction(ctx.language)}"'
    if not ctx.editable:
        return f'<section class="sf-section" data-section-id="{escape(section_id)}"{dir_attr}>\n{inner}\n</section>'

    selected = section_id == ctx.selected_id
    classes = _classes("sf-section", "sf-section--editable", "sf-section--selected" if selected else "")
    up = " disabled" if index == 0 else ""
    down = " disabled" if index == count - 1 else ""
    controls = f"""<div class="sf-controls" data-action="select" data-target="{escape(section_id)}">
  <span class="sf-controls__type">{escape(section_type)}</span>
  <button data-action="move-up" data-target="{escape(section_id)}"{up}>↑</button>
  <button data-action="move-down" data-target="{escape(section_id)}"{down}>↓</button>
  <button data-action="delete" data-target="{escape(section_id)}">✕</button>
</div>"""
    return (f'<section class="{classes}" data-section-id="{escape(section_id)}" '
            f'data-section-type="{escape(section_type)}" data-selected="{str(selected).lower()}"{dir_attr}>\n'
            f'{controls}\n{inner}\n</section>')
