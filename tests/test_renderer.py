"""Tests moteur de rendu + renderers par type + édition inline."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from storefront_builder.core.errors import InvalidPatch, SectionNotFound, UnknownComponentType
from storefront_builder.core.events import ContentPatch
from storefront_builder.core.registry import defaults_for
from storefront_builder.core.schemas import ComponentSchema, GlobalColors, GlobalSettings, PageSchema
from storefront_builder.renderer import (
    RenderContext, RenderMode, TimerRegistry, inline_edit, register_renderer, render, render_document,
)
from storefront_builder.renderer.html import SECTION_RENDERERS, is_editable_field


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_section(section_type, section_id=None, settings=None, content=None):
    data = defaults_for(section_type)
    if settings is not None:
        data["settings"] = settings
    if content is not None:
        data["content"] = content
    return ComponentSchema(id=section_id or f"{section_type.lower()}-1", type=section_type, **data)


def make_page(*sections):
    return PageSchema(sections=list(sections))


def edit_ctx(**kwargs):
    return RenderContext(mode=RenderMode.EDIT, **kwargs)


# ── Ordre / types inconnus ────────────────────────────────────────────────────

def test_view_renders_in_schema_order():
    page = make_page(make_section("Banner", "b"), make_section("Hero", "h"), make_section("FAQ", "f"))
    result = render(page, RenderMode.VIEW)
    assert result.section_ids == ["b", "h", "f"]
    html = result.html
    assert html.index('data-section-id="b"') < html.index('data-section-id="h"') < html.index('data-section-id="f"')


def test_view_skips_unknown_type():
    page = make_page(make_section("Hero", "h"), ComponentSchema(id="x", type="Carousel"), make_section("FAQ", "f"))
    result = render(page, RenderMode.VIEW)
    assert result.section_ids == ["h", "f"]
    assert "Carousel" not in result.html


def test_edit_shows_placeholder_for_unknown_type():
    page = make_page(ComponentSchema(id="x", type="Carousel"))
    result = render(page, RenderMode.EDIT)
    assert result.sections[0].placeholder is True
    assert "sf-placeholder" in result.html
    assert "Carousel" in result.html


def test_failing_section_is_contained():
    bad = ComponentSchema(id="bad", type="Features", content={"features": "nope"})
    page = make_page(make_section("Hero", "h"), bad, make_section("FAQ", "f"))

    assert render(page, RenderMode.VIEW).section_ids == ["h", "f"]

    edit = render(page, RenderMode.EDIT)
    assert edit.section_ids == ["h", "bad", "f"]
    assert [s.placeholder for s in edit.sections] == [False, True, False]


def test_renderer_exception_is_contained():
    def broken(section, ctx):
        raise ValueError("boom")

    original = SECTION_RENDERERS["Banner"]
    register_renderer("Banner", broken)
    try:
        result = render(make_page(make_section("Banner", "b"), make_section("FAQ", "f")), RenderMode.VIEW)
    finally:
        register_renderer("Banner", original)
    assert result.section_ids == ["f"]


def test_unexpected_renderer_error_is_contained():
    def broken(section, ctx):
        raise RuntimeError("boom")

    original = SECTION_RENDERERS["FAQ"]
    register_renderer("FAQ", broken)
    try:
        page = make_page(make_section("Hero", "h"), make_section("FAQ", "f"))
        view = render(page, RenderMode.VIEW)
        edit = render(page, RenderMode.EDIT)
    finally:
        register_renderer("FAQ", original)
    assert view.section_ids == ["h"]
    assert edit.section_ids == ["h", "f"]
    assert edit.sections[1].placeholder is True


def test_countdown_out_of_range_duration_is_contained():
    timer = make_section("CountdownTimer", "t", settings={"durationMinutes": 1e308})
    page = make_page(make_section("Hero", "h"), timer)

    assert render(page, RenderMode.VIEW, RenderContext(timers=TimerRegistry())).section_ids == ["h"]
    edit = render(page, RenderMode.EDIT, RenderContext(timers=TimerRegistry()))
    assert [s.placeholder for s in edit.sections] == [False, True]


def test_register_renderer_unknown_type():
    with pytest.raises(UnknownComponentType):
        register_renderer("Carousel", lambda s, c: "")


def test_register_renderer_replaces_dispatch():
    original = SECTION_RENDERERS["RichText"]
    register_renderer("RichText", lambda section, ctx: f"<p>custom {section.id}</p>")
    try:
        result = render(make_page(make_section("RichText", "rt")), RenderMode.VIEW)
    finally:
        register_renderer("RichText", original)
    assert "<p>custom rt</p>" in result.html


# ── Mode édition ──────────────────────────────────────────────────────────────

def test_view_mode_has_no_edit_affordances():
    html = render(make_page(make_section("Hero")), RenderMode.VIEW).html
    assert "contenteditable" not in html
    assert "sf-controls" not in html


def test_edit_mode_marks_editable_fields():
    html = render(make_page(make_section("Header")), RenderMode.EDIT).html
    assert 'data-field="storeName"' in html
    assert 'data-field="links.0.label"' in html
    assert 'contenteditable="true"' in html


def test_edit_mode_selection_and_move_flags():
    page = make_page(make_section("Hero", "h"), make_section("FAQ", "f"))
    result = render(page, RenderMode.EDIT, RenderContext(selected_id="f"))
    first, second = result.sections
    assert 'data-selected="false"' in first.html
    assert 'data-selected="true"' in second.html
    assert "sf-section--selected" in second.html
    assert 'data-action="move-up" data-target="h" disabled' in first.html
    assert 'data-action="move-down" data-target="f" disabled' in second.html
    assert 'data-action="delete" data-target="f"' in second.html


# ── Renderers par type ────────────────────────────────────────────────────────

def test_hero_arabic():
    html = render(make_page(make_section("Hero")), RenderMode.VIEW, RenderContext(language="ar")).html
    assert "قسم رئيسي جديد" in html
    assert 'dir="rtl"' in html


def test_hero_legacy_plain_string():
    hero = make_section("Hero", content={"title": "Legacy title", "subtitle": "Sub"})
    html = render(make_page(hero), RenderMode.VIEW, RenderContext(language="ar")).html
    assert "Legacy title" in html


def test_text_is_escaped():
    hero = make_section("Hero", content={"title": "<script>x</script>"})
    html = render(make_page(hero), RenderMode.VIEW).html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_rich_text_padding_default():
    html = render(make_page(make_section("RichText", settings={})), RenderMode.VIEW).html
    assert "padding:32px" in html
    html = render(make_page(make_section("RichText", settings={"padding": "huge"})), RenderMode.VIEW).html
    assert "padding:32px" in html
    html = render(make_page(make_section("RichText", settings={"padding": "large"})), RenderMode.VIEW).html
    assert "padding:48px" in html


def test_rich_text_keeps_markup():
    html = render(make_page(make_section("RichText")), RenderMode.VIEW).html
    assert "<h2>Rich Text Section</h2>" in html


def test_bump_offer_price_placeholder():
    page = make_page(make_section("BumpOffer"))
    html = render(page, RenderMode.VIEW, RenderContext(currency="SAR")).html
    assert "Add Priority Processing for just 5.00 SAR" in html
    assert "{{price}}" not in html


def test_trust_badges_unknown_icon_falls_back():
    badges = make_section("TrustBadges", content={"badges": [{"icon": "Rocket", "label": "Fast"}]})
    html = render(make_page(badges), RenderMode.VIEW).html
    assert 'data-icon="ShieldCheck"' in html
    assert "Rocket" not in html


def test_checkout_header_lock_badge():
    with_lock = render(make_page(make_section("CheckoutHeader")), RenderMode.VIEW).html
    assert "100% Secure Payment" in with_lock
    without = make_section("CheckoutHeader", settings={"showLockIcon": False})
    assert "100% Secure Payment" not in render(make_page(without), RenderMode.VIEW).html


def test_social_proof_without_messages():
    empty = make_section("SocialProof", content={"messages": []})
    assert render(make_page(empty), RenderMode.VIEW).sections == []
    # Reste sélectionnable en édition
    assert render(make_page(empty), RenderMode.EDIT).section_ids == ["socialproof-1"]


def test_exit_popup_shows_discount_code():
    html = render(make_page(make_section("ExitIntentPopup")), RenderMode.VIEW).html
    assert "SAVE10" in html


def test_product_grid_uses_context_products():
    products = [{"name": f"P{i}", "price": 10 + i, "category_id": "c1"} for i in range(6)]
    grid = make_section("ProductGrid", settings={"limit": 3, "columns": 3})
    html = render(make_page(grid), RenderMode.VIEW, RenderContext(extra={"products": products})).html
    assert "P0" in html and "P2" in html
    assert "P3" not in html
    assert "10.00 USD" in html


def test_order_summary_total():
    cart = [{"name": "Shoes", "price": 20, "quantity": 2}, {"name": "Socks", "price": 5}]
    ctx = RenderContext(currency="EUR", extra={"cart": cart})
    html = render(make_page(make_section("OrderSummary")), RenderMode.VIEW, ctx).html
    assert "45.00 EUR" in html
    assert "Shoes × 2" in html


# ── Timers ────────────────────────────────────────────────────────────────────

def test_countdown_renders_remaining_time():
    timers = TimerRegistry()
    html = render(make_page(make_section("CountdownTimer", "t")), RenderMode.VIEW,
                  RenderContext(timers=timers)).html
    assert "10:00" in html
    assert "t" in timers


def test_expired_countdown_is_omitted():
    timers = TimerRegistry()
    timer = make_section("CountdownTimer", "t", settings={"durationMinutes": 0.5})
    ctx = RenderContext(timers=timers)
    assert render(make_page(timer), RenderMode.VIEW, ctx).section_ids == ["t"]
    timers.tick(60)
    assert timers.get("t").remaining == 0
    assert render(make_page(timer), RenderMode.VIEW, ctx).section_ids == []


def test_render_cancels_timers_of_removed_sections():
    timers = TimerRegistry()
    ctx = RenderContext(timers=timers)
    render(make_page(make_section("CountdownTimer", "t")), RenderMode.VIEW, ctx)
    render(make_page(make_section("FAQ", "f")), RenderMode.VIEW, ctx)
    assert "t" not in timers


# ── Document complet ──────────────────────────────────────────────────────────

def test_render_document():
    page = PageSchema(
        global_settings=GlobalSettings(colors=GlobalColors(primary="#6366f1"), font="Cairo"),
        sections=[make_section("Hero")],
    )
    html = render_document(page, RenderMode.VIEW, RenderContext(language="ar"), title="Boutique")
    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="ar" dir="rtl">' in html
    assert "--color-primary:         #6366f1;" in html
    assert "--color-primary-rgb:     99, 102, 241;" in html
    assert "'Cairo'" in html
    assert "<title>Boutique</title>" in html


# ── Édition inline ────────────────────────────────────────────────────────────

def test_inline_edit_preserves_other_languages():
    timer = make_section("CountdownTimer", "t", content={"message": {"en": "Hi", "ar": "قديم"}})
    patch = inline_edit(make_page(timer), "t", "content.message", "جديد", "ar")
    assert patch == ContentPatch(section_id="t", field_path="message", new_value={"en": "Hi", "ar": "جديد"})


def test_inline_edit_nested_list_field():
    header = make_section("Header", "h")
    patch = inline_edit(make_page(header), "h", "links.1.label", "Shop", "en")
    assert patch.field_path == "links.1.label"
    assert patch.new_value == {"en": "Shop", "ar": "المنتجات"}


def test_inline_edit_rejects_non_editable_field():
    with pytest.raises(InvalidPatch):
        inline_edit(make_page(make_section("Hero", "h")), "h", "buttonLink", "/x", "en")


def test_inline_edit_unknown_section():
    with pytest.raises(SectionNotFound):
        inline_edit(make_page(), "nope", "title", "x", "en")


def test_editable_field_patterns():
    assert is_editable_field("SocialProof", "messages.3")
    assert not is_editable_field("SocialProof", "messages.x")
    assert is_editable_field("Features", "features.0.title")
    assert not is_editable_field("Features", "features.0.icon")
    assert not is_editable_field("Carousel", "title")
