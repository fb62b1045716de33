"""Tests registry des défauts, PageSchema et layouts par défaut / templates."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import ValidationError

from storefront_builder.core.errors import MalformedSchema, UnknownComponentType
from storefront_builder.core.registry import (
    COMPONENT_DEFAULTS, ComponentType, addable_types, defaults_for, is_known_type, protected_types,
)
from storefront_builder.core.schemas import ComponentSchema, PageSchema
from storefront_builder.layouts import (
    STORE_TEMPLATES, instantiate, load_or_synthesize, parse_document, synthesize,
)


# ── Registry ──────────────────────────────────────────────────────────────────

def test_every_type_has_defaults():
    assert set(COMPONENT_DEFAULTS) == {t.value for t in ComponentType}
    for entry in COMPONENT_DEFAULTS.values():
        assert set(entry) == {"settings", "content"}


def test_defaults_for_trust_badges():
    d = defaults_for("TrustBadges")
    assert [b["icon"] for b in d["content"]["badges"]] == ["Lock", "ShieldCheck", "Truck"]
    assert d["settings"] == {"align": "center", "style": "color"}


def test_defaults_for_returns_independent_copy():
    d = defaults_for("TrustBadges")
    d["content"]["badges"].clear()
    d["settings"]["align"] = "left"
    assert len(defaults_for("TrustBadges")["content"]["badges"]) == 3
    assert defaults_for("TrustBadges")["settings"]["align"] == "center"


def test_defaults_for_accepts_enum():
    assert defaults_for(ComponentType.COUNTDOWN_TIMER)["settings"]["durationMinutes"] == 10


def test_unknown_type_raises():
    with pytest.raises(UnknownComponentType) as exc:
        defaults_for("Carousel")
    assert exc.value.component_type == "Carousel"
    assert isinstance(exc.value, KeyError)
    assert not is_known_type("Carousel")


def test_addable_types_checkout():
    types = addable_types("checkout")
    assert "CheckoutForm" in types and "BumpOffer" in types
    assert "Banner" in types and "RichText" in types
    assert "Hero" not in types and "ProductGrid" not in types


def test_addable_types_home():
    types = addable_types("home")
    assert len(types) == 11
    assert types[0] == "Header"
    assert "CheckoutForm" not in types


def test_protected_types():
    assert protected_types("checkout") == {"CheckoutForm", "OrderSummary"}
    assert protected_types("home") == frozenset()


# ── PageSchema ────────────────────────────────────────────────────────────────

def test_page_schema_wire_format():
    doc = {
        "globalSettings": {"colors": {"primary": "#111111"}, "font": "Cairo"},
        "sections": [{"id": "a", "type": "Hero", "settings": {}, "content": {}}],
    }
    schema = PageSchema.model_validate(doc)
    assert schema.global_settings.font == "Cairo"
    assert schema.global_settings.colors.secondary == "#475569"
    out = schema.to_document()
    assert "globalSettings" in out
    assert out["sections"][0]["id"] == "a"


def test_page_schema_rejects_duplicate_ids():
    with pytest.raises(ValidationError):
        PageSchema(sections=[ComponentSchema(id="a", type="Hero"), ComponentSchema(id="a", type="FAQ")])


def test_page_schema_lookup():
    schema = PageSchema(sections=[ComponentSchema(id="a", type="Hero"), ComponentSchema(id="b", type="FAQ")])
    assert schema.index_of("b") == 1
    assert schema.index_of("zz") == -1
    assert schema.find("a").type == "Hero"
    assert schema.find("zz") is None
    assert schema.section_ids == ["a", "b"]


@pytest.mark.parametrize("settings", [
    {"font": "x'}</style><script>alert(1)</script>"},
    {"font": "Inter; color: red"},
    {"colors": {"primary": "red;}</style><script>"}},
    {"colors": {"background": "url(javascript:x)"}},
])
def test_global_settings_reject_style_injection(settings):
    doc = {"globalSettings": settings, "sections": []}
    with pytest.raises(ValidationError):
        PageSchema.model_validate(doc)
    with pytest.raises(MalformedSchema):
        parse_document(doc)


def test_global_settings_accept_hex_and_named_colors():
    schema = PageSchema.model_validate({
        "globalSettings": {"colors": {"primary": "#fff", "secondary": "slategray", "text": " #1E293B "},
                           "font": "Noto Sans Arabic"},
        "sections": [],
    })
    assert schema.global_settings.colors.secondary == "slategray"
    assert schema.global_settings.colors.text == "#1E293B"
    assert schema.global_settings.font == "Noto Sans Arabic"


# ── Layouts ───────────────────────────────────────────────────────────────────

def test_synthesize_checkout():
    schema = synthesize("checkout")
    assert schema.section_ids == ["header-1", "form-1", "summary-1", "badges-1"]
    assert [s.type for s in schema.sections] == ["CheckoutHeader", "CheckoutForm", "OrderSummary", "TrustBadges"]
    assert schema.sections[3].content == defaults_for("TrustBadges")["content"]


def test_synthesize_home_and_other_slugs():
    assert synthesize("home").section_ids == ["hero-1", "features-1", "products-1"]
    assert synthesize("about").section_ids == ["hero-1", "features-1", "products-1"]
    assert synthesize("home").global_settings.colors.primary == "#0f172a"


def test_synthesize_returns_fresh_objects():
    a = synthesize("checkout")
    a.sections[0].content["storeName"] = "Changed"
    assert synthesize("checkout").sections[0].content["storeName"] != "Changed"


def test_parse_document_requires_sections():
    with pytest.raises(MalformedSchema):
        parse_document({"globalSettings": {}})


def test_parse_document_rejects_bad_json_and_types():
    with pytest.raises(MalformedSchema):
        parse_document("{not json")
    with pytest.raises(MalformedSchema):
        parse_document([])
    with pytest.raises(MalformedSchema):
        parse_document({"sections": [{"type": "Hero"}]})


def test_parse_document_accepts_json_text():
    schema = parse_document('{"sections": [{"id": "x", "type": "FAQ"}]}')
    assert schema.section_ids == ["x"]


def test_load_or_synthesize():
    schema, stored = load_or_synthesize(None, "checkout")
    assert not stored and schema.section_ids[0] == "header-1"

    schema, stored = load_or_synthesize({"oops": 1}, "home")
    assert not stored and schema.section_ids[0] == "hero-1"

    schema, stored = load_or_synthesize({"sections": []}, "home")
    assert stored and schema.sections == []


# ── Templates ─────────────────────────────────────────────────────────────────

def test_three_templates():
    assert set(STORE_TEMPLATES) == {"modern", "classic", "minimal"}
    assert STORE_TEMPLATES["classic"].schema_.global_settings.colors.primary == "#059669"


def test_template_sections_are_known_types():
    for template in STORE_TEMPLATES.values():
        assert all(is_known_type(s.type) for s in template.schema_.sections)


def test_instantiate_regenerates_ids():
    template = STORE_TEMPLATES["modern"]
    schema = instantiate(template)
    assert [s.type for s in schema.sections] == [s.type for s in template.schema_.sections]
    assert not set(schema.section_ids) & set(template.schema_.section_ids)
    schema.sections[0].content["storeName"] = "Mine"
    assert template.schema_.sections[0].content["storeName"] != "Mine"
