"""Tests sections typées — parse_section, défauts, type inconnu, formes invalides."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import ValidationError

from storefront_builder.core.registry import ComponentType, defaults_for
from storefront_builder.core.schemas import ComponentSchema
from storefront_builder.sections import (
    SECTION_MODELS, CountdownTimerSection, HeroSection, TrustBadgesSection, UnknownSection, parse_section,
)


def _section(section_type, **overrides):
    data = defaults_for(section_type)
    data.update(overrides)
    return ComponentSchema(id=f"{section_type.lower()}-1", type=section_type, **data)


def test_models_cover_every_type():
    assert set(SECTION_MODELS) == {t.value for t in ComponentType}


@pytest.mark.parametrize("section_type", [t.value for t in ComponentType])
def test_registry_defaults_parse(section_type):
    typed = parse_section(_section(section_type))
    assert typed.type == section_type
    assert isinstance(typed, SECTION_MODELS[section_type])


def test_hero_settings():
    hero = parse_section(_section("Hero"))
    assert isinstance(hero, HeroSection)
    assert hero.settings.height == "large"
    assert hero.content.title == {"en": "New Hero Section", "ar": "قسم رئيسي جديد"}


def test_missing_settings_use_local_defaults():
    timer = parse_section(ComponentSchema(id="t", type="CountdownTimer"))
    assert isinstance(timer, CountdownTimerSection)
    assert timer.settings.durationMinutes == 10


def test_unknown_keys_ignored():
    badges = parse_section(_section("TrustBadges", settings={"align": "left", "glow": True}))
    assert isinstance(badges, TrustBadgesSection)
    assert badges.settings.align == "left"
    assert not hasattr(badges.settings, "glow")


def test_unknown_type_keeps_raw_data():
    raw = ComponentSchema(id="x", type="Carousel", settings={"speed": 3}, content={"slides": [1, 2]})
    typed = parse_section(raw)
    assert isinstance(typed, UnknownSection)
    assert typed.settings == {"speed": 3}
    assert typed.content == {"slides": [1, 2]}


def test_malformed_content_raises():
    with pytest.raises(ValidationError):
        parse_section(ComponentSchema(id="f", type="Features", content={"features": "nope"}))
