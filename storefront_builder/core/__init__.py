"""Core module pour storefront_builder."""
from .errors import (
    PageBuilderError,
    UnknownComponentType,
    MalformedSchema,
    PersistenceFailure,
    SectionNotFound,
    ProtectedSection,
    SectionNotAllowed,
    InvalidTransition,
    InvalidPatch,
    UnknownTemplate,
)
from .i18n import LocalizedText, resolve, set_localized, resolve_placeholders, SUPPORTED_LANGUAGES
from .registry import ComponentType, COMPONENT_DEFAULTS, defaults_for, addable_types, is_known_type
from .schemas import GlobalColors, GlobalSettings, ComponentSchema, PageSchema

__all__ = [
    "PageBuilderError", "UnknownComponentType", "MalformedSchema", "PersistenceFailure",
    "SectionNotFound", "ProtectedSection", "SectionNotAllowed", "InvalidTransition", "InvalidPatch", "UnknownTemplate",
    "LocalizedText", "resolve", "set_localized", "resolve_placeholders", "SUPPORTED_LANGUAGES",
    "ComponentType", "COMPONENT_DEFAULTS", "defaults_for", "addable_types", "is_known_type",
    "GlobalColors", "GlobalSettings", "ComponentSchema", "PageSchema",
]
