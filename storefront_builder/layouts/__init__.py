"""Layouts de page : défauts synthétisés, templates de boutique, chargement des documents."""
from .defaults import DEFAULT_GLOBAL_SETTINGS, synthesize, default_store_layout, default_checkout_layout
from .loader import parse_document, load_or_synthesize
from .templates import StoreTemplate, STORE_TEMPLATES, get_template, instantiate

__all__ = [
    "DEFAULT_GLOBAL_SETTINGS", "synthesize", "default_store_layout", "default_checkout_layout",
    "parse_document", "load_or_synthesize",
    "StoreTemplate", "STORE_TEMPLATES", "get_template", "instantiate",
]
