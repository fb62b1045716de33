"""
Générateur CSS — variables :root depuis GlobalSettings + CSS de base.

Pipeline :
  generate_css_variables(schema.global_settings)  →  :root { --color-primary: ...; ... }
  get_base_css()                                   →  reset + grid + affordances d'édition (calculé une fois)
  generate_page_css(schema)                        →  variables + base
"""
from ..core.design_system import generate_css_variables, generate_utility_classes
from ..core.schemas import PageSchema

_CSS_CACHE: dict = {}


def get_base_css() -> str:
    """CSS commun à toutes les pages, mis en cache."""
    if "base" not in _CSS_CACHE:
        _CSS_CACHE["base"] = generate_utility_classes()
    return _CSS_CACHE["base"]


def generate_page_css(schema: PageSchema) -> str:
    """
    CSS complet d'une page :
    1. :root { CSS variables } — depuis globalSettings (couleurs + police)
    2. CSS de base
    """
    return generate_css_variables(schema.global_settings) + "\n\n" + get_base_css()
