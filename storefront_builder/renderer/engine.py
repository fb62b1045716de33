"""
Moteur de rendu — PageSchema → HTML, section par section, dans l'ordre du schéma.

Type inconnu        → placeholder inerte en édition, ignoré en vue publique
Renderer en échec   → contenu à la section (placeholder / ignoré) + warning
Mode édition        → chaque section enveloppée dans ses affordances (sélection, ↑ ↓ ✕)
"""
import logging
from html import escape
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from ..core.errors import InvalidPatch, SectionNotFound, UnknownComponentType
from ..core.events import ContentPatch, localized_patch, split_path
from ..core.i18n import text_direction
from ..core.schemas import ComponentSchema, PageSchema
from ..sections import SECTION_MODELS, parse_section
from .base import RenderContext, RenderMode
from .css import generate_page_css
from .html import SECTION_RENDERERS, is_editable_field, render_placeholder, section_wrapper

log = logging.getLogger(__name__)


class RenderedSection(BaseModel):
    section_id: str
    type: str
    html: str
    placeholder: bool = False


class RenderedPage(BaseModel):
    html: str = ""
    sections: List[RenderedSection] = Field(default_factory=list)

    @property
    def section_ids(self) -> List[str]:
        return [s.section_id for s in self.sections]


def register_renderer(section_type: str, renderer: Callable) -> None:
    """Branche (ou remplace) le renderer d'un type connu."""
    if section_type not in SECTION_MODELS:
        raise UnknownComponentType(section_type)
    SECTION_RENDERERS[section_type] = renderer


def _render_inner(section: ComponentSchema, ctx: RenderContext) -> Optional[str]:
    """HTML brut de la section, None si non rendable (type inconnu ou renderer en échec)."""
    renderer = SECTION_RENDERERS.get(section.type)
    if renderer is None or section.type not in SECTION_MODELS:
        log.warning("Section %s : type inconnu %r", section.id, section.type)
        return None
    try:
        return renderer(parse_section(section), ctx)
    except Exception as e:
        log.warning("Section %s (%s) non rendue : %s", section.id, section.type, e)
        return None


def render(schema: PageSchema, mode: RenderMode = RenderMode.VIEW,
           context: Optional[RenderContext] = None) -> RenderedPage:
    """
    Rend toutes les sections de la page.

    Args:
        schema:  document de page
        mode:    VIEW (public, sans effet de bord) ou EDIT (affordances + placeholders)
        context: langue, devise, store, sélection, timers — transmis tel quel aux renderers

    Returns:
        RenderedPage (HTML composé + une entrée par section émise)
    """
    ctx = (context or RenderContext()).model_copy(update={"mode": mode})
    if ctx.timers is not None:
        ctx.timers.sync(schema.section_ids)

    rendered: List[RenderedSection] = []
    count = len(schema.sections)
    for index, section in enumerate(schema.sections):
        inner = _render_inner(section, ctx)
        placeholder = inner is None
        if placeholder:
            if not ctx.editable:
                continue
            inner = render_placeholder(section.id, section.type)
        elif not inner and not ctx.editable:
            # Renderer sans sortie (ex: timer expiré, aucun message)
            continue
        rendered.append(RenderedSection(
            section_id=section.id,
            type=section.type,
            html=section_wrapper(inner, section.id, section.type, ctx, index, count),
            placeholder=placeholder,
        ))

    return RenderedPage(html="\n".join(s.html for s in rendered), sections=rendered)


def render_document(schema: PageSchema, mode: RenderMode = RenderMode.VIEW,
                    context: Optional[RenderContext] = None, title: str = "") -> str:
    """Génère le HTML complet d'une page (lang/dir + CSS de la page)."""
    ctx = context or RenderContext()
    page = render(schema, mode, ctx)
    css = generate_page_css(schema)

    return f"""<!DOCTYPE html>
<html lang="{escape(ctx.language)}" dir="{text_direction(ctx.language)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title or ctx.store_slug or "Store")}</title>
  <style>{css}</style>
</head>
<body>
{page.html}
</body>
</html>"""


def inline_edit(schema: PageSchema, section_id: str, field_path: str, value: str,
                language: str) -> ContentPatch:
    """
    Traduit une édition inline (texte saisi dans la langue active) en ContentPatch.
    Lève SectionNotFound / InvalidPatch si la cible n'est pas éditable.
    """
    section = schema.find(section_id)
    if section is None:
        raise SectionNotFound(section_id)
    normalized = ".".join(str(p) for p in split_path(field_path))
    if not is_editable_field(section.type, normalized):
        raise InvalidPatch(f"Champ non éditable pour {section.type} : {field_path!r}")
    return localized_patch(section, normalized, value, language)


__all__ = [
    "RenderedSection", "RenderedPage", "render", "render_document",
    "inline_edit", "register_renderer",
]
