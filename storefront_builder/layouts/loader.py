"""
Chargement d'un document de page stocké → PageSchema.

Document absent ou illisible → layout par défaut synthétisé (jamais d'erreur fatale).
"""
import json
import logging
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from ..core.errors import MalformedSchema
from ..core.schemas import PageSchema
from .defaults import synthesize

log = logging.getLogger(__name__)


def parse_document(raw: Any) -> PageSchema:
    """
    Valide un document stocké (dict ou JSON texte).
    Lève MalformedSchema si la forme est invalide (ex: `sections` absent).
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedSchema(f"Document JSON invalide : {e}") from e
    if not isinstance(raw, dict):
        raise MalformedSchema(f"Document de page attendu, reçu {type(raw).__name__}")
    if not isinstance(raw.get("sections"), list):
        raise MalformedSchema("Clé `sections` absente ou non-liste")
    try:
        return PageSchema.model_validate(raw)
    except ValidationError as e:
        raise MalformedSchema(str(e)) from e


def load_or_synthesize(raw: Optional[Any], page_slug: str) -> Tuple[PageSchema, bool]:
    """
    Retourne (schema, stored).
    stored=False si le document était absent ou illisible (layout par défaut).
    """
    if raw is None:
        log.info("Aucun document pour %r — layout par défaut", page_slug)
        return synthesize(page_slug), False
    try:
        return parse_document(raw), True
    except MalformedSchema as e:
        log.warning("Document %r illisible (%s) — layout par défaut", page_slug, e)
        return synthesize(page_slug), False
