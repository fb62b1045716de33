"""
i18n — résolution des champs LocalizedText.

Champ texte simple → retourné tel quel (contenu legacy, agnostique de la langue)
Champ dict {"en": ..., "ar": ...} → langue active, puis langue par défaut, puis ""
Placeholders {{price}}, {{city}}, etc. → résolus via context dict
"""
import re
from typing import Any, Dict, Optional, Union

from ..config import DEFAULT_LANGUAGE

LocalizedText = Union[str, Dict[str, str]]

SUPPORTED_LANGUAGES = ("en", "ar")
_RTL_LANGUAGES = {"ar"}

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def resolve(field: Any, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Résout un champ LocalizedText pour la langue active.
    "hello"                        → "hello"
    {"en": "Hi", "ar": "مرحبا"}, ar → "مرحبا"
    {"en": "Hi"}, ar               → "Hi" (fallback langue par défaut)
    Ne lève jamais d'exception.
    """
    if isinstance(field, str):
        return field
    if isinstance(field, dict):
        value = field.get(language)
        if not value:
            value = field.get(DEFAULT_LANGUAGE)
        return value if isinstance(value, str) else ""
    return ""


def set_localized(field: Any, language: str, value: str) -> LocalizedText:
    """
    Retourne le champ avec uniquement l'entrée `language` remplacée.
    Les autres langues sont conservées ; un texte simple reste un texte simple.
    """
    if isinstance(field, dict):
        return {**field, language: value}
    if isinstance(field, str):
        return value
    return {language: value}


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """
    Remplace les placeholders {{price}}, {{city}}, etc. par les valeurs du contexte.
    Les placeholders sans correspondance sont laissés intacts.
    """
    if not context or not text:
        return text

    def replacer(match):
        placeholder = match.group(1)
        return str(context.get(placeholder, match.group(0)))

    return _PLACEHOLDER_RE.sub(replacer, text)


def localize(field: Any, language: str = DEFAULT_LANGUAGE, context: Optional[dict] = None) -> str:
    """
    Pipeline complet : résolution langue → placeholders.
    Usage : localize(content["description"], "ar", {"price": "5.00 SAR"})
    """
    return resolve_placeholders(resolve(field, language), context)


def text_direction(language: str) -> str:
    return "rtl" if language in _RTL_LANGUAGES else "ltr"
