"""
Événements émis par les renderers en mode édition, consommés par l'EditorSession.

ContentPatch       — édition inline d'un champ de contenu (chemin pointé)
SettingsPatch      — merge-patch des settings d'une section
SelectionChanged   — sélection (ou désélection) d'une section
"""
import copy
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .errors import InvalidPatch
from .i18n import set_localized
from .schemas import ComponentSchema


class ContentPatch(BaseModel):
    section_id: str
    field_path: str = Field(..., description='Chemin dans content, ex: "storeName", "links.0.label"')
    new_value: Any = None


class SettingsPatch(BaseModel):
    section_id: str
    settings: Dict[str, Any] = Field(default_factory=dict)


class SelectionChanged(BaseModel):
    section_id: Optional[str] = None


EditorEvent = Union[ContentPatch, SettingsPatch, SelectionChanged]


# ── Chemins de champ ─────────────────────────────────────────────────────────

def split_path(field_path: str) -> List[Union[str, int]]:
    """"content.links.0.label" → ["links", 0, "label"] (préfixe content. optionnel)."""
    parts = [p for p in field_path.split(".") if p]
    if parts and parts[0] == "content":
        parts = parts[1:]
    if not parts:
        raise InvalidPatch(f"Chemin de champ vide : {field_path!r}")
    return [int(p) if p.isdigit() else p for p in parts]


def get_path(content: Dict[str, Any], field_path: str) -> Any:
    """Valeur au chemin donné, None si absente."""
    node: Any = content
    for part in split_path(field_path):
        if isinstance(part, int) and isinstance(node, list) and part < len(node):
            node = node[part]
        elif isinstance(part, str) and isinstance(node, dict):
            node = node.get(part)
        else:
            return None
    return node


def _copy_container(child: Any, field_path: str) -> Any:
    if child is None:
        return {}
    if isinstance(child, list):
        return list(child)
    if isinstance(child, dict):
        return dict(child)
    raise InvalidPatch(f"Chemin invalide : {field_path!r}")


def apply_content_patch(content: Dict[str, Any], field_path: str, value: Any) -> Dict[str, Any]:
    """
    Retourne un nouveau content avec `value` au chemin donné.
    Seuls les conteneurs traversés sont copiés ; les champs voisins restent intacts.
    """
    parts = split_path(field_path)
    result = dict(content)
    node: Any = result
    for i, part in enumerate(parts):
        last = i == len(parts) - 1
        if isinstance(node, dict) and isinstance(part, str):
            if last:
                node[part] = copy.deepcopy(value)
                break
            child = _copy_container(node.get(part), field_path)
            node[part] = child
            node = child
        elif isinstance(node, list) and isinstance(part, int) and part < len(node):
            if last:
                node[part] = copy.deepcopy(value)
                break
            child = _copy_container(node[part], field_path)
            node[part] = child
            node = child
        else:
            raise InvalidPatch(f"Chemin invalide : {field_path!r}")
    return result


def localized_patch(section: ComponentSchema, field_path: str, value: str, language: str) -> ContentPatch:
    """
    Construit le ContentPatch d'une édition inline dans la langue active.
    Un champ multi-langue garde toutes ses autres langues (jamais réduit à un texte simple).
    """
    current = get_path(section.content, field_path)
    return ContentPatch(
        section_id=section.id,
        field_path=".".join(str(p) for p in split_path(field_path)),
        new_value=set_localized(current, language, value),
    )
