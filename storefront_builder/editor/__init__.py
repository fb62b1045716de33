"""Session d'édition d'une page (sélection, mutations, glisser-déposer, sauvegarde)."""
from .session import EditorSession, SaveResult, SessionState, new_section_id

__all__ = ["EditorSession", "SaveResult", "SessionState", "new_section_id"]
