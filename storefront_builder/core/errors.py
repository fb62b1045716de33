"""
Erreurs du page builder.

Aucune n'est fatale : le pire cas est "page rendue avec placeholders"
ou "sauvegarde non effectuée, réessayer".
"""


class PageBuilderError(Exception):
    """Erreur de base du page builder."""


class UnknownComponentType(PageBuilderError, KeyError):
    """Type de section absent du registry."""

    def __init__(self, component_type: str):
        self.component_type = component_type
        super().__init__(f"Type de section inconnu : {component_type!r}")

    def __str__(self) -> str:
        return self.args[0]


class MalformedSchema(PageBuilderError, ValueError):
    """Document chargé qui ne passe pas les contrôles de forme (ex: `sections` absent)."""


class PersistenceFailure(PageBuilderError):
    """Échec I/O de sauvegarde ou de chargement — récupérable."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class SectionNotFound(PageBuilderError, KeyError):
    def __init__(self, section_id: str):
        self.section_id = section_id
        super().__init__(f"Section introuvable : {section_id!r}")

    def __str__(self) -> str:
        return self.args[0]


class ProtectedSection(PageBuilderError):
    """Section indispensable à la page (ex: CheckoutForm sur checkout)."""


class SectionNotAllowed(PageBuilderError):
    """Type connu mais non ajoutable sur ce type de page."""


class InvalidPatch(PageBuilderError, ValueError):
    """Chemin de champ introuvable ou non éditable."""


class InvalidTransition(PageBuilderError):
    """Action incompatible avec l'état courant de la session d'édition."""


class UnknownTemplate(PageBuilderError, KeyError):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template inconnu : {template_id!r}")

    def __str__(self) -> str:
        return self.args[0]
