"""
Design system — dérive les CSS variables d'une page depuis ses GlobalSettings
(4 couleurs + police).
"""
import re

from .schemas import GlobalSettings

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convertit #RRGGBB (ou #RGB) en (R, G, B). Couleur invalide → noir."""
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        return (0, 0, 0)
    value = m.group(1)
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    return tuple(int(value[i:i+2], 16) for i in (0, 2, 4))


def is_hex_color(value: str) -> bool:
    return bool(_HEX_RE.match(value.strip()))


def lighten(hex_color: str, percent: int = 20) -> str:
    """Éclaircit une couleur de X%."""
    r, g, b = hex_to_rgb(hex_color)
    factor = 1 + (percent / 100)
    r = min(255, int(r * factor))
    g = min(255, int(g * factor))
    b = min(255, int(b * factor))
    return f"#{r:02x}{g:02x}{b:02x}"


def darken(hex_color: str, percent: int = 20) -> str:
    """Assombrit une couleur de X%."""
    r, g, b = hex_to_rgb(hex_color)
    factor = 1 - (percent / 100)
    r = max(0, int(r * factor))
    g = max(0, int(g * factor))
    b = max(0, int(b * factor))
    return f"#{r:02x}{g:02x}{b:02x}"


def _derived(color: str) -> tuple[str, str]:
    # Couleurs nommées (ex: "white") : pas de dérivation possible
    if not is_hex_color(color):
        return color, color
    return lighten(color, 15), darken(color, 15)


def generate_css_variables(settings: GlobalSettings) -> str:
    """
    Génère le bloc :root {} de la page.

    Returns:
        CSS :root {} avec les variables couleurs + police
    """
    colors = settings.colors
    primary_light, primary_dark = _derived(colors.primary)
    secondary_light, secondary_dark = _derived(colors.secondary)
    r, g, b = hex_to_rgb(colors.primary)

    return f""":root {{
  --color-primary:         {colors.primary};
  --color-primary-light:   {primary_light};
  --color-primary-dark:    {primary_dark};
  --color-primary-rgb:     {r}, {g}, {b};
  --color-secondary:       {colors.secondary};
  --color-secondary-light: {secondary_light};
  --color-secondary-dark:  {secondary_dark};
  --color-bg:   {colors.background};
  --color-text: {colors.text};
  --font-family-base: '{settings.font}', -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
  --spacing-sm: 16px;
  --spacing-md: 32px;
  --spacing-lg: 48px;
  --border-radius-md: 8px;
}}"""


def generate_utility_classes() -> str:
    """CSS de base (reset, container, boutons, affordances d'édition)."""
    return """
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
  font-family: var(--font-family-base);
  color: var(--color-text);
  background: var(--color-bg);
  line-height: 1.6;
}
.container { width: 100%; max-width: 1200px; margin: 0 auto; padding: 0 16px; }
.btn {
  display: inline-block;
  padding: 10px 24px;
  font-weight: 600;
  border-radius: var(--border-radius-md);
  text-decoration: none;
  border: none;
  cursor: pointer;
}
.btn-primary { background: var(--color-primary); color: #fff; }
.grid { display: grid; gap: 16px; }
.grid--cols-2 { grid-template-columns: repeat(2, 1fr); }
.grid--cols-3 { grid-template-columns: repeat(3, 1fr); }
.grid--cols-4 { grid-template-columns: repeat(4, 1fr); }
@media (max-width: 768px) {
  .grid--cols-2, .grid--cols-3, .grid--cols-4 { grid-template-columns: 1fr; }
}

/* === Éditeur === */
.sf-section--editable { position: relative; outline: 1px dashed transparent; }
.sf-section--editable:hover { outline-color: rgba(var(--color-primary-rgb), 0.4); }
.sf-section--selected { outline: 2px solid var(--color-primary); }
.sf-controls {
  position: absolute; top: 0; left: 0; right: 0;
  display: flex; justify-content: space-between;
  background: var(--color-primary); color: #fff; font-size: 12px; padding: 2px 8px;
}
.sf-placeholder {
  padding: 24px; text-align: center; color: #64748b;
  border: 2px dashed #cbd5e1; background: #f8fafc;
}
[contenteditable="true"] { cursor: text; }
""".strip()
