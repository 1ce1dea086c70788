from ..ramp import MODES

# CSS variable -> (canonical keys tried in order, light default, dark default)
SHIKI_VARIABLES = (
    ("--shiki-background", ("bg",), "#ffffff", "#1e1e1e"),
    ("--shiki-foreground", ("tx",), "#000000", "#d4d4d4"),
    ("--shiki-token-comment", ("tx_3",), "#6a737d", "#6a9955"),
    ("--shiki-token-keyword", ("pr", "sc"), "#d73a49", "#569cd6"),
    ("--shiki-token-string", ("ac_1", "ac_2"), "#032f62", "#ce9178"),
    ("--shiki-token-constant", ("sc", "pr"), "#005cc5", "#4fc1ff"),
    ("--shiki-token-function", ("ac_2", "pr"), "#6f42c1", "#dcdcaa"),
    ("--shiki-token-parameter", ("tx_2",), "#24292e", "#9cdcfe"),
    ("--shiki-token-punctuation", ("tx_2",), "#24292e", "#d4d4d4"),
    ("--shiki-token-string-expression", ("ac_3", "ac_1"), "#22863a", "#b5cea8"),
    ("--shiki-token-link", ("pr", "sc"), "#0366d6", "#4fc1ff"),
)

CONTAINER_STYLES = """/* Shiki CSS Variables Theme Styles */
.shiki-css-container {
  background: var(--shiki-background);
  color: var(--shiki-foreground);
  font-family: 'Fira Code', 'SF Mono', Monaco, 'Cascadia Code', 'Roboto Mono', Consolas, 'Courier New', monospace;
  line-height: 1.5;
  padding: 1rem;
  border-radius: 0.375rem;
  overflow-x: auto;
}

.shiki-css-container pre {
  background: transparent !important;
  margin: 0;
  padding: 0;
}

.shiki-css-container code {
  font-family: inherit;
}"""


def shiki_variables(block, mode):
    """Map a canonical block onto Shiki's CSS variables theme."""
    variables = {}
    for name, keys, light_default, dark_default in SHIKI_VARIABLES:
        value = next((block[key] for key in keys if block.get(key)), None)
        variables[name] = value or (light_default if mode == "light" else dark_default)
    return variables


def shiki_css(theme, overrides=None):
    """Render :root and .dark variable blocks plus container styles.

    Args:
        theme: Canonical theme
        overrides: Optional {mode: {"--shiki-...": value}} merged over the result
    """
    overrides = overrides or {}
    blocks = []
    for mode, selector in (("light", ":root"), ("dark", ".dark")):
        variables = shiki_variables(theme[mode], mode)
        variables.update(overrides.get(mode) or {})
        lines = [f"  {key}: {value};" for key, value in variables.items()]
        blocks.append(f"{selector} {{\n" + "\n".join(lines) + "\n}")
    blocks.append(CONTAINER_STYLES)
    return "\n\n".join(blocks) + "\n"


def convert_theme(theme):
    return {mode: shiki_variables(theme[mode], mode) for mode in MODES}
