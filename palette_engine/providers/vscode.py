import json
from types import MappingProxyType

from ..color import to_hex
from ..ramp import MODES

# Semantic token category -> canonical color
SEMANTIC_TOKEN_COLORS = MappingProxyType(
    {
        "plain": "tx",
        "classes": "ac_1",
        "interfaces": "ac_1",
        "structs": "ac_1",
        "enums": "ac_1",
        "keys": "tx",
        "methods": "sc",
        "functions": "ac_1",
        "variables": "tx",
        "variablesOther": "sc",
        "globalVariables": "ac_2",
        "localVariables": "tx",
        "parameters": "tx",
        "properties": "tx",
        "strings": "ac_2",
        "stringEscapeSequences": "tx",
        "keywords": "pr",
        "keywordsControl": "pr",
        "storageModifiers": "pr",
        "comments": "tx_3",
        "docComments": "tx_3",
        "numbers": "ac_3",
        "booleans": "ac_3",
        "operators": "pr",
        "macros": "sc",
        "preprocessor": "ac_2",
        "urls": "sc",
        "tags": "pr",
        "jsxTags": "sc",
        "attributes": "ac_1",
        "types": "sc",
        "constants": "sc",
        "labels": "ac_2",
        "namespaces": "ac_1",
        "modules": "pr",
        "typeParameters": "ac_1",
        "exceptions": "pr",
        "decorators": "ac_1",
        "calls": "tx",
        "punctuation": "tx_2",
    }
)

# Semantic token category -> TextMate scopes
SEMANTIC_TOKEN_SCOPES = MappingProxyType(
    {
        "classes": ("entity.name.type.class",),
        "interfaces": ("entity.name.type.interface", "entity.name.type"),
        "structs": ("entity.name.type.struct",),
        "enums": ("entity.name.type.enum",),
        "keys": ("meta.object-literal.key",),
        "methods": ("entity.name.function.method", "meta.function.method"),
        "functions": (
            "entity.name.function",
            "support.function",
            "meta.function-call.generic",
        ),
        "variables": (
            "variable",
            "meta.variable",
            "variable.other.object.property",
            "variable.other.readwrite.alias",
        ),
        "variablesOther": ("variable.other.object",),
        "globalVariables": ("variable.other.global", "variable.language.this"),
        "localVariables": ("variable.other.local",),
        "parameters": ("variable.parameter", "meta.parameter"),
        "properties": ("variable.other.property", "meta.property"),
        "strings": ("string", "string.other.link", "markup.inline.raw.string.markdown"),
        "stringEscapeSequences": (
            "constant.character.escape",
            "constant.other.placeholder",
        ),
        "keywords": ("keyword",),
        "keywordsControl": (
            "keyword.control.import",
            "keyword.control.from",
            "keyword.import",
        ),
        "storageModifiers": ("storage.modifier", "keyword.modifier", "storage.type"),
        "comments": ("comment", "punctuation.definition.comment"),
        "docComments": ("comment.documentation", "comment.line.documentation"),
        "numbers": ("constant.numeric",),
        "booleans": ("constant.language.boolean", "constant.language.json"),
        "operators": ("keyword.operator",),
        "macros": ("entity.name.function.preprocessor", "meta.preprocessor"),
        "preprocessor": ("meta.preprocessor",),
        "urls": ("markup.underline.link",),
        "tags": ("entity.name.tag",),
        "jsxTags": ("support.class.component",),
        "attributes": ("entity.other.attribute-name", "meta.attribute"),
        "types": ("support.type",),
        "constants": ("variable.other.constant", "variable.readonly"),
        "labels": ("entity.name.label", "punctuation.definition.label"),
        "namespaces": (
            "entity.name.namespace",
            "storage.modifier.namespace",
            "markup.bold.markdown",
        ),
        "modules": ("entity.name.module", "storage.modifier.module"),
        "typeParameters": ("variable.type.parameter", "variable.parameter.type"),
        "exceptions": ("keyword.control.exception", "keyword.control.trycatch"),
        "decorators": (
            "meta.decorator",
            "punctuation.decorator",
            "entity.name.function.decorator",
        ),
        "calls": ("variable.function",),
        "punctuation": (
            "punctuation",
            "punctuation.terminator",
            "punctuation.definition.tag",
            "punctuation.separator",
            "punctuation.definition.string",
            "punctuation.section.block",
        ),
        "plain": ("source", "support.type.property-name.css"),
    }
)

# Workbench surface -> canonical color
EDITOR_UI_COLORS = MappingProxyType(
    {
        "editor.background": "bg",
        "editor.foreground": "tx",
        "editor.hoverHighlightBackground": "ui_2",
        "editor.lineHighlightBackground": "bg_2",
        "editor.selectionBackground": "ui_3",
        "editor.selectionHighlightBackground": "tx_3",
        "editor.wordHighlightBackground": "ui_2",
        "editor.wordHighlightStrongBackground": "ui",
        "editor.findMatchBackground": "ac_1",
        "editor.findMatchHighlightBackground": "ac_1",
        "editor.findRangeHighlightBackground": "bg_2",
        "editor.inactiveSelectionBackground": "ui_3",
        "editor.lineHighlightBorder": "ui",
        "editor.rangeHighlightBackground": "bg_2",
        "editorWhitespace.foreground": "ui",
        "editorIndentGuide.background1": "ui_2",
        "editorHoverWidget.background": "ui",
        "editorLineNumber.activeForeground": "tx",
        "editorLineNumber.foreground": "ui_3",
        "editorGutter.background": "bg",
        "editorGutter.modifiedBackground": "ac_2",
        "editorGutter.addedBackground": "ac_2",
        "editorGutter.deletedBackground": "pr",
        "editorBracketMatch.background": "ui",
        "editorBracketMatch.border": "ui_2",
        "editorGroupHeader.tabsBackground": "bg",
        "editorGroup.border": "ui_2",
        "tab.activeBackground": "bg",
        "tab.inactiveBackground": "bg_2",
        "tab.inactiveForeground": "tx_2",
        "tab.activeForeground": "tx",
        "tab.hoverBackground": "ui_2",
        "tab.unfocusedHoverBackground": "ui_2",
        "tab.border": "ui_2",
        "tab.activeModifiedBorder": "ac_1",
        "tab.inactiveModifiedBorder": "sc",
        "editorWidget.background": "bg_2",
        "editorWidget.border": "ui_2",
        "editorSuggestWidget.background": "bg",
        "editorSuggestWidget.border": "ui_2",
        "editorSuggestWidget.foreground": "tx",
        "editorSuggestWidget.highlightForeground": "tx_2",
        "editorSuggestWidget.selectedBackground": "ui_2",
        "panel.background": "bg",
        "panel.border": "ui_2",
        "panelTitle.activeBorder": "ui_3",
        "panelTitle.activeForeground": "tx",
        "panelTitle.inactiveForeground": "tx_2",
        "statusBar.background": "bg",
        "statusBar.foreground": "tx",
        "statusBar.border": "ui_2",
        "statusBar.debuggingBackground": "pr",
        "statusBar.debuggingForeground": "tx",
        "titleBar.activeBackground": "bg",
        "titleBar.activeForeground": "tx",
        "titleBar.inactiveBackground": "bg_2",
        "titleBar.inactiveForeground": "tx_2",
        "titleBar.border": "ui_2",
        "menu.foreground": "tx",
        "menu.background": "bg",
        "menu.selectionForeground": "tx",
        "menu.selectionBackground": "ui_2",
        "menu.border": "ui_2",
        "terminal.foreground": "tx",
        "terminal.background": "bg",
        "terminalCursor.foreground": "tx",
        "terminalCursor.background": "bg",
        "terminal.ansiRed": "pr",
        "terminal.ansiGreen": "ac_2",
        "terminal.ansiYellow": "ac_1",
        "terminal.ansiBlue": "sc",
        "terminal.ansiMagenta": "ac_2",
        "terminal.ansiCyan": "ac_2",
        "activityBar.background": "bg",
        "activityBar.foreground": "tx",
        "activityBar.inactiveForeground": "tx_2",
        "activityBar.activeBorder": "tx",
        "activityBar.border": "ui_2",
        "sideBar.background": "bg",
        "sideBar.foreground": "tx",
        "sideBar.border": "ui_2",
        "sideBarTitle.foreground": "tx",
        "sideBarSectionHeader.background": "bg_2",
        "sideBarSectionHeader.foreground": "tx",
        "sideBarSectionHeader.border": "ui_2",
        "list.foreground": "tx",
        "list.inactiveSelectionBackground": "ui_2",
        "list.activeSelectionBackground": "ui_3",
        "list.inactiveSelectionForeground": "tx",
        "list.activeSelectionForeground": "tx",
        "list.focusOutline": "ac_1",
        "list.hoverForeground": "tx",
        "list.hoverBackground": "ui_2",
        "input.background": "bg_2",
        "input.foreground": "tx",
        "input.border": "ui_2",
        "input.placeholderForeground": "tx_2",
        "dropdown.background": "bg_2",
        "dropdown.foreground": "tx",
        "dropdown.border": "ui_2",
        "dropdown.listBackground": "bg",
        "badge.background": "sc",
        "activityBarBadge.background": "sc",
        "button.background": "sc",
        "button.foreground": "bg",
        "badge.foreground": "bg",
        "activityBarBadge.foreground": "bg",
    }
)

# Hex alpha appended to translucent surfaces, (light, dark)
SURFACE_ALPHA = MappingProxyType(
    {
        "editor.findMatchBackground": ("55", "66"),
        "editor.findMatchHighlightBackground": ("44", "55"),
        "editor.findRangeHighlightBackground": ("cc", "cc"),
        "editor.hoverHighlightBackground": ("55", "66"),
        "editor.inactiveSelectionBackground": ("55", "66"),
        "editor.rangeHighlightBackground": ("33", "44"),
        "editor.selectionBackground": ("66", "77"),
        "editor.selectionHighlightBackground": ("22", "11"),
        "editor.wordHighlightBackground": ("22", "11"),
        "editor.wordHighlightStrongBackground": ("33", "22"),
    }
)


def surface_color(block, surface, mode):
    """Resolve one workbench color, with its mode-specific alpha if any."""
    color = to_hex(block[EDITOR_UI_COLORS[surface]])
    alpha = SURFACE_ALPHA.get(surface)
    if alpha is None:
        return color
    return color + alpha[0 if mode == "light" else 1]


def editor_colors(block, mode):
    return {surface: surface_color(block, surface, mode) for surface in EDITOR_UI_COLORS}


def token_colors(block, token_map=SEMANTIC_TOKEN_COLORS):
    return [
        {
            "name": token,
            "scope": list(SEMANTIC_TOKEN_SCOPES[token]),
            "settings": {"foreground": to_hex(block[key])},
        }
        for token, key in token_map.items()
    ]


def _apply_override(theme, override):
    """Replace workbench colors and token rules (matched by name) in place."""
    if not override:
        return theme

    theme["colors"].update(override.get("colors") or {})
    replacements = {rule.get("name"): rule for rule in override.get("tokenColors") or []}
    rules = []
    for rule in theme["tokenColors"]:
        rules.append(replacements.pop(rule["name"], rule))
    rules.extend(replacements.values())
    theme["tokenColors"] = rules
    return theme


def map_to_vscode(theme, name="Palette Engine", overrides=None):
    """Convert a canonical theme into light and dark VS Code color themes.

    Args:
        theme: Canonical theme with light and dark blocks
        name: Theme name used for name and displayName
        overrides: Optional {mode: {"colors": {...}, "tokenColors": [...]}}

    Returns:
        dict: {"light": theme, "dark": theme}
    """
    overrides = overrides or {}
    result = {}
    for mode in MODES:
        block = theme[mode]
        converted = {
            "name": f"{name} {mode.title()}",
            "displayName": f"{name} ({mode.title()})",
            "type": mode,
            "colors": editor_colors(block, mode),
            "tokenColors": token_colors(block),
        }
        result[mode] = _apply_override(converted, overrides.get(mode))
    return result


def vscode_theme_json(theme, name="Palette Engine", overrides=None):
    """Render the VS Code export: the dark theme extended by both variants."""
    converted = map_to_vscode(theme, name, overrides)
    data = dict(converted["dark"])
    data["extends"] = [
        {**converted["light"], "uiTheme": "vs"},
        {**converted["dark"], "uiTheme": "vs-dark"},
    ]
    return json.dumps(data, indent=2)
