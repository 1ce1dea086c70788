import json

from .model import validate_theme


def load_theme_from_json(json_path):
    """Load a canonical theme from JSON, setting metadata keys aside.

    Args:
        json_path: Path to a theme JSON file

    Returns:
        tuple: (validated theme dict, metadata dict of the "_"-prefixed keys)

    Raises:
        ThemeValidationError: If the file does not hold a valid theme
    """
    with open(json_path) as f:
        data = json.load(f)

    theme = {}
    metadata = {}
    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            metadata[key] = value
            continue
        theme[key] = value

    return validate_theme(theme), metadata
