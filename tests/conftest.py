import copy

import pytest

SAMPLE_THEME = {
    "name": "Paper",
    "light": {
        "bg": "#fffcf0",
        "bg_2": "#f2f0e5",
        "ui": "#e6e4d9",
        "ui_2": "#dad8ce",
        "ui_3": "#cecdc3",
        "tx_3": "#b7b5ac",
        "tx_2": "#6f6e69",
        "tx": "#100f0f",
        "pr": "#205ea6",
        "sc": "#5e409d",
        "ac_1": "#24837b",
        "ac_2": "#66800b",
        "ac_3": "#af3029",
    },
    "dark": {
        "bg": "#100f0f",
        "bg_2": "#1c1b1a",
        "ui": "#282726",
        "ui_2": "#343331",
        "ui_3": "#403e3c",
        "tx_3": "#575653",
        "tx_2": "#878580",
        "tx": "#cecdc3",
        "pr": "#4385be",
        "sc": "#8b7ec8",
        "ac_1": "#3aa99f",
        "ac_2": "#879a39",
        "ac_3": "#d14d41",
    },
}


@pytest.fixture
def theme():
    """Does: Provide a fresh copy of a complete canonical theme."""
    return copy.deepcopy(SAMPLE_THEME)
