from .json_export import export_json
from .report import generate_readability_report, print_palette, print_ramp, ramp_report

__all__ = [
    "export_json",
    "generate_readability_report",
    "print_palette",
    "print_ramp",
    "ramp_report",
]
