from .converters import (
    RAYSO_KEYS,
    canonical_to_rayso,
    canonical_to_shadcn,
    extract_accents,
    rayso_to_canonical,
    rayso_to_shadcn,
    shadcn_to_canonical,
    tweakcn_to_canonical,
    tweakcn_to_rayso,
)
from .foreign import SHADCN_SCHEMA, TWEAKCN_SCHEMA, ForeignSchema, project_foreign

__all__ = [
    "ForeignSchema",
    "RAYSO_KEYS",
    "SHADCN_SCHEMA",
    "TWEAKCN_SCHEMA",
    "canonical_to_rayso",
    "canonical_to_shadcn",
    "extract_accents",
    "project_foreign",
    "rayso_to_canonical",
    "rayso_to_shadcn",
    "shadcn_to_canonical",
    "tweakcn_to_canonical",
    "tweakcn_to_rayso",
]
