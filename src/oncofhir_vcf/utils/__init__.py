"""Shared utility modules."""

from .chromosomes import apply_chromosome_style, normalize_chromosome
from .validators import (
    FieldCoercionError,
    MalformedLineError,
    NoVariantsFoundError,
    SchemaViolationError,
    VCFParseError,
    coerce_float,
    validate_variant,
    validate_variants,
)

__all__ = [
    "FieldCoercionError",
    "MalformedLineError",
    "NoVariantsFoundError",
    "SchemaViolationError",
    "VCFParseError",
    "apply_chromosome_style",
    "coerce_float",
    "normalize_chromosome",
    "validate_variant",
    "validate_variants",
]
