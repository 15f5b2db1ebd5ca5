"""Error taxonomy and schema validation for parsed variants."""

import logging
import math

from ..models import CanonicalVariant

logger = logging.getLogger(__name__)


class VCFParseError(ValueError):
    """Base class for VCF parsing errors."""

    pass


class MalformedLineError(VCFParseError):
    """Raised when a data line cannot be split into the required columns."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FieldCoercionError(VCFParseError):
    """Raised when a numeric sub-field cannot be coerced."""

    def __init__(self, field_name: str, value: object):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Cannot coerce {field_name}={value!r} to a number")


class SchemaViolationError(VCFParseError):
    """Raised when a decoded variant is missing a required field."""

    pass


class NoVariantsFoundError(VCFParseError):
    """Raised when a parse yields no valid variants at all."""

    def __init__(self, message: str = "No valid variants found in VCF file"):
        super().__init__(message)


def coerce_float(field_name: str, value: object) -> float:
    """Coerce a VCF sub-field to a finite float.

    Raises:
        FieldCoercionError: If the value is missing, non-numeric or not finite.
    """
    if value is None or value is True or value in ("", "."):
        raise FieldCoercionError(field_name, value)
    try:
        number = float(value)
    except (ValueError, TypeError):
        raise FieldCoercionError(field_name, value) from None
    if not math.isfinite(number):
        raise FieldCoercionError(field_name, value)
    return number


def _require_text(variant: CanonicalVariant, name: str) -> None:
    value = getattr(variant, name)
    if not isinstance(value, str) or not value.strip():
        raise SchemaViolationError(f"{name} is required, got {value!r}")


def validate_variant(variant: CanonicalVariant) -> CanonicalVariant:
    """Check the required fields of a canonical variant.

    Args:
        variant: Variant to check

    Returns:
        The same variant when valid

    Raises:
        SchemaViolationError: If a required field is absent or mistyped
    """
    _require_text(variant, "chromosome")
    _require_text(variant, "reference")
    _require_text(variant, "alternate")

    position = variant.position
    if isinstance(position, bool) or not isinstance(position, int):
        raise SchemaViolationError(f"position must be an integer, got {position!r}")
    if position < 1:
        raise SchemaViolationError(f"position must be >= 1, got {position}")

    if "," in variant.alternate:
        raise SchemaViolationError(
            f"alternate must hold exactly one allele, got '{variant.alternate}'"
        )

    vaf = variant.variant_allele_frequency
    if vaf is not None and not 0.0 <= vaf <= 1.0:
        raise SchemaViolationError(f"variant_allele_frequency out of range: {vaf}")

    return variant


def validate_variants(
    variants: list[CanonicalVariant],
) -> tuple[list[CanonicalVariant], int]:
    """Drop variants that fail schema validation, preserving order.

    Returns:
        Tuple of (valid variants, number dropped)
    """
    valid = []
    dropped = 0
    for variant in variants:
        try:
            valid.append(validate_variant(variant))
        except SchemaViolationError as e:
            dropped += 1
            logger.warning(
                "Dropping variant %s:%s %s>%s: %s",
                variant.chromosome,
                variant.position,
                variant.reference,
                variant.alternate,
                e,
            )
    return valid, dropped
