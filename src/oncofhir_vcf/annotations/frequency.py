"""Variant allele frequency extraction.

Sources, first available wins:

| Source          | Field            | Value used                          |
|-----------------|------------------|-------------------------------------|
| INFO            | AF (Number=A)    | value for the allele, else first    |
| first sample    | VAF, then AF     | value for the allele, else first    |
| first sample    | AD (Number=R)    | depth[allele] / sum(depths)         |

A source whose value is missing, non-numeric, non-finite or outside [0, 1]
is treated as unavailable.
"""

import logging

from ..parsers.info import InfoMap
from ..utils.validators import FieldCoercionError, coerce_float

logger = logging.getLogger(__name__)


def _pick_allele_value(raw: str, allele_index: int) -> str:
    """Select the per-allele value from a comma-separated Number=A list."""
    values = raw.split(",")
    if len(values) > 1 and allele_index <= len(values):
        return values[allele_index - 1]
    return values[0]


def _as_frequency(field_name: str, value: object) -> float | None:
    try:
        frequency = coerce_float(field_name, value)
    except FieldCoercionError as e:
        logger.debug("%s unavailable: %s", field_name, e)
        return None
    if not 0.0 <= frequency <= 1.0:
        logger.debug("%s=%s outside [0, 1], ignoring", field_name, frequency)
        return None
    return frequency


def frequency_from_info(
    info: InfoMap, allele_index: int, keys: tuple[str, ...] = ("AF",)
) -> float | None:
    for key in keys:
        raw = info.get_text(key)
        if raw is None:
            continue
        frequency = _as_frequency(f"INFO/{key}", _pick_allele_value(raw, allele_index))
        if frequency is not None:
            return frequency
    return None


def frequency_from_sample(
    sample: dict[str, str], allele_index: int, keys: tuple[str, ...] = ("VAF", "AF")
) -> float | None:
    for key in keys:
        raw = sample.get(key)
        if raw is None:
            continue
        frequency = _as_frequency(
            f"FORMAT/{key}", _pick_allele_value(raw.strip(), allele_index)
        )
        if frequency is not None:
            return frequency
    return None


def frequency_from_depths(sample: dict[str, str], allele_index: int) -> float | None:
    """Compute VAF from the AD field as alt depth over total depth."""
    raw = sample.get("AD")
    if raw is None:
        return None

    try:
        depths = [coerce_float("FORMAT/AD", d) for d in raw.split(",")]
    except FieldCoercionError as e:
        logger.debug("AD unavailable: %s", e)
        return None

    if allele_index >= len(depths) or any(d < 0 for d in depths):
        return None

    total = sum(depths)
    if total <= 0:
        return None
    return depths[allele_index] / total


def extract_allele_frequency(
    info: InfoMap,
    sample: dict[str, str] | None,
    allele_index: int,
    info_keys: tuple[str, ...] = ("AF",),
    sample_keys: tuple[str, ...] = ("VAF", "AF"),
) -> float | None:
    """Resolve the variant allele frequency for one allele.

    Args:
        info: Decoded INFO field
        sample: Field map of the first sample, if any
        allele_index: 1-based allele index within ALT
        info_keys: INFO keys holding a record-wide allele frequency
        sample_keys: FORMAT keys holding a per-sample allele fraction

    Returns:
        Frequency in [0, 1], or None when no source is available
    """
    frequency = frequency_from_info(info, allele_index, info_keys)
    if frequency is not None:
        return frequency

    if sample is None:
        return None

    frequency = frequency_from_sample(sample, allele_index, sample_keys)
    if frequency is not None:
        return frequency

    return frequency_from_depths(sample, allele_index)
