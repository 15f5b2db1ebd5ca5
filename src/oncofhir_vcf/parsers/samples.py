"""FORMAT and sample column decoding."""

from ..models import SampleBlock


def parse_sample_fields(format_keys: list[str], sample_value: str) -> dict[str, str]:
    """Zip one colon-delimited sample column with the FORMAT keys.

    A sample with fewer values than keys leaves the trailing keys absent.
    """
    values = sample_value.strip().split(":")
    return dict(zip(format_keys, values, strict=False))


def parse_sample_block(
    format_field: str,
    sample_columns: list[str],
    sample_names: list[str],
) -> SampleBlock | None:
    """Decode the FORMAT column and the sample columns of one record.

    Args:
        format_field: Raw FORMAT column, e.g. 'GT:AD:DP:VAF'
        sample_columns: Raw sample columns following FORMAT
        sample_names: Sample names from the '#CHROM' header row

    Returns:
        SampleBlock, or None when there is no FORMAT column or no named sample
    """
    format_field = format_field.strip()
    if not format_field or format_field == "." or not sample_names:
        return None

    format_keys = format_field.split(":")
    block = SampleBlock(format_keys=format_keys)
    for name, value in zip(sample_names, sample_columns, strict=False):
        block.samples[name] = parse_sample_fields(format_keys, value)

    return block if block.samples else None
