"""VCF sub-field decoders."""

from .info import InfoMap, parse_info
from .samples import parse_sample_block, parse_sample_fields

__all__ = [
    "InfoMap",
    "parse_info",
    "parse_sample_block",
    "parse_sample_fields",
]
