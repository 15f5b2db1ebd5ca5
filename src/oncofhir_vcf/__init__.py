"""oncofhir-vcf: VCF text parsing into canonical variants for annotation."""

__version__ = "0.1.0"

from .config import ConfigValidationError, ParserConfig, load_config  # noqa: E402
from .models import CanonicalVariant, ParseReport  # noqa: E402
from .utils.validators import (  # noqa: E402
    FieldCoercionError,
    MalformedLineError,
    NoVariantsFoundError,
    SchemaViolationError,
    VCFParseError,
)
from .vcf_parser import VCFTextParser, parse_vcf, parse_vcf_report  # noqa: E402

__all__ = [
    "CanonicalVariant",
    "ConfigValidationError",
    "FieldCoercionError",
    "MalformedLineError",
    "NoVariantsFoundError",
    "ParseReport",
    "ParserConfig",
    "SchemaViolationError",
    "VCFParseError",
    "VCFTextParser",
    "__version__",
    "load_config",
    "parse_vcf",
    "parse_vcf_report",
]
