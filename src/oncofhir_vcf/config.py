"""Configuration file support for oncofhir-vcf."""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .annotations.dialects import DIALECT_NAMES
from .normalizer import GENOTYPE_MATCHING_MODES
from .utils.chromosomes import CHROMOSOME_STYLES

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


_KEY_TUPLE_FIELDS = (
    "gene_keys",
    "hgvs_keys",
    "consequence_keys",
    "af_keys",
    "sample_vaf_keys",
    "annotation_dialects",
)


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how VCF text is decoded.

    Instances are immutable so one config can be shared by concurrent parses.
    """

    gene_keys: tuple[str, ...] = ("GENE",)
    hgvs_keys: tuple[str, ...] = ("HGVS", "HGVSC")
    consequence_keys: tuple[str, ...] = ("EFFECT", "CONSEQUENCE")
    af_keys: tuple[str, ...] = ("AF",)
    sample_vaf_keys: tuple[str, ...] = ("VAF", "AF")
    annotation_dialects: tuple[str, ...] = DIALECT_NAMES
    genotype_matching: str = "exact"
    genotype_filtering: bool = True
    chromosome_style: str = "as_is"
    min_columns: int = 5

    def __post_init__(self) -> None:
        validate_config({f.name: getattr(self, f.name) for f in fields(self)})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParserConfig":
        """Build a config from a plain mapping, e.g. a TOML table.

        List values are converted to tuples; unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if key in _KEY_TUPLE_FIELDS and isinstance(value, list | tuple):
                value = tuple(value)
            values[key] = value
        return cls(**values)


def _validate_key_tuple(name: str, value: Any) -> None:
    if not isinstance(value, tuple) or not all(isinstance(v, str) and v for v in value):
        raise ConfigValidationError(f"{name} must be a list of non-empty strings, got {value!r}")


def validate_config(config_dict: dict[str, Any]) -> None:
    """Validate configuration values.

    Raises:
        ConfigValidationError: If any configuration value is invalid.
    """
    for name in _KEY_TUPLE_FIELDS:
        if name in config_dict:
            _validate_key_tuple(name, config_dict[name])

    if "annotation_dialects" in config_dict:
        for dialect in config_dict["annotation_dialects"]:
            if dialect not in DIALECT_NAMES:
                raise ConfigValidationError(
                    f"annotation_dialects entries must be one of {DIALECT_NAMES}, got '{dialect}'"
                )

    if "genotype_matching" in config_dict:
        mode = config_dict["genotype_matching"]
        if mode not in GENOTYPE_MATCHING_MODES:
            raise ConfigValidationError(
                f"genotype_matching must be one of {GENOTYPE_MATCHING_MODES}, got '{mode}'"
            )

    if "genotype_filtering" in config_dict:
        if not isinstance(config_dict["genotype_filtering"], bool):
            raise ConfigValidationError("genotype_filtering must be a boolean")

    if "chromosome_style" in config_dict:
        style = config_dict["chromosome_style"]
        if style not in CHROMOSOME_STYLES:
            raise ConfigValidationError(
                f"chromosome_style must be one of {CHROMOSOME_STYLES}, got '{style}'"
            )

    if "min_columns" in config_dict:
        min_columns = config_dict["min_columns"]
        if isinstance(min_columns, bool) or not isinstance(min_columns, int):
            raise ConfigValidationError(
                f"min_columns must be an integer, got {type(min_columns).__name__}"
            )
        if not 5 <= min_columns <= 8:
            raise ConfigValidationError(f"min_columns must be between 5 and 8, got {min_columns}")


def load_config(config_path: Path, overrides: dict[str, Any] | None = None) -> ParserConfig:
    """Load parser configuration from a TOML file.

    Args:
        config_path: Path to the TOML configuration file.
        overrides: Optional dict of values to override loaded config.

    Returns:
        ParserConfig instance with loaded values.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ConfigValidationError: If any configuration value is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)

    config_dict = dict(toml_data.get("oncofhir_vcf", {}))

    if overrides:
        config_dict.update(overrides)

    return ParserConfig.from_dict(config_dict)
