"""Data models for parsed VCF variants."""

from dataclasses import dataclass, field
from typing import Any

from .normalizer import classify_variant


@dataclass
class FixedColumns:
    """The eight fixed VCF columns of one data line."""

    chrom: str
    pos: str
    id: str
    ref: str
    alts: list[str]
    qual: str = ""
    filter: str = ""
    info: str = ""


@dataclass
class SampleBlock:
    """FORMAT keys and the per-sample field maps aligned with them."""

    format_keys: list[str]
    samples: dict[str, dict[str, str]] = field(default_factory=dict)

    def first_sample(self) -> dict[str, str] | None:
        for values in self.samples.values():
            return values
        return None

    def genotypes(self) -> list[str]:
        """Return the GT value of every sample that carries one."""
        return [values["GT"] for values in self.samples.values() if values.get("GT")]


@dataclass
class VariantRecord:
    """A single-allele variant in progress, before schema validation."""

    chrom: str
    pos: int | None
    ref: str
    alt: str
    allele_index: int
    qual: float | None = None
    filter: str | None = None
    rs_id: str | None = None

    # Extracted annotations
    gene: str | None = None
    hgvs: str | None = None
    consequence: str | None = None
    impact: str | None = None

    vaf: float | None = None
    genotype: str | None = None


@dataclass(frozen=True)
class CanonicalVariant:
    """Validated variant handed to the annotation layer."""

    chromosome: str
    position: int
    reference: str
    alternate: str
    gene: str | None = None
    hgvs_notation: str | None = None
    consequence: str | None = None
    variant_allele_frequency: float | None = None
    quality: float | None = None
    filter_status: str | None = None
    rs_id: str | None = None
    impact: str | None = None
    genotype: str | None = None

    @property
    def variant_type(self) -> str:
        return classify_variant(self.reference, self.alternate)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape consumed by annotators.

        Absent optional values are omitted.
        """
        data = {
            "chromosome": self.chromosome,
            "position": self.position,
            "reference": self.reference,
            "alternate": self.alternate,
            "gene": self.gene,
            "hgvsNotation": self.hgvs_notation,
            "consequence": self.consequence,
            "variantAlleleFrequency": self.variant_allele_frequency,
            "quality": self.quality,
            "filterStatus": self.filter_status,
            "rsId": self.rs_id,
            "impact": self.impact,
            "genotype": self.genotype,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class ParseReport:
    """Outcome of one parse: variants plus bookkeeping counters."""

    variants: list[CanonicalVariant]
    samples: list[str] = field(default_factory=list)
    header: dict[str, Any] = field(default_factory=dict)
    data_lines: int = 0
    skipped_lines: int = 0
    dropped_variants: int = 0
    filtered_alleles: int = 0

    def summary(self) -> dict[str, int]:
        return {
            "data_lines": self.data_lines,
            "skipped_lines": self.skipped_lines,
            "filtered_alleles": self.filtered_alleles,
            "dropped_variants": self.dropped_variants,
            "variants": len(self.variants),
        }
