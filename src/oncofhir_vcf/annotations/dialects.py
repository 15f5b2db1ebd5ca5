"""Annotation dialects: where gene, HGVS and consequence live in INFO.

Upstream annotators encode the same facts differently:

- plain keys such as ``GENE=EGFR;HGVS=p.L858R;CONSEQUENCE=missense_variant``
- SnpEff ``ANN``, a comma-separated list of pipe-delimited entries
- VEP ``CSQ``, the same layout with VEP's own sub-field order

Each dialect is a strategy that extracts an ``Annotation`` from an InfoMap.
The normalizer tries them in order and, per field, keeps the first value
found.
"""

from dataclasses import dataclass, fields
from typing import ClassVar, Protocol

from ..parsers.info import InfoMap

@dataclass
class Annotation:
    """Annotation values extracted for one allele."""

    gene: str | None = None
    hgvs: str | None = None
    consequence: str | None = None
    impact: str | None = None


class AnnotationDialect(Protocol):
    """Capability of extracting annotation values from an INFO map."""

    name: str

    def extract(self, info: InfoMap, alt: str) -> Annotation:
        ...


class PlainInfoDialect:
    """Annotations stored directly under INFO keys."""

    name = "info"

    def __init__(
        self,
        gene_keys: tuple[str, ...] = ("GENE",),
        hgvs_keys: tuple[str, ...] = ("HGVS", "HGVSC"),
        consequence_keys: tuple[str, ...] = ("EFFECT", "CONSEQUENCE"),
    ):
        self.gene_keys = gene_keys
        self.hgvs_keys = hgvs_keys
        self.consequence_keys = consequence_keys

    def extract(self, info: InfoMap, alt: str) -> Annotation:
        return Annotation(
            gene=info.first_text(self.gene_keys),
            hgvs=info.first_text(self.hgvs_keys),
            consequence=info.first_text(self.consequence_keys),
        )


class PipeDelimitedDialect:
    """Shared parsing for pipe-delimited multi-entry annotation fields."""

    name: ClassVar[str]
    info_key: ClassVar[str]
    default_fields: ClassVar[tuple[str, ...]]

    allele_field: ClassVar[str]
    gene_field: ClassVar[str]
    hgvs_field: ClassVar[str | None]
    consequence_field: ClassVar[str]
    impact_field: ClassVar[str]

    def __init__(self, field_names: list[str] | None = None):
        self.field_names = list(field_names) if field_names else list(self.default_fields)

    def extract(self, info: InfoMap, alt: str) -> Annotation:
        raw = info.get_text(self.info_key)
        if raw is None:
            return Annotation()

        entry = self.select_entry(raw, alt)
        if entry is None:
            return Annotation()

        return Annotation(
            gene=entry.get(self.gene_field),
            hgvs=entry.get(self.hgvs_field) if self.hgvs_field else None,
            consequence=entry.get(self.consequence_field),
            impact=entry.get(self.impact_field),
        )

    def parse_entry(self, entry: str) -> dict[str, str]:
        """Map one pipe-delimited entry onto field names, dropping empty values."""
        values = entry.split("|")
        return {
            name: value.strip()
            for name, value in zip(self.field_names, values, strict=False)
            if value.strip()
        }

    def select_entry(self, raw: str, alt: str) -> dict[str, str] | None:
        """Pick the first entry for this ALT allele in file order.

        Entries whose allele matches ``alt`` are preferred; if none match,
        every entry is a candidate.
        """
        entries = [self.parse_entry(e) for e in raw.split(",") if e.strip()]
        entries = [e for e in entries if e]
        if not entries:
            return None

        matching = [e for e in entries if e.get(self.allele_field) == alt]
        candidates = matching or entries

        return candidates[0]


class SnpEffDialect(PipeDelimitedDialect):
    """SnpEff ``ANN`` field."""

    name = "ann"
    info_key = "ANN"
    default_fields = (
        "Allele",
        "Annotation",
        "Annotation_Impact",
        "Gene_Name",
        "Gene_ID",
        "Feature_Type",
        "Feature_ID",
        "Transcript_BioType",
        "Rank",
        "HGVS.c",
        "HGVS.p",
        "cDNA.pos / cDNA.length",
        "CDS.pos / CDS.length",
        "AA.pos / AA.length",
        "Distance",
        "ERRORS / WARNINGS / INFO",
    )

    allele_field = "Allele"
    gene_field = "Gene_Name"
    hgvs_field = "HGVS.c"
    consequence_field = "Annotation"
    impact_field = "Annotation_Impact"


class VepCsqDialect(PipeDelimitedDialect):
    """Ensembl VEP ``CSQ`` field.

    Without a header ``Format:`` declaration only the leading VEP columns
    are assumed. HGVS is never taken from CSQ.
    """

    name = "csq"
    info_key = "CSQ"
    default_fields = (
        "Allele",
        "Consequence",
        "IMPACT",
        "SYMBOL",
        "Gene",
        "Feature_type",
        "Feature",
    )

    allele_field = "Allele"
    gene_field = "SYMBOL"
    hgvs_field = None
    consequence_field = "Consequence"
    impact_field = "IMPACT"


DIALECT_NAMES = ("info", "ann", "csq")


def build_dialects(
    names: tuple[str, ...],
    gene_keys: tuple[str, ...] = ("GENE",),
    hgvs_keys: tuple[str, ...] = ("HGVS", "HGVSC"),
    consequence_keys: tuple[str, ...] = ("EFFECT", "CONSEQUENCE"),
    header_fields: dict[str, list[str]] | None = None,
) -> list[AnnotationDialect]:
    """Instantiate dialects in precedence order.

    Args:
        names: Dialect names from DIALECT_NAMES, highest precedence first
        gene_keys: INFO keys read by the plain dialect for the gene
        hgvs_keys: INFO keys read by the plain dialect for HGVS
        consequence_keys: INFO keys read by the plain dialect for consequence
        header_fields: Sub-field names declared in the header, keyed by
            INFO id ('ANN' / 'CSQ')
    """
    header_fields = header_fields or {}
    dialects: list[AnnotationDialect] = []
    for name in names:
        if name == "info":
            dialects.append(PlainInfoDialect(gene_keys, hgvs_keys, consequence_keys))
        elif name == "ann":
            dialects.append(SnpEffDialect(header_fields.get("ANN")))
        elif name == "csq":
            dialects.append(VepCsqDialect(header_fields.get("CSQ")))
        else:
            raise ValueError(f"Unknown annotation dialect: {name}")
    return dialects


def merge_annotations(annotations: list[Annotation]) -> Annotation:
    """Combine dialect results; the first non-empty value wins per field."""
    merged = Annotation()
    for annotation in annotations:
        for f in fields(Annotation):
            if getattr(merged, f.name) is None and getattr(annotation, f.name):
                setattr(merged, f.name, getattr(annotation, f.name))
    return merged
