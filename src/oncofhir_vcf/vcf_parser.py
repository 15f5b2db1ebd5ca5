"""VCF text parsing functionality."""

import logging
import re
from dataclasses import dataclass, field

from .annotations import build_dialects, extract_allele_frequency, merge_annotations
from .config import ParserConfig
from .models import CanonicalVariant, FixedColumns, ParseReport, SampleBlock, VariantRecord
from .normalizer import decompose_multiallelic, select_called_alleles
from .parsers import InfoMap, parse_info, parse_sample_block
from .utils.chromosomes import apply_chromosome_style
from .utils.validators import (
    FieldCoercionError,
    MalformedLineError,
    NoVariantsFoundError,
    coerce_float,
    validate_variants,
)

logger = logging.getLogger(__name__)

FIXED_COLUMNS = ("CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO")

_WHITESPACE = re.compile(r"\s+")


@dataclass
class ClassifiedLines:
    """Input text split into header lines, data lines and sample names."""

    header_lines: list[str] = field(default_factory=list)
    data_lines: list[tuple[int, str]] = field(default_factory=list)
    sample_names: list[str] = field(default_factory=list)
    has_column_header: bool = False


def split_columns(line: str) -> list[str]:
    """Split on tabs, or on whitespace runs when the line has no tab."""
    if "\t" in line:
        return line.split("\t")
    return _WHITESPACE.split(line.strip())


def classify_lines(text: str) -> ClassifiedLines:
    """Separate header/comment lines from data lines.

    Data lines keep their 1-based line number for diagnostics. Sample
    names are the columns after FORMAT in the '#CHROM' row.
    """
    classified = ClassifiedLines()

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("#"):
            classified.header_lines.append(stripped)
            if stripped.startswith("#CHROM"):
                columns = split_columns(line.strip("\r\n"))
                classified.sample_names = [c.strip() for c in columns[9:] if c.strip()]
                classified.has_column_header = True
            continue
        classified.data_lines.append((line_number, line.rstrip("\r\n")))

    return classified


def tokenize_line(
    line: str, line_number: int | None = None, min_columns: int = 5
) -> tuple[FixedColumns, str, list[str]]:
    """Split one data line into fixed columns, FORMAT and sample columns.

    Raises:
        MalformedLineError: If fewer than ``min_columns`` fields are present
    """
    columns = split_columns(line)
    if len(columns) < min_columns:
        raise MalformedLineError(
            f"expected at least {min_columns} columns, found {len(columns)}",
            line_number=line_number,
        )

    padded = [c.strip() for c in columns] + [""] * (9 - len(columns))
    fixed = FixedColumns(
        chrom=padded[0],
        pos=padded[1],
        id=padded[2],
        ref=padded[3],
        alts=padded[4].split(","),
        qual=padded[5],
        filter=padded[6],
        info=padded[7],
    )
    return fixed, padded[8], columns[9:]


class VCFHeaderParser:
    """Parser for VCF meta-information lines."""

    META_KEYS = ("fileformat", "fileDate", "source", "reference")

    def parse_meta(self, header_lines: list[str]) -> dict[str, str]:
        """Collect simple '##key=value' lines of interest."""
        meta = {}
        for line in header_lines:
            if not line.startswith("##") or "=" not in line:
                continue
            key, value = line[2:].split("=", 1)
            if key in self.META_KEYS:
                meta[key] = value.strip()
        return meta

    def parse_csq_header(self, header_lines: list[str]) -> list[str]:
        """Parse VEP CSQ field structure from header."""
        csq_pattern = re.compile(r'##INFO=<ID=CSQ,.+Description=".*Format:\s*([^"]+)">')

        for line in header_lines:
            match = csq_pattern.match(line)
            if match:
                return [f.strip() for f in match.group(1).split("|")]

        return []

    def parse_ann_header(self, header_lines: list[str]) -> list[str]:
        """Parse SnpEff ANN field structure from header.

        The Description lists the fields in single quotes, e.g.
        "Functional annotations: 'Allele | Annotation | ...'".
        """
        ann_pattern = re.compile(r"##INFO=<ID=ANN,.+Description=\"[^']*'([^']+)'")

        for line in header_lines:
            match = ann_pattern.match(line)
            if match:
                return [f.strip() for f in match.group(1).split("|")]

        return []

    def parse(self, header_lines: list[str]) -> dict:
        header: dict = dict(self.parse_meta(header_lines))
        annotation_fields = {}
        if ann := self.parse_ann_header(header_lines):
            annotation_fields["ANN"] = ann
        if csq := self.parse_csq_header(header_lines):
            annotation_fields["CSQ"] = csq
        header["annotation_fields"] = annotation_fields
        return header


class VariantParser:
    """Turns tokenized records into single-allele variant records."""

    def __init__(self, config: ParserConfig, annotation_fields: dict[str, list[str]] | None = None):
        self.config = config
        self.dialects = build_dialects(
            config.annotation_dialects,
            gene_keys=config.gene_keys,
            hgvs_keys=config.hgvs_keys,
            consequence_keys=config.consequence_keys,
            header_fields=annotation_fields,
        )
        self.filtered_alleles = 0

    def parse_record(
        self, fixed: FixedColumns, samples: SampleBlock | None
    ) -> list[VariantRecord]:
        """Expand one record into one VariantRecord per retained ALT allele."""
        info = parse_info(fixed.info)
        first_sample = samples.first_sample() if samples else None

        alleles = decompose_multiallelic(fixed.alts)
        if self.config.genotype_filtering and samples is not None:
            called = select_called_alleles(
                alleles, samples.genotypes(), self.config.genotype_matching
            )
            self.filtered_alleles += len(alleles) - len(called)
            alleles = called

        pos = self._parse_position(fixed.pos)
        qual = self._parse_quality(fixed.qual)
        filter_status = fixed.filter if fixed.filter not in ("", ".", "PASS") else None

        records = []
        for allele_index, alt in alleles:
            record = VariantRecord(
                chrom=apply_chromosome_style(fixed.chrom, self.config.chromosome_style),
                pos=pos,
                ref=fixed.ref,
                alt=alt,
                allele_index=allele_index,
                qual=qual,
                filter=filter_status,
                rs_id=fixed.id if fixed.id not in ("", ".") else None,
                genotype=first_sample.get("GT") if first_sample else None,
            )
            self._annotate(record, info, first_sample)
            records.append(record)

        return records

    def _annotate(
        self, record: VariantRecord, info: InfoMap, sample: dict[str, str] | None
    ) -> None:
        annotation = merge_annotations([d.extract(info, record.alt) for d in self.dialects])
        record.gene = annotation.gene
        record.hgvs = annotation.hgvs
        record.consequence = annotation.consequence
        record.impact = annotation.impact
        record.vaf = extract_allele_frequency(
            info,
            sample,
            record.allele_index,
            info_keys=self.config.af_keys,
            sample_keys=self.config.sample_vaf_keys,
        )

    def _parse_position(self, value: str) -> int | None:
        if not (value.isascii() and value.isdigit()):
            logger.debug("POS %r is not an integer", value)
            return None
        return int(value)

    def _parse_quality(self, value: str) -> float | None:
        if value in ("", "."):
            return None
        try:
            return coerce_float("QUAL", value)
        except FieldCoercionError as e:
            logger.debug("QUAL unavailable: %s", e)
            return None


def to_canonical(record: VariantRecord) -> CanonicalVariant:
    return CanonicalVariant(
        chromosome=record.chrom,
        position=record.pos,
        reference=record.ref,
        alternate=record.alt,
        gene=record.gene,
        hgvs_notation=record.hgvs,
        consequence=record.consequence,
        variant_allele_frequency=record.vaf,
        quality=record.qual,
        filter_status=record.filter,
        rs_id=record.rs_id,
        impact=record.impact,
        genotype=record.genotype,
    )


class VCFTextParser:
    """Parses VCF text held in memory into canonical variants.

    The parser keeps no state between calls; a single instance can be
    shared across threads.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.header_parser = VCFHeaderParser()

    def parse_report(self, text: str) -> ParseReport:
        """Parse VCF text and return variants with bookkeeping counters.

        Raises:
            NoVariantsFoundError: If no valid variant remains
        """
        classified = classify_lines(text)
        header = self.header_parser.parse(classified.header_lines)
        variant_parser = VariantParser(self.config, header["annotation_fields"])

        if not classified.has_column_header:
            logger.info("No #CHROM header; sample columns will be ignored")

        report = ParseReport(
            variants=[],
            samples=classified.sample_names,
            header=header,
            data_lines=len(classified.data_lines),
        )

        candidates: list[CanonicalVariant] = []
        for line_number, line in classified.data_lines:
            try:
                fixed, format_field, sample_columns = tokenize_line(
                    line, line_number, self.config.min_columns
                )
            except MalformedLineError as e:
                report.skipped_lines += 1
                logger.warning("Skipping malformed VCF line: %s", e)
                continue

            samples = parse_sample_block(format_field, sample_columns, classified.sample_names)
            for record in variant_parser.parse_record(fixed, samples):
                candidates.append(to_canonical(record))

        report.filtered_alleles = variant_parser.filtered_alleles
        report.variants, report.dropped_variants = validate_variants(candidates)

        if not report.variants:
            raise NoVariantsFoundError()

        logger.info(
            "Parsed %d variants from %d data lines (%d skipped, %d dropped)",
            len(report.variants),
            report.data_lines,
            report.skipped_lines,
            report.dropped_variants,
        )
        return report

    def parse(self, text: str) -> list[CanonicalVariant]:
        return self.parse_report(text).variants


def parse_vcf_report(text: str, config: ParserConfig | None = None) -> ParseReport:
    return VCFTextParser(config).parse_report(text)


def parse_vcf(text: str, config: ParserConfig | None = None) -> list[CanonicalVariant]:
    """Parse VCF text into an ordered list of canonical variants.

    Args:
        text: VCF-formatted text (header lines optional)
        config: Parser options; defaults to ParserConfig()

    Returns:
        Non-empty list of CanonicalVariant in input order

    Raises:
        NoVariantsFoundError: If the text holds no valid variant
    """
    return VCFTextParser(config).parse(text)
