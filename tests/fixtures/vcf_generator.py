"""Synthetic VCF text generator for unit tests."""

from dataclasses import dataclass, field


@dataclass
class SyntheticVariant:
    """Represents a synthetic variant for testing."""

    chrom: str
    pos: int
    ref: str
    alt: list[str]
    qual: float | None = 30.0
    filter: str = "PASS"
    info: dict = field(default_factory=dict)
    format_fields: dict = field(default_factory=dict)
    rs_id: str = "."


class VCFGenerator:
    """Generate minimal VCF text for targeted unit tests."""

    HEADER_TEMPLATE = """##fileformat=VCFv4.2
##source=OncofhirDemo
##reference=GRCh38
##INFO=<ID=GENE,Number=1,Type=String,Description="Gene symbol">
##INFO=<ID=HGVS,Number=1,Type=String,Description="HGVS protein notation">
##INFO=<ID=CONSEQUENCE,Number=1,Type=String,Description="Variant consequence">
##INFO=<ID=AF,Number=A,Type=Float,Description="Allele Frequency">
##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">
##FORMAT=<ID=AD,Number=R,Type=Integer,Description="Allelic depths for the ref and alt alleles">
##FORMAT=<ID=DP,Number=1,Type=Integer,Description="Approximate read depth">
##FORMAT=<ID=VAF,Number=1,Type=Float,Description="Variant allele frequency">
"""

    @classmethod
    def generate(
        cls,
        variants: list[SyntheticVariant],
        samples: list[str] | None = None,
        delimiter: str = "\t",
    ) -> str:
        """Generate VCF text; samples=[] omits FORMAT and sample columns."""
        samples = ["SAMPLE1"] if samples is None else samples
        columns = ["#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO"]
        if samples:
            columns += ["FORMAT", *samples]

        lines = [cls.HEADER_TEMPLATE.strip(), delimiter.join(columns)]

        for v in variants:
            row = [
                v.chrom,
                str(v.pos),
                v.rs_id,
                v.ref,
                ",".join(v.alt),
                str(v.qual) if v.qual is not None else ".",
                v.filter,
                cls._format_info(v.info),
            ]
            if samples:
                format_keys = ["GT"]
                if v.format_fields:
                    first_sample = list(v.format_fields.values())[0]
                    format_keys = list(first_sample.keys())
                row.append(":".join(format_keys))
                for sample in samples:
                    if sample in v.format_fields:
                        values = v.format_fields[sample]
                        row.append(":".join(str(values.get(k, ".")) for k in format_keys))
                    else:
                        row.append("./.")
            lines.append(delimiter.join(row))

        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_info(info: dict) -> str:
        parts = []
        for k, v in info.items():
            if v is True:
                parts.append(k)
            elif isinstance(v, list):
                parts.append(f"{k}={','.join(map(str, v))}")
            else:
                parts.append(f"{k}={v}")
        return ";".join(parts) if parts else "."


def make_oncology_panel_vcf() -> str:
    """Two somatic hotspots annotated with plain INFO keys."""
    return VCFGenerator.generate([
        SyntheticVariant(
            chrom="7",
            pos=55259515,
            ref="T",
            alt=["G"],
            qual=100,
            rs_id="rs121434568",
            info={"GENE": "EGFR", "HGVS": "p.L858R", "CONSEQUENCE": "missense_variant"},
            format_fields={"SAMPLE1": {"GT": "0/1", "AD": 65, "DP": 100, "VAF": 0.35}},
        ),
        SyntheticVariant(
            chrom="17",
            pos=7577120,
            ref="G",
            alt=["A"],
            qual=95,
            rs_id="rs28934576",
            info={"GENE": "TP53", "HGVS": "p.R273H", "CONSEQUENCE": "missense_variant"},
            format_fields={"SAMPLE1": {"GT": "0/1", "AD": 42, "DP": 100, "VAF": 0.42}},
        ),
    ])


def make_multiallelic_vcf(genotypes: dict[str, str] | None = None) -> str:
    """Tri-allelic site; genotypes maps sample name to GT."""
    genotypes = genotypes or {}
    samples = list(genotypes) or []
    return VCFGenerator.generate(
        [
            SyntheticVariant(
                chrom="1",
                pos=69091,
                ref="A",
                alt=["C", "G", "T"],
                qual=None,
                info={"GENE": "OR4F5"},
                format_fields={name: {"GT": gt} for name, gt in genotypes.items()},
            )
        ],
        samples=samples,
    )


def make_snpeff_vcf() -> str:
    """VCF with SnpEff ANN annotations and its header declaration."""
    header = (
        "##INFO=<ID=ANN,Number=.,Type=String,Description=\"Functional annotations: "
        "'Allele | Annotation | Annotation_Impact | Gene_Name | Gene_ID | Feature_Type | "
        "Feature_ID | Transcript_BioType | Rank | HGVS.c | HGVS.p | cDNA.pos / cDNA.length | "
        "CDS.pos / CDS.length | AA.pos / AA.length | Distance | ERRORS / WARNINGS / INFO'\">"
    )
    ann = (
        "T|missense_variant|MODERATE|KRAS|ENSG00000133703|transcript|ENST00000256078|"
        "protein_coding|2/6|c.35G>A|p.Gly12Asp|225/5430|35/570|12/189||"
    )
    body = VCFGenerator.generate(
        [
            SyntheticVariant(
                chrom="chr12", pos=25398284, ref="C", alt=["T"], info={"ANN": ann}
            )
        ],
        samples=[],
    )
    return body.replace("##INFO=<ID=GENE", header + "\n##INFO=<ID=GENE", 1)


def make_vep_csq_vcf(with_format_header: bool = False) -> str:
    """VCF with VEP CSQ annotations, optionally declaring the CSQ Format."""
    csq = (
        "T|missense_variant|MODERATE|BRCA1|ENSG00000012048|Transcript|ENST00000357654|"
        "c.5123C>A"
    )
    body = VCFGenerator.generate(
        [
            SyntheticVariant(
                chrom="chr17", pos=43094464, ref="C", alt=["T"], info={"CSQ": csq}
            )
        ],
        samples=[],
    )
    if not with_format_header:
        return body
    header = (
        "##INFO=<ID=CSQ,Number=.,Type=String,Description=\"Consequence annotations from "
        "Ensembl VEP. Format: Allele|Consequence|IMPACT|SYMBOL|Gene|Feature_type|Feature|"
        "HGVSc\">"
    )
    return body.replace("##INFO=<ID=GENE", header + "\n##INFO=<ID=GENE", 1)
