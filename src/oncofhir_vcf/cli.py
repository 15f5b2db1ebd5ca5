"""oncofhir-vcf: parse VCF files into canonical variants from the command line."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigValidationError, ParserConfig, load_config
from .models import ParseReport
from .utils.validators import NoVariantsFoundError
from .vcf_parser import parse_vcf_report


def version_callback(value: bool) -> None:
    if value:
        print(__version__)
        raise typer.Exit()


app = typer.Typer(
    name="oncofhir-vcf", help="Parse VCF files into canonical variants for annotation"
)
console = Console()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = None,
) -> None:
    pass


def setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging based on verbosity flags."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("oncofhir_vcf").setLevel(level)


def _build_config(
    config_path: Path | None,
    genotype_matching: str | None,
    chromosome_style: str | None,
) -> ParserConfig:
    overrides = {}
    if genotype_matching is not None:
        overrides["genotype_matching"] = genotype_matching
    if chromosome_style is not None:
        overrides["chromosome_style"] = chromosome_style

    if config_path is not None:
        return load_config(config_path, overrides)
    return ParserConfig.from_dict(overrides)


def _run_parse(
    vcf_path: Path,
    config_path: Path | None,
    genotype_matching: str | None,
    chromosome_style: str | None,
) -> ParseReport:
    if not vcf_path.exists():
        console.print(f"[red]Error: VCF file not found: {vcf_path}[/red]")
        raise typer.Exit(1)

    try:
        config = _build_config(config_path, genotype_matching, chromosome_style)
    except (ConfigValidationError, FileNotFoundError) as e:
        console.print(f"[red]Configuration Error: {e}[/red]")
        raise typer.Exit(1) from None

    text = vcf_path.read_text(encoding="utf-8", errors="replace")
    if not text.strip():
        console.print("[red]Error: VCF file is empty[/red]")
        raise typer.Exit(1)

    try:
        return parse_vcf_report(text, config)
    except NoVariantsFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None


def _format_optional(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.3g}"
    return str(value)


ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="TOML configuration file")
]
GenotypeOption = Annotated[
    str | None,
    typer.Option("--genotype-matching", help="GT allele matching: exact or substring"),
]
ChromosomeOption = Annotated[
    str | None,
    typer.Option("--chromosome-style", help="Chromosome labels: as_is, bare or prefixed"),
]


@app.command()
def parse(
    vcf_path: Path = typer.Argument(..., help="Path to VCF text file"),
    as_json: bool = typer.Option(False, "--json", help="Print variants as JSON"),
    config_path: ConfigOption = None,
    genotype_matching: GenotypeOption = None,
    chromosome_style: ChromosomeOption = None,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
) -> None:
    """Parse a VCF file and print its canonical variants."""
    setup_logging(verbose, quiet)

    report = _run_parse(vcf_path, config_path, genotype_matching, chromosome_style)

    if as_json:
        print(json.dumps({"variants": [v.to_dict() for v in report.variants]}, indent=2))
        return

    table = Table(title=f"{vcf_path.name}: {len(report.variants)} variants")
    for column in ("Chrom", "Pos", "Ref", "Alt", "Gene", "HGVS", "Consequence", "VAF"):
        table.add_column(column)
    for v in report.variants:
        table.add_row(
            v.chromosome,
            str(v.position),
            v.reference,
            v.alternate,
            _format_optional(v.gene),
            _format_optional(v.hgvs_notation),
            _format_optional(v.consequence),
            _format_optional(v.variant_allele_frequency),
        )
    console.print(table)


@app.command()
def summary(
    vcf_path: Path = typer.Argument(..., help="Path to VCF text file"),
    as_json: bool = typer.Option(False, "--json", help="Print summary as JSON"),
    config_path: ConfigOption = None,
    genotype_matching: GenotypeOption = None,
    chromosome_style: ChromosomeOption = None,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
) -> None:
    """Report line and variant counts for a VCF file."""
    setup_logging(verbose, quiet)

    report = _run_parse(vcf_path, config_path, genotype_matching, chromosome_style)
    counts = report.summary()

    if as_json:
        print(json.dumps({**counts, "samples": report.samples}, indent=2))
        return

    console.print(f"[green]✓[/green] {counts['variants']:,} variants from {vcf_path.name}")
    console.print(f"  Data lines: {counts['data_lines']:,}")
    console.print(f"  Skipped lines: {counts['skipped_lines']:,}")
    console.print(f"  Alleles filtered by genotype: {counts['filtered_alleles']:,}")
    console.print(f"  Dropped variants: {counts['dropped_variants']:,}")
    if report.samples:
        console.print(f"  Samples: {', '.join(report.samples)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
