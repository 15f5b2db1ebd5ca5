"""Chromosome label normalization."""

CHROMOSOME_STYLES = ("as_is", "bare", "prefixed")


def normalize_chromosome(chrom: str, add_chr: bool = False) -> str:
    """Normalize chromosome string for consistent matching.

    Args:
        chrom: Chromosome string (may or may not have 'chr' prefix)
        add_chr: If True, ensures 'chr' prefix is present; if False, removes it

    Returns:
        Normalized chromosome string
    """
    bare = chrom[3:] if chrom.lower().startswith("chr") else chrom
    if bare.upper() in ("M", "MT"):
        bare = "M" if add_chr else "MT"
    elif bare.upper() in ("X", "Y"):
        bare = bare.upper()
    return f"chr{bare}" if add_chr else bare


def apply_chromosome_style(chrom: str, style: str) -> str:
    """Render a chromosome label in one of CHROMOSOME_STYLES."""
    chrom = chrom.strip()
    if style == "as_is" or not chrom:
        return chrom
    if style == "bare":
        return normalize_chromosome(chrom, add_chr=False)
    if style == "prefixed":
        return normalize_chromosome(chrom, add_chr=True)
    raise ValueError(f"Unknown chromosome style: {style}")
