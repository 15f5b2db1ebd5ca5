"""Multi-allelic decomposition and genotype-based allele selection."""

import re

GENOTYPE_MATCHING_MODES = ("exact", "substring")

MISSING_ALLELES = {"", "."}

_GT_SEPARATOR = re.compile(r"[/|]")


def classify_variant(ref: str, alt: str) -> str:
    """
    Classify variant type based on REF and ALT alleles.

    Args:
        ref: Reference allele
        alt: Alternative allele

    Returns:
        Variant type: 'snp', 'indel', 'mnp', or 'sv'
    """
    if alt.startswith('<') and alt.endswith('>'):
        return 'sv'

    if len(ref) == 1 and len(alt) == 1:
        return 'snp'

    if len(ref) != len(alt):
        return 'indel'

    return 'mnp'


def decompose_multiallelic(alts: list[str]) -> list[tuple[int, str]]:
    """
    Decompose a multi-allelic ALT list into (allele_index, alt) pairs.

    Allele indices are 1-based as in GT fields; missing alleles are skipped
    but still consume an index so later alleles keep their GT number.

    Args:
        alts: Alternate alleles in ALT-field order

    Returns:
        List of (allele_index, alt) tuples in ALT-field order
    """
    return [
        (index, alt.strip())
        for index, alt in enumerate(alts, start=1)
        if alt.strip() not in MISSING_ALLELES
    ]


def parse_genotype(gt: str) -> list[int | None]:
    """Split a GT string into allele indices, None for missing calls."""
    alleles: list[int | None] = []
    for token in _GT_SEPARATOR.split(gt.strip()):
        try:
            alleles.append(int(token))
        except ValueError:
            alleles.append(None)
    return alleles


def is_no_call(gt: str) -> bool:
    """True when a GT carries no called allele at all (e.g. './.')."""
    return all(allele is None for allele in parse_genotype(gt))


def genotype_has_allele(gt: str, allele_index: int, mode: str = "exact") -> bool:
    """Check whether a GT string calls the given allele index.

    ``exact`` compares integer tokens split on '/' or '|'. ``substring`` is
    the legacy check of the index text anywhere in the GT, so "1" also
    matches "0/11".
    """
    if mode == "substring":
        return str(allele_index) in gt
    if mode == "exact":
        return allele_index in parse_genotype(gt)
    raise ValueError(f"Unknown genotype matching mode: {mode}")


def select_called_alleles(
    alleles: list[tuple[int, str]],
    genotypes: list[str],
    mode: str = "exact",
) -> list[tuple[int, str]]:
    """
    Keep the alleles called by at least one sample genotype.

    Genotypes without any called allele are ignored; if none remain, no
    filtering is applied.

    Args:
        alleles: (allele_index, alt) pairs from decompose_multiallelic
        genotypes: GT values of the samples that carry one
        mode: One of GENOTYPE_MATCHING_MODES

    Returns:
        The retained (allele_index, alt) pairs, order preserved
    """
    evidence = [gt for gt in genotypes if not is_no_call(gt)]
    if not evidence:
        return list(alleles)

    return [
        (index, alt)
        for index, alt in alleles
        if any(genotype_has_allele(gt, index, mode) for gt in evidence)
    ]
