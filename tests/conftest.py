"""Pytest configuration and fixtures for oncofhir-vcf tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from fixtures.vcf_generator import (  # noqa: E402
    SyntheticVariant,
    VCFGenerator,
    make_multiallelic_vcf,
    make_oncology_panel_vcf,
    make_snpeff_vcf,
    make_vep_csq_vcf,
)

__all__ = [
    "SyntheticVariant",
    "VCFGenerator",
    "make_multiallelic_vcf",
    "make_oncology_panel_vcf",
    "make_snpeff_vcf",
    "make_vep_csq_vcf",
]


@pytest.fixture
def oncology_panel_vcf() -> str:
    return make_oncology_panel_vcf()


@pytest.fixture
def snpeff_vcf() -> str:
    return make_snpeff_vcf()


@pytest.fixture
def vcf_file(tmp_path):
    """Write VCF text to a temporary file and return its path."""

    def _write(content: str, name: str = "sample.vcf") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
