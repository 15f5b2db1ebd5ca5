"""Annotation extraction across upstream annotator conventions."""

from .dialects import (
    DIALECT_NAMES,
    Annotation,
    AnnotationDialect,
    PlainInfoDialect,
    SnpEffDialect,
    VepCsqDialect,
    build_dialects,
    merge_annotations,
)
from .frequency import extract_allele_frequency

__all__ = [
    "DIALECT_NAMES",
    "Annotation",
    "AnnotationDialect",
    "PlainInfoDialect",
    "SnpEffDialect",
    "VepCsqDialect",
    "build_dialects",
    "extract_allele_frequency",
    "merge_annotations",
]
