"""Manifest filtering, archival and extraction."""

from closurectl.export.archive import ExtractReport, extract_archive, write_archive
from closurectl.export.filters import DOC_PREFIXES, ExtractionFilter, OutputFilter
from closurectl.export.pipeline import ExportPipeline, ExportReport, Manifest

__all__ = [
    "DOC_PREFIXES",
    "ExportPipeline",
    "ExportReport",
    "ExtractReport",
    "ExtractionFilter",
    "Manifest",
    "OutputFilter",
    "extract_archive",
    "write_archive",
]
