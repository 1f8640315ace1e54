"""
Module: importer.detection

Purpose:
    Detection subpackage for locating typed regions in document text.

Key Modules:
    - sections: Header/implicit answer-key detection and type inference

Used By:
    - importer.pipeline: Splits documents before parsing
"""

from .sections import detect_sections, infer_section_type, split_document

__all__ = [
    "detect_sections",
    "infer_section_type",
    "split_document",
]
