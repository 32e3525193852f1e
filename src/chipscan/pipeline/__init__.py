"""Pipeline stages for chipscan.

Stages, consumed leaf-first:
1. stage_resolve - Inline object lookup table and resolver
2. stage_parse - Docs API JSON to typed content tree
3. stage_classify - Recursive content classification
4. stage_report - Summaries, JSON dumps and console rendering

Classification and resolution are pure in-memory operations; all I/O
happens before them (acquisition) or after them (reporting).
"""

from .stage_classify import ContentClassifier, classify
from .stage_parse import (
    parse_content,
    parse_document,
    parse_paragraph_element,
    parse_structural_element,
)
from .stage_report import ConsoleReporter, records_to_json, summarize
from .stage_resolve import build_definition, build_lookup_table, resolve

__all__ = [
    # Resolve
    "build_definition",
    "build_lookup_table",
    "resolve",
    # Parse
    "parse_content",
    "parse_document",
    "parse_paragraph_element",
    "parse_structural_element",
    # Classify
    "ContentClassifier",
    "classify",
    # Report
    "ConsoleReporter",
    "records_to_json",
    "summarize",
]
