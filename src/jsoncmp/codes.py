"""Diagnostic code constants for jsoncmp.

These constants prevent stringly-typed diagnostic codes and let hosts
filter notifications without parsing message text.
"""

from enum import Enum


class DiagnosticCode(str, Enum):
    """Diagnostic codes emitted while loading schema files."""

    # File-level failures (the file contributes nothing this pass)
    STAT_FAILURE = "STAT_FAILURE"
    READ_FAILURE = "READ_FAILURE"
    PARSE_FAILURE = "PARSE_FAILURE"

    # Shape mismatches (recovered per file or per field entry)
    MISSING_FIELDS_CONTAINER = "MISSING_FIELDS_CONTAINER"
    INVALID_FIELD_ENTRY = "INVALID_FIELD_ENTRY"

    # Path expansion
    DIRECTORY_SCAN_FAILURE = "DIRECTORY_SCAN_FAILURE"

    # Budget exhausted, later diagnostics are dropped
    DIAGNOSTICS_SUPPRESSED = "DIAGNOSTICS_SUPPRESSED"
