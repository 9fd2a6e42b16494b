"""Schema extraction: one parsed document in, raw field records out."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from jsoncmp.codes import DiagnosticCode
from .diagnostics import Diagnostic
from .json_value import JsonKind, is_string_sequence, kind_of
from .mapping import FieldMapping
from .resolver import resolve


@dataclass(frozen=True)
class RawFieldRecord:
    """One field entry of one schema file, before merging."""
    label: str
    type: str = ""
    doc_value: Optional[str] = None
    detail_value: Optional[str] = None  # document-level, e.g. the table name
    fallback_doc_value: Optional[str] = None


def _as_string(value: Any) -> Optional[str]:
    if kind_of(value) is JsonKind.STRING:
        return value
    return None


def _as_doc(value: Any) -> Optional[str]:
    """Normalize a documentation value: a string, or a list of strings joined by ', '."""
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return value
    if kind is JsonKind.SEQUENCE and is_string_sequence(value):
        return ", ".join(value)
    return None


def extract(
    document: Any,
    mapping: FieldMapping,
    path: Optional[str] = None,
) -> Tuple[List[RawFieldRecord], List[Diagnostic]]:
    """Extract raw field records from a parsed schema document.

    Malformed shapes never raise. A missing fields container produces one
    diagnostic and no records; an entry without a string label produces one
    diagnostic and is skipped. A mapping with an empty label_field or
    fields_container yields nothing and reports nothing.

    Args:
        document: Parsed JSON value of one schema file
        mapping: Where to find labels, types, docs and details
        path: Source file path, used only in diagnostic messages

    Returns:
        Tuple of (records in entry order, diagnostics)
    """
    records: List[RawFieldRecord] = []
    diagnostics: List[Diagnostic] = []
    where = path if path is not None else "<document>"

    # Without a label path or a container path nothing can be extracted
    if not mapping.can_extract():
        return records, diagnostics

    fields = resolve(document, mapping.fields_container)
    if kind_of(fields) is not JsonKind.SEQUENCE:
        diagnostics.append(Diagnostic(
            code=DiagnosticCode.MISSING_FIELDS_CONTAINER,
            message=f"No '{mapping.fields_container}' array found in {where}",
            severity=logging.WARNING,
            path=path,
        ))
        return records, diagnostics

    # Detail is document-level provenance, so it is the same for every entry
    detail_value = _as_string(resolve(document, mapping.detail_field))

    for entry in fields:
        label = _as_string(resolve(entry, mapping.label_field))
        if label is None:
            diagnostics.append(Diagnostic(
                code=DiagnosticCode.INVALID_FIELD_ENTRY,
                message=(
                    f"Invalid field entry in {where}, missing '{mapping.label_field}' "
                    f"or it is not a string."
                ),
                severity=logging.WARNING,
                path=path,
            ))
            continue

        records.append(RawFieldRecord(
            label=label,
            type=_as_string(resolve(entry, mapping.type_field)) or "",
            doc_value=_as_doc(resolve(entry, mapping.doc_field)),
            detail_value=detail_value,
            fallback_doc_value=_as_string(resolve(entry, mapping.fallback_doc_field)),
        ))

    return records, diagnostics
