"""Merge raw field records from many files into unique descriptors."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .extractor import RawFieldRecord
from .mapping import FormatSpec

# Source tag used when a document has no string detail value
UNKNOWN_SOURCE = "UnknownType"

FIELD_KIND = "Field"


@dataclass(frozen=True)
class FieldDescriptor:
    """A display-ready completion candidate for one unique label."""
    label: str
    type: str
    documentation: str  # formatted type and doc segments, newline-joined
    sources: Tuple[str, ...]  # one entry per contributing record, duplicates kept
    kind: str = FIELD_KIND

    @property
    def detail(self) -> str:
        return ", ".join(self.sources)


@dataclass
class _LabelAccumulator:
    type: str
    fallback_doc: Optional[str]
    documentation: str = ""
    sources: List[str] = field(default_factory=list)


def _render_documentation(type_text: str, doc_text: str, fmt: FormatSpec) -> str:
    parts: List[str] = []
    if type_text:
        parts.append(fmt.apply_type(type_text))
    if doc_text:
        parts.append(fmt.apply_doc(doc_text))
    return "\n".join(parts)


def merge(
    records: Iterable[Tuple[str, RawFieldRecord]],
    fmt: Optional[FormatSpec] = None,
) -> List[FieldDescriptor]:
    """
    Fold (path, record) pairs into one descriptor per label.

    Records must arrive in processing order: file-list order, then entry
    order within each file.

    Rules per label:
    - type comes from the first record
    - every record appends its detail value (or "UnknownType") to sources
    - documentation is the first non-empty doc value; failing that, the first
      record's fallback doc value; failing that, empty

    Returns:
        Descriptors sorted by label
    """
    fmt = fmt or FormatSpec()
    by_label: Dict[str, _LabelAccumulator] = {}

    for _path, record in records:
        acc = by_label.get(record.label)
        if acc is None:
            acc = _LabelAccumulator(type=record.type, fallback_doc=record.fallback_doc_value)
            by_label[record.label] = acc

        acc.sources.append(record.detail_value if record.detail_value is not None else UNKNOWN_SOURCE)

        if not acc.documentation and record.doc_value:
            acc.documentation = record.doc_value

    descriptors: List[FieldDescriptor] = []
    for label in sorted(by_label):
        acc = by_label[label]
        doc_text = acc.documentation or acc.fallback_doc or ""
        descriptors.append(FieldDescriptor(
            label=label,
            type=acc.type,
            documentation=_render_documentation(acc.type, doc_text, fmt),
            sources=tuple(acc.sources),
        ))

    return descriptors
