"""Reading schema files and expanding directories into file lists."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from jsoncmp.codes import DiagnosticCode
from jsoncmp.kernel.diagnostics import Diagnostic

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = r"\.json$"


def read_text(path: Union[str, os.PathLike]) -> str:
    """Read a schema file as UTF-8 text (OSError / UnicodeDecodeError propagate)."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def parse_json(text: str) -> Any:
    """Parse a single top-level JSON value (json.JSONDecodeError propagates)."""
    return json.loads(text)


def discover_json_files(
    directory: Union[str, os.PathLike],
    pattern: str = DEFAULT_PATTERN,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> List[str]:
    """List regular files directly inside ``directory`` whose name matches ``pattern``.

    Files are returned sorted by name so the merge order is reproducible. A
    directory that cannot be scanned yields an empty list. The failure is
    appended to ``diagnostics`` as DIRECTORY_SCAN_FAILURE when a list is given,
    otherwise it is logged.
    """
    regex = re.compile(pattern)
    directory = Path(directory)
    try:
        entries = sorted(os.scandir(directory), key=lambda e: e.name)
    except OSError as e:
        message = f"Failed to scan dir for JSON files: {directory}: {e}"
        if diagnostics is not None:
            diagnostics.append(Diagnostic(
                code=DiagnosticCode.DIRECTORY_SCAN_FAILURE,
                message=message,
                severity=logging.ERROR,
                path=str(directory),
            ))
        else:
            logger.error(message)
        return []

    return [
        str(directory / entry.name)
        for entry in entries
        if entry.is_file() and regex.search(entry.name)
    ]


def expand_paths(
    paths: Sequence[Union[str, os.PathLike]],
    pattern: str = DEFAULT_PATTERN,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> List[str]:
    """Expand directories to the JSON files they contain, keeping order.

    Anything that is not an existing directory is kept as a file path; a
    missing file is reported later by the store when it fails to stat.
    """
    expanded: List[str] = []
    for entry in paths:
        if Path(entry).is_dir():
            expanded.extend(discover_json_files(entry, pattern, diagnostics=diagnostics))
        else:
            expanded.append(str(entry))
    return expanded
