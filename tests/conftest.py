"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed jsoncmp package.
"""

import json
import os
import pytest
from pathlib import Path


def _write_schema(directory: Path, name: str, data, mtime_ns=None) -> Path:
    path = directory / name
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(json.dumps(data), encoding="utf-8")
    if mtime_ns is not None:
        os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


@pytest.fixture
def write_schema(tmp_path):
    """Write a schema file (dict/list as JSON, str verbatim) under tmp_path.

    An explicit mtime_ns keeps staleness tests independent of filesystem
    timestamp resolution.
    """
    def _write(name, data, mtime_ns=None):
        return _write_schema(tmp_path, name, data, mtime_ns)
    return _write


@pytest.fixture
def users_schema():
    return {
        "type": "Users",
        "fields": [
            {"column": "id", "fieldType": {"type": "integer"}},
            {"column": "email", "fieldType": {"type": "string", "options": ["unique", "indexed"]}},
        ],
    }


@pytest.fixture
def orders_schema():
    return {
        "type": "Orders",
        "fields": [
            {"column": "id", "fieldType": {"type": "uuid", "options": "primary key"}},
            {"column": "total", "fieldType": {"type": "decimal"}},
        ],
    }


def pytest_sessionfinish(session, exitstatus):
    """Best-effort cleanup for basetemp on Windows without patching pytest internals."""
    if os.name != "nt":
        return
    basetemp = getattr(session.config.option, "basetemp", None)
    if not basetemp:
        return
    basetemp_path = Path(basetemp)
    if not basetemp_path.exists():
        return
    try:
        import shutil
        shutil.rmtree(basetemp_path)
    except (PermissionError, OSError):
        import warnings
        warnings.warn(f"Could not remove basetemp: {basetemp_path}")
