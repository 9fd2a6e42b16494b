"""Public API for jsoncmp.

Hosts should use these functions (or ``SourceStore`` directly) instead of
importing from ``_internal``.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jsoncmp.config import SourceOptions, load_options
from jsoncmp.contracts import CompletionResult
from jsoncmp.kernel.diagnostics import DEFAULT_LIMIT, Diagnostic, Notify
from jsoncmp.kernel.store import SourceStore
from jsoncmp._internal.io.json_files import expand_paths


OptionsInput = Union[str, os.PathLike, Path, Dict[str, Any], SourceOptions, None]


def create_source(
    options: OptionsInput = None,
    notify: Optional[Notify] = None,
    diagnostic_limit: int = DEFAULT_LIMIT,
) -> SourceStore:
    """Build a loaded SourceStore from options.

    Directory entries in ``options.paths`` are expanded once, here; files
    added to a directory later require a new store. Scan failures are
    reported by the store's first reload, under the same budget.

    Args:
        options: Options model, dict, path to a JSON options file, or None
        notify: Optional host callback receiving (message, logging level)
        diagnostic_limit: Maximum diagnostics delivered per reload

    Raises:
        OptionsError: if the options do not load or validate
    """
    opts = load_options(options)
    scan_diagnostics: List[Diagnostic] = []
    file_paths = expand_paths(opts.paths, opts.pattern, diagnostics=scan_diagnostics)
    return SourceStore(
        file_paths,
        name=opts.name,
        priority=opts.priority,
        mapping=opts.mapping,
        fmt=opts.formatting,
        notify=notify,
        diagnostic_limit=diagnostic_limit,
        initial_diagnostics=scan_diagnostics,
    )


def complete(options: OptionsInput = None, notify: Optional[Notify] = None) -> CompletionResult:
    """One-shot load: build a store from options and return its candidates."""
    return create_source(options, notify=notify).complete()
