"""jsoncmp: completion candidates extracted from JSON schema files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jsoncmp")
except PackageNotFoundError:
    __version__ = "dev"

from jsoncmp.api import create_source, complete
from jsoncmp.codes import DiagnosticCode
from jsoncmp.config import OptionsError, SourceOptions, load_options
from jsoncmp.contracts import CompletionItem, CompletionResult
from jsoncmp.kernel.diagnostics import Diagnostic
from jsoncmp.kernel.mapping import FieldMapping, FormatSpec
from jsoncmp.kernel.merge import FieldDescriptor
from jsoncmp.kernel.store import SourceStore

__all__ = [
    "__version__",
    "create_source",
    "complete",
    "DiagnosticCode",
    "Diagnostic",
    "OptionsError",
    "SourceOptions",
    "load_options",
    "CompletionItem",
    "CompletionResult",
    "FieldMapping",
    "FormatSpec",
    "FieldDescriptor",
    "SourceStore",
]
