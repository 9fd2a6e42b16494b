"""Options for building a completion source from host configuration."""

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from jsoncmp.kernel.mapping import FieldMapping, FormatSpec
from jsoncmp.kernel.store import DEFAULT_NAME, DEFAULT_PRIORITY
from jsoncmp._internal.io.json_files import DEFAULT_PATTERN


class OptionsError(ValueError):
    """Raised when an options file cannot be read or does not validate."""


class SourceOptions(BaseModel):
    """Everything needed to construct a SourceStore.

    ``paths`` may mix files and directories; directories are expanded to the
    files whose names match ``pattern`` (a regular expression). ``name`` and
    ``priority`` are carried onto the store for the host's source registration.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(DEFAULT_NAME, alias="sourceName")
    priority: int = DEFAULT_PRIORITY
    paths: List[str] = Field(default_factory=list)
    pattern: str = DEFAULT_PATTERN
    mapping: FieldMapping = Field(default_factory=FieldMapping)
    formatting: FormatSpec = Field(default_factory=FormatSpec)

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Validate pattern compiles as a regular expression."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid file pattern {v!r}: {e}")
        return v


def _options_from_dict(data: Dict[str, Any]) -> SourceOptions:
    try:
        return SourceOptions.model_validate(data)
    except ValidationError as e:
        raise OptionsError(f"Invalid options: {e}") from e


def load_options(source: Union[str, os.PathLike, Path, Dict[str, Any], SourceOptions, None] = None) -> SourceOptions:
    """Load options from a JSON file, a dict, or pass through an existing model.

    ``None`` yields the defaults (no paths).

    Raises:
        OptionsError: if the file cannot be read or parsed, or validation fails
    """
    if source is None:
        return SourceOptions()
    if isinstance(source, SourceOptions):
        return source
    if isinstance(source, dict):
        return _options_from_dict(source)

    path = Path(source)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise OptionsError(f"Cannot read options file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise OptionsError(f"Options file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise OptionsError(f"Options file {path} must contain a JSON object")
    return _options_from_dict(data)
