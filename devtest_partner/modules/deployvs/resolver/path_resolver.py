"""Turn the raw MAR path field into the concrete list of paths to deploy."""

from __future__ import annotations

import glob
import logging
import os
import re
from pathlib import Path
from string import Template
from typing import Iterable, List, Mapping, Optional, Union

from devtest_partner.modules.deployvs.domain import NoMatchingFileError
from devtest_partner.modules.deployvs.domain.constants import REMOTE_MARKERS

log = logging.getLogger(__name__)

_COMMA_SEPARATOR = re.compile(r"\s*,\s*")
_NEWLINE_SEPARATOR = re.compile(r"\s*\n\s*")
_WILDCARD_CHARS = ("*", "?")


def split_mar_paths(raw: Optional[str]) -> List[str]:
    """Split a comma or newline separated list of paths.

    A comma anywhere switches the whole value to comma mode, so newlines in
    such a value stay part of the entries. Trailing empty entries are dropped.
    """
    if not raw:
        return []
    separator = _COMMA_SEPARATOR if "," in raw else _NEWLINE_SEPARATOR
    parts = separator.split(raw)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def is_remote_reference(path: str) -> bool:
    """Lexical check only: "file" or "http" anywhere in the path, any case."""
    lowered = path.lower()
    return any(marker in lowered for marker in REMOTE_MARKERS)


def has_wildcard(path: str) -> bool:
    return any(char in path for char in _WILDCARD_CHARS)


def _literal_brackets(pattern: str) -> str:
    # only * and ? are wildcards, a "[" in a MAR path is part of the name
    return pattern.replace("[", "[[]")


def expand_parameter(value: Optional[str], env: Mapping[str, str]) -> str:
    """Substitute ``$NAME`` and ``${NAME}`` from the run environment; unknown names stay as written."""
    if not value:
        return value or ""
    return Template(value).safe_substitute(env)


def expand_parameters(values: Iterable[str], env: Mapping[str, str]) -> List[str]:
    return [expand_parameter(value, env) for value in values]


def expand_wildcards(values: Iterable[str], workspace: Path) -> List[str]:
    """Replace wildcard entries by the workspace files they match.

    Literal entries and remote references are passed through untouched, even
    when no such file exists. A wildcard entry without any match is fatal.
    """
    root = str(workspace)
    resolved: List[str] = []
    for value in values:
        if is_remote_reference(value) or not has_wildcard(value):
            resolved.append(value)
            continue
        matches = sorted(
            Path(match).as_posix()
            for match in glob.glob(_literal_brackets(value), root_dir=root, recursive=True)
            if os.path.isfile(os.path.join(root, match))
        )
        if not matches:
            raise NoMatchingFileError(value, root)
        log.debug("Pattern %s matched %d file(s) in %s", value, len(matches), root)
        resolved.extend(matches)
    return resolved


class PathResolver:
    """Split, parameter-expand and glob MAR path specifications against a workspace."""

    def __init__(self, workspace: Union[str, Path], env: Optional[Mapping[str, str]] = None) -> None:
        self.workspace = Path(workspace)
        self.env: Mapping[str, str] = env or {}

    def resolve(self, specs: Union[str, Iterable[str], None]) -> List[str]:
        if specs is None:
            return []
        entries = split_mar_paths(specs) if isinstance(specs, str) else list(specs)
        expanded = expand_parameters(entries, self.env)
        return expand_wildcards(expanded, self.workspace)
