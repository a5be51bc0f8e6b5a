"""Translation of tsconfig-style wildcard specs into regular expressions."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Literal

WildcardUsage = Literal["files", "directories", "exclude"]

_RESERVED_CHARACTER = re.compile(r"[^\w\s/]", re.ASCII)
_DRIVE_ROOT = re.compile(r"^[A-Za-z]:/?")

_SINGLE_ASTERISK_FILES = r"([^./]|(\.(?!min\.js$))?)*"
_SINGLE_ASTERISK_OTHER = r"[^/]*"

# Package directories are never matched implicitly by a wildcard.
_IMPLICIT_EXCLUDE = r"(?!(node_modules|bower_components|jspm_packages)(/|$))"


def _root_length(path: str) -> int:
    if path.startswith("/"):
        return 1
    m = _DRIVE_ROOT.match(path)
    return m.end() if m else 0


def path_components(spec: str, base_path: str = "") -> list[str]:
    """Split *spec* into normalized components.

    Rooted specs start with their root (``""`` for ``/``, ``"c:"`` for a
    drive); relative specs start with their first directory name.
    """
    path = spec.replace("\\", "/")
    if not _root_length(path) and base_path:
        path = base_path.replace("\\", "/").rstrip("/") + "/" + path

    root_length = _root_length(path)
    parts: list[str] = []
    for part in path[root_length:].split("/"):
        if not part or part == ".":
            continue
        if part == ".." and parts and parts[-1] != "..":
            parts.pop()
            continue
        parts.append(part)

    if root_length:
        return [path[:root_length].rstrip("/")] + parts
    return parts


def _escape(component: str, single_asterisk: str) -> str:
    def replace(m: re.Match[str]) -> str:
        ch = m.group(0)
        if ch == "*":
            return single_asterisk
        if ch == "?":
            return "[^/]"
        return "\\" + ch

    return _RESERVED_CHARACTER.sub(replace, component)


def _spec_subpattern(spec: str, base_path: str, usage: WildcardUsage) -> str | None:
    components = path_components(spec, base_path)
    if not components:
        return None
    if usage != "exclude" and components[-1] == "**":
        return None

    single_asterisk = _SINGLE_ASTERISK_FILES if usage == "files" else _SINGLE_ASTERISK_OTHER
    if usage == "exclude":
        double_asterisk, leading_double_asterisk = r"(/.+?)?", r"(.+?/)?"
    else:
        double_asterisk, leading_double_asterisk = r"(/[^/.][^/]*)*?", r"([^/.][^/]*/)*?"

    subpattern = ""
    has_recursive_wildcard = False
    has_written_component = False
    optional_count = 0
    last = len(components) - 1
    for index, component in enumerate(components):
        if component == "**":
            if has_recursive_wildcard:
                return None
            if has_written_component:
                subpattern += double_asterisk
            elif index == last:
                # A lone ** matches every path.
                subpattern += ".*"
            else:
                # A leading ** carries its own trailing separator.
                subpattern += leading_double_asterisk
            has_recursive_wildcard = True
            continue

        if usage == "directories":
            subpattern += "("
            optional_count += 1
        if has_written_component:
            subpattern += "/"

        if usage == "exclude":
            subpattern += _escape(component, single_asterisk)
        else:
            component_pattern = ""
            rest = component
            if rest.startswith("*"):
                component_pattern += "([^./]" + single_asterisk + ")?"
                rest = rest[1:]
            elif rest.startswith("?"):
                component_pattern += "[^./]"
                rest = rest[1:]
            component_pattern += _escape(rest, single_asterisk)
            if component_pattern != component:
                subpattern += _IMPLICIT_EXCLUDE
            subpattern += component_pattern
        has_written_component = True

    subpattern += ")?" * optional_count
    return subpattern


def regular_expression_for_wildcard(
    specs: str | Sequence[str] | None,
    base_path: str = "",
    usage: WildcardUsage = "exclude",
) -> str | None:
    """Build a regular expression source matching any of *specs*.

    Returns None when no spec produces a pattern. ``exclude`` patterns also
    match every path below a matched directory.
    """
    if not specs:
        return None
    if isinstance(specs, str):
        specs = [specs]

    subpatterns: list[str] = []
    for spec in specs:
        if not spec:
            continue
        subpattern = _spec_subpattern(spec, base_path, usage)
        if subpattern is not None:
            subpatterns.append(f"({subpattern})")

    if not subpatterns:
        return None
    terminator = "($|/)" if usage == "exclude" else "$"
    return f"^({'|'.join(subpatterns)}){terminator}"
