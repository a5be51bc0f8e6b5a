"""Module, file and typing references of a parsed source unit."""

from __future__ import annotations

from dataclasses import dataclass

from tsbridge.checker.units import SourceUnit
from tsbridge.paths import is_typings


@dataclass(frozen=True)
class ReferenceSet:
    """Dependencies of one source unit.

    ``modules`` comes from module resolution; ``files`` and ``typings``
    partition the unit's reference directives.
    """

    files: tuple[str, ...] = ()
    modules: tuple[str, ...] = ()
    typings: tuple[str, ...] = ()


def get_references(unit: SourceUnit) -> ReferenceSet:
    """Collect resolved modules and referenced files of *unit*."""
    modules: list[str] = []
    for module in (unit.resolved_modules or {}).values():
        if module is not None and module.resolved_file_name:
            modules.append(module.resolved_file_name)

    referenced = [ref.file_name for ref in unit.referenced_files or ()]

    return ReferenceSet(
        files=tuple(name for name in referenced if not is_typings(name)),
        modules=tuple(modules),
        typings=tuple(name for name in referenced if is_typings(name)),
    )
