from __future__ import annotations

import logging
from typing import Iterable

from resweave.backends.base import Backend, BackendEntry
from resweave.resource import Resource

logger = logging.getLogger(__name__)


class RelocatingBackend:
    """Resolves ``parent_path + path + extension`` on the wrapped backend.

    Plain concatenation: ``parent_path`` must carry its own trailing
    separator if one is wanted.
    """

    relocatable = True

    def __init__(self, backend: Backend, parent_path: str = "", extension: str = "") -> None:
        self.backend = backend
        self.parent_path = parent_path
        self.extension = extension

    def relocate(self, path: str) -> str:
        return f"{self.parent_path}{path}{self.extension}"

    def resolve(self, path: str) -> Resource:
        return self.backend.resolve(self.relocate(path))

    def __repr__(self) -> str:
        return (
            f"RelocatingBackend({self.backend!r}, parent_path={self.parent_path!r}, "
            f"extension={self.extension!r})"
        )


def relocate_entries(
    entries: Iterable[BackendEntry], *, parent_path: str = "", extension: str = ""
) -> tuple[BackendEntry, ...]:
    entries = tuple(entries)
    if not parent_path and not extension:
        return entries

    logger.debug(
        "using parent_path %r and extension %r for resource resolution", parent_path, extension
    )
    out: list[BackendEntry] = []
    for entry in entries:
        if entry.relocatable:
            entry = BackendEntry(
                entry.scheme,
                RelocatingBackend(entry.backend, parent_path, extension),
                relocatable=True,
            )
        out.append(entry)
    return tuple(out)
