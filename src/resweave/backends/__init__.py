from __future__ import annotations

from pathlib import Path

from resweave.backends.base import Backend, BackendEntry
from resweave.backends.file import FileBackend
from resweave.backends.package import PackageBackend
from resweave.backends.literal import StringBackend


def default_entries(
    *, package: str | None = None, base_dir: str | Path | None = None
) -> tuple[BackendEntry, ...]:
    # Bare identifiers go to the package backend.
    pkg = PackageBackend(package)
    return (
        BackendEntry("file:", FileBackend(base_dir)),
        BackendEntry("string:", StringBackend()),
        BackendEntry("classpath:", pkg),
        BackendEntry("", pkg),
    )


__all__ = [
    "Backend",
    "BackendEntry",
    "FileBackend",
    "PackageBackend",
    "StringBackend",
    "default_entries",
]
