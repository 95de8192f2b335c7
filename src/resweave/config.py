from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from resweave.backends import BackendEntry, default_entries
from resweave.errors import ConfigurationError

ENV_PARENT_PATH = "RESWEAVE_PARENT_PATH"
ENV_EXTENSION = "RESWEAVE_EXTENSION"
ENV_PACKAGE = "RESWEAVE_PACKAGE"
ENV_BASE_DIR = "RESWEAVE_BASE_DIR"


def check_entries(entries: tuple[BackendEntry, ...]) -> None:
    seen: set[str] = set()
    for entry in entries:
        if not isinstance(entry, BackendEntry):
            raise ConfigurationError(f"expected BackendEntry, got {type(entry).__name__}")
        if entry.scheme in seen:
            if entry.is_default:
                raise ConfigurationError("more than one default (empty scheme) backend registered")
            raise ConfigurationError(f"scheme registered twice: {entry.scheme!r}")
        seen.add(entry.scheme)


@dataclass(frozen=True)
class ResolutionConfig:
    entries: tuple[BackendEntry, ...] = field(default_factory=default_entries)
    parent_path: str = ""
    extension: str = ""

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        if not isinstance(self.parent_path, str) or not isinstance(self.extension, str):
            raise ConfigurationError("parent_path and extension must be strings")
        check_entries(entries)

    @property
    def relocating(self) -> bool:
        return bool(self.parent_path or self.extension)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, entries: Iterable[BackendEntry] | None = None
    ) -> "ResolutionConfig":
        unknown = set(data) - {"parent_path", "extension", "package", "base_dir"}
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {sorted(unknown)}")
        if entries is None:
            entries = default_entries(
                package=data.get("package") or None,
                base_dir=data.get("base_dir") or None,
            )
        return cls(
            entries=tuple(entries),
            parent_path=str(data.get("parent_path") or ""),
            extension=str(data.get("extension") or ""),
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        entries: Iterable[BackendEntry] | None = None,
    ) -> "ResolutionConfig":
        env = os.environ if environ is None else environ
        return cls.from_mapping(
            {
                "parent_path": env.get(ENV_PARENT_PATH, ""),
                "extension": env.get(ENV_EXTENSION, ""),
                "package": env.get(ENV_PACKAGE, ""),
                "base_dir": env.get(ENV_BASE_DIR, ""),
            },
            entries=entries,
        )
