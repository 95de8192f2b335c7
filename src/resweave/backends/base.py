from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from resweave.ids import validate_scheme
from resweave.resource import Resource


class Backend(Protocol):
    relocatable: bool

    def resolve(self, path: str) -> Resource: ...


@dataclass(frozen=True)
class BackendEntry:
    scheme: str
    backend: Backend
    # None: take the backend's own ``relocatable`` flag.
    relocatable: bool | None = None

    def __post_init__(self) -> None:
        validate_scheme(self.scheme)
        if self.relocatable is None:
            object.__setattr__(
                self, "relocatable", bool(getattr(self.backend, "relocatable", False))
            )

    @property
    def is_default(self) -> bool:
        return self.scheme == ""
