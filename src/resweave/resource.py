from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Union

from resweave.errors import ResWeaveError

Opener = Callable[[], BinaryIO]


@dataclass(frozen=True)
class Resource:
    identifier: str
    path: str
    opener: Opener = field(repr=False, compare=False)

    def open(self) -> BinaryIO:
        return self.opener()

    def read_bytes(self) -> bytes:
        with self.open() as fh:
            return fh.read()

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read_bytes().decode(encoding)

    @classmethod
    def from_bytes(cls, identifier: str, path: str, data: bytes) -> "Resource":
        return cls(identifier=identifier, path=path, opener=lambda: io.BytesIO(data))


@dataclass(frozen=True)
class Found:
    resource: Resource

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Missing:
    identifier: str
    error: ResWeaveError

    @property
    def ok(self) -> bool:
        return False


ResolveResult = Union[Found, Missing]
