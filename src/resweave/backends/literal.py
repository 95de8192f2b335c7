from __future__ import annotations

from resweave.resource import Resource


class StringBackend:
    """Treats the path as the resource content itself."""

    relocatable = False

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def resolve(self, path: str) -> Resource:
        return Resource.from_bytes(path, path, path.encode(self.encoding))
