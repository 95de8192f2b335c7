from __future__ import annotations

import sys
from pathlib import Path

import pytest

from resweave.errors import ResourceNotFoundError
from resweave.resource import Resource


class RecordingBackend:
    """Backend that serves a fixed set of paths and records every lookup."""

    def __init__(
        self, name: str, existing: set[str] | None = None, *, relocatable: bool = True
    ) -> None:
        self.name = name
        self.existing = existing
        self.relocatable = relocatable
        self.calls: list[str] = []

    def resolve(self, path: str) -> Resource:
        self.calls.append(path)
        if self.existing is not None and path not in self.existing:
            raise ResourceNotFoundError(path)
        return Resource.from_bytes(path, path, f"{self.name}:{path}".encode("utf-8"))


@pytest.fixture
def make_backend():
    return RecordingBackend


@pytest.fixture
def asset_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    pkg = tmp_path / "rw_assets"
    (pkg / "email").mkdir(parents=True)
    (pkg / "__init__.py").write_text("")
    (pkg / "email" / "hello.html").write_text("<p>hello</p>")
    (pkg / "email" / "hello_mobile.html").write_text("<p>hi</p>")
    (pkg / "template").mkdir()
    (pkg / "template" / "createAccount.html").write_text("<p>welcome</p>")
    monkeypatch.delitem(sys.modules, "rw_assets", raising=False)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "rw_assets"
