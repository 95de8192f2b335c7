from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable

from resweave.errors import ResourceNotFoundError
from resweave.resource import Resource

logger = logging.getLogger(__name__)


def _split_parts(path: str) -> list[str]:
    return [part for part in path.replace("\\", "/").split("/") if part and part != "."]


class PackageBackend:
    """Reads assets embedded in importable packages.

    With ``package`` set, paths are relative to that package. Without it the
    first path segment names the top-level package, so
    ``/myapp/templates/hello.html`` reads ``templates/hello.html`` from
    ``myapp``. A leading ``/`` is ignored either way.
    """

    relocatable = True

    def __init__(self, package: str | None = None) -> None:
        self.package = package

    def _locate(self, path: str) -> Traversable:
        parts = _split_parts(path)
        if ".." in parts:
            raise ResourceNotFoundError(path, "parent references are not allowed")
        package = self.package
        if package is None:
            if len(parts) < 2:
                raise ResourceNotFoundError(path, "expected <package>/<resource>")
            package, parts = parts[0], parts[1:]
        if not parts:
            raise ResourceNotFoundError(path, "empty resource path")
        try:
            root = resources.files(package)
        except (ModuleNotFoundError, TypeError) as e:
            raise ResourceNotFoundError(path, f"package {package!r} is not importable") from e
        return root.joinpath(*parts)

    def resolve(self, path: str) -> Resource:
        candidate = self._locate(path)
        if not candidate.is_file():
            raise ResourceNotFoundError(path, "no such package resource")
        logger.debug("package resource %s -> %s", path, candidate)
        return Resource(identifier=path, path=str(candidate), opener=lambda: candidate.open("rb"))
