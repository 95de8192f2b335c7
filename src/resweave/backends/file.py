from __future__ import annotations

import logging
from pathlib import Path

from resweave.errors import ResourceNotFoundError
from resweave.resource import Resource

logger = logging.getLogger(__name__)


class FileBackend:
    relocatable = True

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def _locate(self, path: str) -> Path:
        try:
            p = Path(path).expanduser()
        except RuntimeError as e:
            # unknown ~user
            raise ResourceNotFoundError(path, str(e)) from e
        if self.base_dir is not None and not p.is_absolute():
            p = self.base_dir / p
        return p

    def resolve(self, path: str) -> Resource:
        target = self._locate(path)
        try:
            is_file = target.is_file()
        except OSError as e:
            raise ResourceNotFoundError(path, str(e)) from e
        if not is_file:
            raise ResourceNotFoundError(path, f"no such file: {target}")
        logger.debug("file resource %s -> %s", path, target)
        return Resource(identifier=path, path=str(target), opener=lambda: target.open("rb"))
