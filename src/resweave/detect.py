from __future__ import annotations

import io
import logging
import re
from typing import Iterable, Mapping, Protocol

from resweave.errors import EngineDetectionError
from resweave.resource import Resource

logger = logging.getLogger(__name__)

THYMELEAF_NAMESPACE = "http://www.thymeleaf.org"


class EngineDetector(Protocol):
    def can_parse(self, template_name: str, template: Resource | None) -> bool: ...


class ExtensionDetector:
    def __init__(self, *extensions: str) -> None:
        self.extensions = tuple(extensions or (".ftl",))

    def can_parse(self, template_name: str, template: Resource | None = None) -> bool:
        for ext in self.extensions:
            if template_name.endswith(ext):
                logger.debug("template %s ends with %s", template_name, ext)
                return True
        logger.debug("template %s matches none of %s", template_name, self.extensions)
        return False


class NamespaceDetector:
    """Accepts templates declaring an XML namespace, e.g. ``xmlns:th="..."``."""

    def __init__(self, namespace: str = THYMELEAF_NAMESPACE) -> None:
        self.namespace = namespace
        self._pattern = re.compile(r'xmlns[^=]+=\s*"' + re.escape(namespace) + '"')

    def can_parse(self, template_name: str, template: Resource | None) -> bool:
        if template is None:
            return False
        try:
            with io.TextIOWrapper(template.open(), encoding="utf-8", errors="replace") as fh:
                for line in fh:
                    if self._pattern.search(line):
                        logger.debug(
                            "template %s declares namespace %s", template_name, self.namespace
                        )
                        return True
        except OSError as e:
            raise EngineDetectionError(f"failed to read template {template_name!r}") from e
        logger.debug("template %s doesn't declare namespace %s", template_name, self.namespace)
        return False


def detect_engine(
    template_name: str,
    template: Resource | None,
    detectors: Mapping[str, EngineDetector] | Iterable[tuple[str, EngineDetector]],
) -> str:
    items = detectors.items() if isinstance(detectors, Mapping) else detectors
    for engine, detector in items:
        if detector.can_parse(template_name, template):
            logger.debug("using %s for template %s", engine, template_name)
            return engine
    raise EngineDetectionError(f"no template engine can handle {template_name!r}")


DEFAULT_DETECTORS: dict[str, EngineDetector] = {
    "freemarker": ExtensionDetector(".ftl"),
    "thymeleaf": NamespaceDetector(),
}
