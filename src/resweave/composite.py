from __future__ import annotations

import dataclasses
import logging
from typing import Iterable

from resweave.backends.base import BackendEntry
from resweave.config import ResolutionConfig, check_entries
from resweave.errors import ResWeaveError, UnresolvableResourceError
from resweave.ids import parse_resource_id
from resweave.relocate import relocate_entries
from resweave.resource import Found, Missing, Resource, ResolveResult

logger = logging.getLogger(__name__)


class CompositeResolver:
    """Routes identifiers to backends by scheme.

    A recognized scheme selects its entry and the backend gets the path with
    the prefix stripped. Anything else goes, untouched, to the default
    (empty scheme) entry when one is registered. Backend failures are not
    retried on other entries.
    """

    def __init__(self, entries: Iterable[BackendEntry]) -> None:
        self._entries = tuple(entries)
        check_entries(self._entries)
        self._by_scheme: dict[str, BackendEntry] = {}
        self._default: BackendEntry | None = None
        for entry in self._entries:
            if entry.is_default:
                self._default = entry
            else:
                self._by_scheme[entry.scheme] = entry

    @property
    def entries(self) -> tuple[BackendEntry, ...]:
        return self._entries

    def _route(self, identifier: str) -> tuple[BackendEntry, str]:
        parsed = parse_resource_id(identifier)
        if parsed.has_scheme:
            entry = self._by_scheme.get(parsed.scheme)
            if entry is not None:
                logger.debug("routing %r to %r backend", identifier, entry.scheme)
                return entry, parsed.path
        if self._default is not None:
            logger.debug("routing %r to default backend", identifier)
            return self._default, identifier
        raise UnresolvableResourceError(identifier, parsed.scheme)

    def resolve(self, identifier: str) -> Resource:
        entry, path = self._route(identifier)
        resource = entry.backend.resolve(path)
        return dataclasses.replace(resource, identifier=identifier)

    def try_resolve(self, identifier: str) -> ResolveResult:
        try:
            return Found(self.resolve(identifier))
        except ResWeaveError as e:
            return Missing(identifier=identifier, error=e)

    def __repr__(self) -> str:
        schemes = ", ".join(repr(e.scheme) for e in self._entries)
        return f"CompositeResolver([{schemes}])"


def assemble(config: ResolutionConfig | None = None) -> CompositeResolver:
    config = config or ResolutionConfig()
    entries = relocate_entries(
        config.entries, parent_path=config.parent_path, extension=config.extension
    )
    return CompositeResolver(entries)
