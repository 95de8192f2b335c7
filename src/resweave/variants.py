from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

from resweave.content import TemplateRef
from resweave.errors import MalformedSchemeError, ResWeaveError
from resweave.ids import parse_resource_id
from resweave.resource import Found, Missing, Resource, ResolveResult

logger = logging.getLogger(__name__)

# Returns the candidate path, or None when the strategy does not apply.
NamingStrategy = Callable[[TemplateRef], str | None]


class ResourceLocator(Protocol):
    def try_resolve(self, identifier: str) -> ResolveResult: ...


class CallableLocator:
    """Adapts a raising ``resolve(identifier)`` callable to ``try_resolve``."""

    def __init__(self, resolve: Callable[[str], Resource]) -> None:
        self._resolve = resolve

    def try_resolve(self, identifier: str) -> ResolveResult:
        try:
            return Found(self._resolve(identifier))
        except ResWeaveError as e:
            return Missing(identifier=identifier, error=e)


def keep_path(template: TemplateRef) -> str:
    return template.path


def _split_scheme(path: str) -> tuple[str, str]:
    # Keep "classpath:" etc. out of the path arithmetic below.
    try:
        parsed = parse_resource_id(path)
    except MalformedSchemeError:
        return "", path
    return parsed.scheme, parsed.path


def suffix_by(key: str, separator: str = "_") -> NamingStrategy:
    """``a/tmpl.html`` with ``{key: "mobile"}`` -> ``a/tmpl_mobile.html``."""

    def strategy(template: TemplateRef) -> str | None:
        value = template.tag(key)
        if not value:
            return None
        scheme, path = _split_scheme(template.path)
        directory, name = posixpath.split(path)
        stem, dot, ext = name.rpartition(".")
        if not dot or not stem:
            stem, ext = name, ""
        new_name = f"{stem}{separator}{value}" + (f".{ext}" if ext else "")
        return scheme + posixpath.join(directory, new_name)

    strategy.__name__ = f"suffix_by_{key}"
    return strategy


def directory_by(key: str) -> NamingStrategy:
    """``a/tmpl.html`` with ``{key: "fr"}`` -> ``a/fr/tmpl.html``."""

    def strategy(template: TemplateRef) -> str | None:
        value = template.tag(key)
        if not value:
            return None
        scheme, path = _split_scheme(template.path)
        directory, name = posixpath.split(path)
        if directory:
            return scheme + posixpath.join(directory, value, name)
        return scheme + posixpath.join(value, name)

    strategy.__name__ = f"directory_by_{key}"
    return strategy


def extension_by(key: str) -> NamingStrategy:
    """``tmpl`` with ``{key: ".txt"}`` -> ``tmpl.txt``."""

    def strategy(template: TemplateRef) -> str | None:
        value = template.tag(key)
        if not value:
            return None
        if not value.startswith("."):
            value = "." + value
        return template.path + value

    strategy.__name__ = f"extension_by_{key}"
    return strategy


@dataclass(frozen=True)
class VariantFallbackResolver:
    """Picks the first existing variant path.

    Strategies are tried in order and each candidate is probed on
    ``locator``; the first one found wins. When none is found the
    ``default`` strategy's path is returned without probing it.
    """

    locator: ResourceLocator
    strategies: tuple[NamingStrategy, ...] = ()
    default: NamingStrategy = keep_path

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategies", tuple(self.strategies))

    @classmethod
    def of(
        cls,
        locator: ResourceLocator,
        strategies: Iterable[NamingStrategy],
        default: NamingStrategy = keep_path,
    ) -> "VariantFallbackResolver":
        return cls(locator=locator, strategies=tuple(strategies), default=default)

    def get_real_path(self, template: TemplateRef) -> str:
        if not template.has_variant:
            return template.path

        for strategy in self.strategies:
            candidate = strategy(template)
            if candidate is None:
                continue
            result = self.locator.try_resolve(candidate)
            if isinstance(result, Found):
                logger.debug("variant of %r resolved to %r", template.path, candidate)
                return candidate
            logger.debug("variant candidate %r missing: %s", candidate, result.error)

        fallback = self.default(template)
        if fallback is None:
            fallback = template.path
        logger.debug("no variant of %r found, using %r", template.path, fallback)
        return fallback
