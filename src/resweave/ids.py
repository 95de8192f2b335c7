from __future__ import annotations

import re
from dataclasses import dataclass

from resweave.errors import MalformedSchemeError

SCHEME_SEPARATOR = ":"

_SCHEME_NAME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-_]*")


@dataclass(frozen=True)
class ParsedResourceId:
    original: str
    scheme: str
    path: str

    @property
    def has_scheme(self) -> bool:
        return bool(self.scheme)


def parse_resource_id(identifier: str) -> ParsedResourceId:
    """Split ``identifier`` into ``(scheme, path)``.

    The scheme keeps its trailing separator (``"classpath:"``). Text before
    the first ``:`` that is not a plain scheme name means there is no scheme
    and the whole identifier is the path. A drive letter such as ``C:\\x`` parses as
    scheme ``C:``; unrecognized schemes are left to the default backend.
    """
    identifier = str(identifier)
    idx = identifier.find(SCHEME_SEPARATOR)
    if idx == -1:
        return ParsedResourceId(original=identifier, scheme="", path=identifier)
    if idx == 0:
        raise MalformedSchemeError(f"empty scheme in resource identifier: {identifier!r}")

    prefix = identifier[:idx]
    if not _SCHEME_NAME.fullmatch(prefix):
        return ParsedResourceId(original=identifier, scheme="", path=identifier)

    return ParsedResourceId(
        original=identifier, scheme=prefix + SCHEME_SEPARATOR, path=identifier[idx + 1 :]
    )


def validate_scheme(scheme: str) -> str:
    # "" is the default (no prefix) scheme.
    if scheme == "":
        return scheme
    if not scheme.endswith(SCHEME_SEPARATOR):
        raise MalformedSchemeError(f"scheme must end with {SCHEME_SEPARATOR!r}: {scheme!r}")
    if not _SCHEME_NAME.fullmatch(scheme[:-1]):
        raise MalformedSchemeError(
            f"scheme must be a name followed by a single {SCHEME_SEPARATOR!r}: {scheme!r}"
        )
    return scheme
