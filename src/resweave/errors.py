from __future__ import annotations


class ResWeaveError(Exception):
    pass


class UnresolvableResourceError(ResWeaveError):
    def __init__(self, identifier: str, scheme: str) -> None:
        super().__init__(
            f"no resolver registered for scheme {scheme!r} (identifier: {identifier!r})"
        )
        self.identifier = identifier
        self.scheme = scheme


class ResourceNotFoundError(ResWeaveError):
    def __init__(self, path: str, reason: str | None = None) -> None:
        msg = f"resource not found: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path


class MalformedSchemeError(ResWeaveError):
    pass


class ConfigurationError(ResWeaveError):
    pass


class EngineDetectionError(ResWeaveError):
    pass
