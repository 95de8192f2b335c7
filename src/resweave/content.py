from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Protocol, Union


@dataclass(frozen=True)
class StringContent:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TemplateRef:
    """A template path plus rendering context.

    ``variant`` holds variant tags such as ``{"locale": "fr"}``. ``None``
    means the template has no variant and its path is used as-is.
    """

    path: str
    variant: Mapping[str, str] | None = None
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.variant is not None:
            object.__setattr__(self, "variant", MappingProxyType(dict(self.variant)))
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))

    @property
    def has_variant(self) -> bool:
        return self.variant is not None

    def tag(self, key: str) -> str | None:
        if self.variant is None:
            return None
        return self.variant.get(key)


Content = Union[StringContent, TemplateRef]


class ContentTranslator(Protocol):
    def translate(self, content: Content) -> Content: ...


class PassthroughTranslator:
    def translate(self, content: Content) -> Content:
        return content
