from resweave.backends import (
    BackendEntry,
    FileBackend,
    PackageBackend,
    StringBackend,
    default_entries,
)
from resweave.composite import CompositeResolver, assemble
from resweave.config import ResolutionConfig
from resweave.content import PassthroughTranslator, StringContent, TemplateRef
from resweave.errors import (
    ConfigurationError,
    EngineDetectionError,
    MalformedSchemeError,
    ResourceNotFoundError,
    ResWeaveError,
    UnresolvableResourceError,
)
from resweave.relocate import RelocatingBackend, relocate_entries
from resweave.resource import Found, Missing, Resource
from resweave.variants import (
    CallableLocator,
    VariantFallbackResolver,
    directory_by,
    extension_by,
    keep_path,
    suffix_by,
)

__all__ = [
    "BackendEntry",
    "CallableLocator",
    "CompositeResolver",
    "ConfigurationError",
    "EngineDetectionError",
    "FileBackend",
    "Found",
    "MalformedSchemeError",
    "Missing",
    "PackageBackend",
    "PassthroughTranslator",
    "RelocatingBackend",
    "ResWeaveError",
    "ResolutionConfig",
    "Resource",
    "ResourceNotFoundError",
    "StringBackend",
    "StringContent",
    "TemplateRef",
    "UnresolvableResourceError",
    "VariantFallbackResolver",
    "assemble",
    "default_entries",
    "directory_by",
    "extension_by",
    "keep_path",
    "relocate_entries",
    "suffix_by",
]
