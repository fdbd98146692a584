# src/deps/reader_factory.py — v1
"""Factory: instantiate a dependency reader from the toolchain family."""

from __future__ import annotations

from rebuildcheck.config.settings import Settings
from rebuildcheck.core.models import CompilationUnit, Toolchain
from rebuildcheck.deps.base_dependency_reader import BaseDependencyReader
from rebuildcheck.deps.json_reader import JsonDependencyReader
from rebuildcheck.deps.makefile_reader import MakefileDependencyReader

# Registry maps toolchain → reader class.
_READER_REGISTRY: dict[Toolchain, type[BaseDependencyReader]] = {
    Toolchain.MSVC: JsonDependencyReader,
    Toolchain.GNU: MakefileDependencyReader,
}


class UnsupportedToolchainError(ValueError):
    """Raised when no reader is registered for a toolchain."""


def create_dependency_reader(
    toolchain: Toolchain | str, settings: Settings | None = None
) -> BaseDependencyReader:
    """Create the reader for ``toolchain``, configured from ``settings``.

    Raises:
        UnsupportedToolchainError: If no reader is registered.
    """
    cls = None
    key = _coerce_toolchain(toolchain)
    if key is not None:
        cls = _READER_REGISTRY.get(key)
    if cls is None:
        raise UnsupportedToolchainError(
            f"No dependency reader for toolchain {toolchain!r}. "
            f"Supported: {', '.join(supported_toolchains())}"
        )

    if settings is None:
        return cls()
    if cls is JsonDependencyReader:
        return JsonDependencyReader(extension=settings.msvc_deps_extension)
    if cls is MakefileDependencyReader:
        return MakefileDependencyReader(
            extension=settings.gnu_deps_extension,
            empty_is_unknown=settings.empty_deps_is_unknown,
        )
    return cls()


def get_dependencies(
    unit: CompilationUnit,
    toolchain: Toolchain | str,
    settings: Settings | None = None,
) -> list[str] | None:
    """Return the dependencies recorded for ``unit``, or None if unknown."""
    return create_dependency_reader(toolchain, settings).read(unit)


def register_dependency_reader(
    toolchain: Toolchain, cls: type[BaseDependencyReader]
) -> None:
    """Register a custom reader for a toolchain."""
    _READER_REGISTRY[toolchain] = cls


def supported_toolchains() -> list[str]:
    """Return the registered toolchain names."""
    return sorted(t.value for t in _READER_REGISTRY)


def _coerce_toolchain(toolchain: Toolchain | str) -> Toolchain | None:
    if isinstance(toolchain, Toolchain):
        return toolchain
    try:
        return Toolchain(str(toolchain).strip().lower())
    except ValueError:
        return None
