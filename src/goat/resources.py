"""Read-only template resource tables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from importlib.resources import files
from importlib.resources.abc import Traversable
from types import MappingProxyType
from typing import Iterator, Mapping

from .errors import ResourceNotFoundError

__all__ = [
    "InMemoryTemplateSource",
    "PackageTemplateSource",
    "TemplateSource",
]

TEMPLATE_ROOT = "templates"


class TemplateSource(ABC):
    """Lookup of raw template content by identifier."""

    @abstractmethod
    def resolve(self, template_id: str) -> bytes:
        """Return the unrendered content stored under ``template_id``.

        Identifiers must match exactly; no path normalisation is applied.
        Raises :class:`~goat.errors.ResourceNotFoundError` for unknown
        identifiers.
        """

    @abstractmethod
    def identifiers(self) -> tuple[str, ...]:
        """Return every known identifier in sorted order."""

    def __contains__(self, template_id: object) -> bool:
        return isinstance(template_id, str) and template_id in self.identifiers()


class InMemoryTemplateSource(TemplateSource):
    """Serve templates from a mapping of identifiers to text or bytes."""

    def __init__(self, templates: Mapping[str, str | bytes] | None = None) -> None:
        table = {
            key: value.encode("utf-8") if isinstance(value, str) else bytes(value)
            for key, value in (templates or {}).items()
        }
        self._templates: Mapping[str, bytes] = MappingProxyType(table)

    def resolve(self, template_id: str) -> bytes:
        try:
            return self._templates[template_id]
        except KeyError:
            raise ResourceNotFoundError(template_id) from None

    def identifiers(self) -> tuple[str, ...]:
        return tuple(sorted(self._templates))


def _walk(node: Traversable, prefix: str) -> Iterator[tuple[str, Traversable]]:
    for child in node.iterdir():
        name = f"{prefix}/{child.name}"
        if child.is_dir():
            if child.name == "__pycache__":
                continue
            yield from _walk(child, name)
        elif child.is_file():
            yield name, child


class PackageTemplateSource(InMemoryTemplateSource):
    """Templates shipped inside an installed package.

    Every file below ``<package>/templates`` is read once when the source is
    created and keyed as ``templates/<directory>/<file>``.
    """

    def __init__(self, package: str = "goat", root: str = TEMPLATE_ROOT) -> None:
        base = files(package).joinpath(root)
        if not base.is_dir():
            raise FileNotFoundError(f"{package} does not ship a {root!r} directory")
        super().__init__({name: entry.read_bytes() for name, entry in _walk(base, root)})
        self.package = package
