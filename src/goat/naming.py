"""Derivation of output file names from template identifiers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .errors import DuplicateDestinationError

__all__ = [
    "INVISIBLE_FILES",
    "TEMPLATE_SUFFIX",
    "destination_name",
    "is_invisible_file",
    "map_templates",
    "strip_template_suffix",
]


LOGGER = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".tmpl"
INVISIBLE_FILES = frozenset({"gitignore"})


def is_invisible_file(name: str) -> bool:
    """Return ``True`` when ``name`` must be written as a dotfile."""

    return name in INVISIBLE_FILES


def destination_name(name: str) -> str:
    """Return the file name ``name`` is written to, e.g. ``gitignore`` -> ``.gitignore``."""

    if is_invisible_file(name):
        return f".{name}"
    return name


def strip_template_suffix(template_id: str) -> str | None:
    """Return the final segment of ``template_id`` without ``.tmpl``.

    ``None`` is returned for identifiers that do not end in ``.tmpl`` or whose
    final segment is nothing but the suffix.
    """

    base = template_id.rsplit("/", 1)[-1]
    if not base.endswith(TEMPLATE_SUFFIX):
        return None
    stem = base[: -len(TEMPLATE_SUFFIX)]
    return stem or None


def map_templates(templates: Iterable[str], project_dir: str | Path) -> dict[str, Path]:
    """Map each template identifier to its destination inside ``project_dir``.

    Identifiers without the ``.tmpl`` suffix are skipped. The mapping keeps the
    order of ``templates``; repeating an identifier is harmless, but two
    different identifiers resolving to the same file raise
    :class:`~goat.errors.DuplicateDestinationError`.
    """

    project_dir = Path(project_dir)
    mapping: dict[str, Path] = {}
    claimed: dict[Path, str] = {}

    for template_id in templates:
        if template_id in mapping:
            continue
        stem = strip_template_suffix(template_id)
        if stem is None:
            LOGGER.debug("Skipping %s: not a %s template", template_id, TEMPLATE_SUFFIX)
            continue

        destination = project_dir / destination_name(stem)
        owner = claimed.get(destination)
        if owner is not None:
            raise DuplicateDestinationError(
                f"templates {owner!r} and {template_id!r} both render to {destination}",
                template_id=template_id,
                path=destination,
            )
        claimed[destination] = template_id
        mapping[template_id] = destination

    return mapping
