"""Configuration record shared by the generation engine and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .errors import InvalidConfigError

__all__ = ["ProjectConfig"]


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Values describing the project to generate.

    Attributes
    ----------
    project_name:
        Name of the directory that will be created. It is also exposed to
        templates as ``{{.ProjectName}}``.
    module_name:
        Module path of the new project (for example
        ``github.com/user/project``). Templates reference it as
        ``{{.ModuleName}}``; it plays no part in path derivation.
    templates:
        Identifiers of the template resources to render, in the order they
        should be processed.
    """

    project_name: str
    module_name: str
    templates: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of identifiers while keeping the record immutable.
        if not isinstance(self.templates, tuple):
            object.__setattr__(self, "templates", tuple(self.templates))

    @classmethod
    def from_names(
        cls,
        project_name: str,
        module_name: str,
        templates: Iterable[str] = (),
    ) -> "ProjectConfig":
        """Build a validated :class:`ProjectConfig` from user supplied names.

        Surrounding whitespace is removed from both names before validation.
        """

        config = cls(
            project_name=project_name.strip(),
            module_name=module_name.strip(),
            templates=tuple(templates),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Raise :class:`~goat.errors.InvalidConfigError` for missing names."""

        if not self.project_name or not self.project_name.strip():
            raise InvalidConfigError("project name is required")
        if not self.module_name or not self.module_name.strip():
            raise InvalidConfigError("module name is required")

    def context(self) -> Mapping[str, Any]:
        """Return the values templates can reference."""

        return {
            "ProjectName": self.project_name,
            "ModuleName": self.module_name,
            "Templates": list(self.templates),
        }
