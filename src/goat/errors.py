"""Exception types raised while scaffolding projects."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "BuildStepError",
    "DirectoryCreateError",
    "DirectoryExistsError",
    "DuplicateDestinationError",
    "GenerationError",
    "GoatError",
    "InvalidConfigError",
    "OutputWriteError",
    "ResourceNotFoundError",
    "TemplateExecutionError",
    "TemplateParseError",
    "TemplateRenderingError",
    "TemplateResolutionError",
    "UnknownStackError",
    "WizardClosedError",
]


class GoatError(RuntimeError):
    """Base class for every error raised by goat."""


class GenerationError(GoatError):
    """Raised when a project cannot be generated.

    ``template_id`` and ``path`` identify the template and filesystem location
    involved, when known, so callers can report a precise diagnostic.
    """

    def __init__(
        self,
        message: str,
        *,
        template_id: str | None = None,
        path: str | Path | None = None,
    ) -> None:
        super().__init__(message)
        self.template_id = template_id
        self.path = Path(path) if path is not None else None


class InvalidConfigError(GenerationError, ValueError):
    """Raised when a :class:`~goat.config.ProjectConfig` is incomplete."""


class DirectoryExistsError(GenerationError):
    """Raised when the project directory is already present."""


class DirectoryCreateError(GenerationError):
    """Raised when the project directory cannot be created."""


class DuplicateDestinationError(GenerationError):
    """Raised when two templates would be written to the same file."""


class TemplateResolutionError(GenerationError):
    """Raised when the raw text of a template cannot be loaded."""


class ResourceNotFoundError(TemplateResolutionError, LookupError):
    """Raised when a template identifier has no matching resource."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"template {template_id!r} not found", template_id=template_id)


class TemplateRenderingError(GenerationError):
    """Raised when a template cannot be parsed or executed."""


class TemplateParseError(TemplateRenderingError):
    """Raised when template text is not valid template syntax."""


class TemplateExecutionError(TemplateRenderingError):
    """Raised when a parsed template references a value that does not exist."""


class OutputWriteError(GenerationError):
    """Raised when a rendered file cannot be written."""


class BuildStepError(GoatError):
    """Raised when a post-generation command fails."""

    def __init__(self, message: str, *, command: tuple[str, ...] = (), output: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.output = output


class WizardClosedError(GoatError):
    """Raised when the wizard receives input after it finished."""


class UnknownStackError(GoatError, KeyError):
    """Raised when a stack name is not part of the catalog."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
