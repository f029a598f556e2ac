"""Project generation from template resources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .config import ProjectConfig
from .errors import (
    DirectoryCreateError,
    DirectoryExistsError,
    OutputWriteError,
    ResourceNotFoundError,
    TemplateExecutionError,
    TemplateParseError,
    TemplateResolutionError,
)
from .naming import map_templates
from .resources import PackageTemplateSource, TemplateSource
from .template import Template, TemplateRenderer

__all__ = ["PROJECT_DIR_MODE", "ProjectScaffolder", "generate_project"]


LOGGER = logging.getLogger(__name__)

PROJECT_DIR_MODE = 0o755


@dataclass(slots=True)
class ProjectScaffolder:
    """Render a list of templates into a freshly created project directory."""

    source: TemplateSource
    renderer: TemplateRenderer
    root: Path

    def __init__(
        self,
        source: TemplateSource | None = None,
        renderer: TemplateRenderer | None = None,
        *,
        root: str | Path | None = None,
    ) -> None:
        self.source = source if source is not None else PackageTemplateSource()
        self.renderer = renderer or TemplateRenderer()
        self.root = Path(root) if root is not None else Path.cwd()

    def project_dir(self, config: ProjectConfig) -> Path:
        return self.root / config.project_name

    def generate(self, config: ProjectConfig) -> Path:
        """Create the project described by ``config`` and return its directory.

        The directory must not exist yet. Files are written one template at a
        time; if a template fails, files rendered before it stay on disk and
        the error is raised to the caller.
        """

        config.validate()
        project_dir = self.project_dir(config)
        mapping = map_templates(config.templates, project_dir)

        LOGGER.info(
            "Creating project %r with module %r", config.project_name, config.module_name
        )
        self._create_directory(project_dir)
        LOGGER.info("Created directory: %s", project_dir)

        context = config.context()
        for template_id, destination in mapping.items():
            template = self.load_template(template_id)
            self._write(template, destination, context, template_id)
            LOGGER.info("Created file: %s from template %s", destination, template_id)

        return project_dir

    def _create_directory(self, project_dir: Path) -> None:
        try:
            project_dir.mkdir(mode=PROJECT_DIR_MODE)
        except FileExistsError as exc:
            raise DirectoryExistsError(
                f"project directory {project_dir} already exists", path=project_dir
            ) from exc
        except (OSError, ValueError) as exc:
            raise DirectoryCreateError(
                f"failed to create project directory {project_dir}: {exc}", path=project_dir
            ) from exc

    def load_template(self, template_id: str) -> Template:
        """Resolve, decode and parse ``template_id``."""

        try:
            raw = self.source.resolve(template_id)
        except ResourceNotFoundError:
            raise
        except (OSError, ValueError) as exc:
            raise TemplateResolutionError(
                f"failed to read template {template_id}: {exc}", template_id=template_id
            ) from exc

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TemplateParseError(
                f"template {template_id} is not valid UTF-8", template_id=template_id
            ) from exc

        try:
            return self.renderer.parse(text, name=template_id.rsplit("/", 1)[-1])
        except TemplateParseError as exc:
            raise TemplateParseError(
                f"failed to parse template {template_id}: {exc}", template_id=template_id
            ) from exc

    def _write(
        self,
        template: Template,
        destination: Path,
        context: Mapping[str, Any],
        template_id: str,
    ) -> None:
        try:
            handle = destination.open("w", encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise OutputWriteError(
                f"failed to create output file {destination}: {exc}",
                template_id=template_id,
                path=destination,
            ) from exc

        with handle:
            try:
                template.render_to(handle, context)
            except TemplateExecutionError as exc:
                raise TemplateExecutionError(
                    f"failed to execute template {template_id}: {exc}",
                    template_id=template_id,
                    path=destination,
                ) from exc
            except (OSError, ValueError) as exc:
                raise OutputWriteError(
                    f"failed to write output file {destination}: {exc}",
                    template_id=template_id,
                    path=destination,
                ) from exc


def generate_project(
    config: ProjectConfig,
    *,
    source: TemplateSource | None = None,
    root: str | Path | None = None,
) -> Path:
    """Generate ``config`` below ``root`` (the working directory by default)."""

    return ProjectScaffolder(source, root=root).generate(config)
