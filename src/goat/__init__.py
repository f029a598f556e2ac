"""Generate Go application projects from templates.

The package exposes the project generation engine, the template resolver and
renderer it is built on, and the interactive wizard and command line interface
wrapped around them.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import (
    DirectoryCreateError,
    DirectoryExistsError,
    DuplicateDestinationError,
    GenerationError,
    GoatError,
    InvalidConfigError,
    OutputWriteError,
    ResourceNotFoundError,
    TemplateExecutionError,
    TemplateParseError,
    TemplateResolutionError,
)
from .naming import destination_name, is_invisible_file, map_templates
from .resources import InMemoryTemplateSource, PackageTemplateSource, TemplateSource
from .scaffold import ProjectScaffolder, generate_project
from .template import Template, TemplateRenderer

__all__ = [
    "DirectoryCreateError",
    "DirectoryExistsError",
    "DuplicateDestinationError",
    "GenerationError",
    "GoatError",
    "InMemoryTemplateSource",
    "InvalidConfigError",
    "OutputWriteError",
    "PackageTemplateSource",
    "ProjectConfig",
    "ProjectScaffolder",
    "ResourceNotFoundError",
    "Template",
    "TemplateExecutionError",
    "TemplateParseError",
    "TemplateRenderer",
    "TemplateResolutionError",
    "TemplateSource",
    "destination_name",
    "generate_project",
    "is_invisible_file",
    "map_templates",
]

__version__ = "0.1.0"
