"""Catalog of the project stacks goat can generate."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import UnknownStackError
from .resources import PackageTemplateSource, TemplateSource

__all__ = ["CATALOG_ID", "StackCatalog", "StackPreset", "load_catalog"]

CATALOG_ID = "templates/stacks.json"


class StackPreset(BaseModel):
    """Templates and follow-up command making up one kind of project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Identifier used on the command line.")
    description: str = Field("", description="One line summary shown by `goat stacks`.")
    templates: List[str] = Field(..., min_length=1, description="Template identifiers rendered in order.")
    post_generate: List[str] = Field(
        default_factory=list,
        description="Command run inside the new project once its files exist.",
    )
    run_hint: str = Field("", description="Command suggested to start the generated project.")

    @field_validator("templates")
    @classmethod
    def _templates_not_blank(cls, value: List[str]) -> List[str]:
        if any(not item.strip() for item in value):
            raise ValueError("template identifiers must not be blank")
        return value


class StackCatalog(BaseModel):
    """All stacks known to the CLI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stacks: List[StackPreset] = Field(default_factory=list, description="Available stacks.")

    @model_validator(mode="after")
    def _unique_names(self) -> "StackCatalog":
        names = [stack.name for stack in self.stacks]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate stack names: {', '.join(duplicates)}")
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(stack.name for stack in self.stacks)

    def get(self, name: str) -> StackPreset:
        for stack in self.stacks:
            if stack.name == name:
                return stack
        raise UnknownStackError(
            f"unknown stack {name!r}; choose from {', '.join(self.names()) or 'nothing'}"
        )


def load_catalog(source: TemplateSource | None = None) -> StackCatalog:
    """Read and validate the stack catalog shipped with the templates."""

    source = source if source is not None else PackageTemplateSource()
    return StackCatalog.model_validate_json(source.resolve(CATALOG_ID))
