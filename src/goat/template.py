"""Parsing and execution of ``{{.Field}}`` substitution templates."""

from __future__ import annotations

import io
import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping, TextIO, Union

from .errors import TemplateExecutionError, TemplateParseError

__all__ = [
    "Template",
    "TemplateRenderer",
]


_FIELD_PATTERN = re.compile(r"\.[A-Za-z]\w*(?:\.[A-Za-z]\w*)*")
_FILTER_PATTERN = re.compile(r"[A-Za-z_]\w*")
_MISSING_POLICIES = {"keep", "empty", "error"}


@dataclass(frozen=True, slots=True)
class _Action:
    source: str
    path: tuple[str, ...]
    filters: tuple[str, ...]
    line: int


_Node = Union[str, _Action]


def _resolve_value(context: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    value: Any = context
    for segment in path:
        if isinstance(value, Mapping):
            if segment not in value:
                raise KeyError(segment)
            value = value[segment]
            continue
        if hasattr(value, segment):
            value = getattr(value, segment)
            if callable(value):
                value = value()
            continue
        raise KeyError(segment)
    return value


def _quote(value: Any) -> str:
    return json.dumps(str(value), ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class Template:
    """A parsed template ready to be executed against a context."""

    name: str
    nodes: tuple[_Node, ...]
    filters: Mapping[str, Callable[[Any], Any]]

    def render(self, context: Mapping[str, Any], *, missing: str = "error") -> str:
        """Execute the template and return the rendered text."""

        buffer = io.StringIO()
        self.render_to(buffer, context, missing=missing)
        return buffer.getvalue()

    def render_to(self, stream: TextIO, context: Mapping[str, Any], *, missing: str = "error") -> None:
        """Execute the template, writing output to ``stream`` as it is produced.

        ``missing`` controls unresolved fields: ``"error"`` raises
        :class:`~goat.errors.TemplateExecutionError`, ``"keep"`` writes the
        action back unchanged and ``"empty"`` writes nothing.
        """

        if missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        for node in self.nodes:
            if isinstance(node, str):
                stream.write(node)
            else:
                stream.write(self._evaluate(node, context, missing))

    def _evaluate(self, action: _Action, context: Mapping[str, Any], missing: str) -> str:
        try:
            value = _resolve_value(context, action.path)
        except KeyError as exc:
            if missing == "keep":
                return action.source
            if missing == "empty":
                return ""
            raise TemplateExecutionError(
                f"template {self.name}:{action.line}: can't evaluate field {exc.args[0]}"
            ) from None

        for filter_name in action.filters:
            try:
                value = self.filters[filter_name](value)
            except Exception as exc:
                raise TemplateExecutionError(
                    f"template {self.name}:{action.line}: error calling {filter_name}: {exc}"
                ) from exc

        return str(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Parse and render templates with ``{{ .Field | filter }}`` actions.

    Actions reference fields of the context with a leading dot and may be
    piped through named filters. ``{{-`` and ``-}}`` trim the whitespace next to
    the action, and ``{{/* ... */}}`` is a comment.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                    "title": lambda value: str(value).title(),
                    "strip": lambda value: str(value).strip(),
                    "quote": _quote,
                }
            )

    def parse(self, text: str, *, name: str = "template") -> Template:
        """Compile ``text`` into a :class:`Template`.

        Raises :class:`~goat.errors.TemplateParseError` for unterminated or
        empty actions, actions that are not field references and unknown
        filters.
        """

        nodes: list[_Node] = []
        position = 0
        trim_next = False

        while True:
            start = text.find("{{", position)
            literal = text[position:] if start == -1 else text[position:start]
            if trim_next:
                literal = literal.lstrip()
            if start == -1:
                if literal:
                    nodes.append(literal)
                break

            line = text.count("\n", 0, start) + 1
            end = text.find("}}", start + 2)
            if end == -1:
                raise TemplateParseError(f"template {name}:{line}: unclosed action")

            inner = text[start + 2 : end]
            if inner[:1] == "-" and inner[1:2].isspace():
                literal = literal.rstrip()
                inner = inner[2:]
            trim_next = inner[-1:] == "-" and inner[-2:-1].isspace()
            if trim_next:
                inner = inner[:-2]

            if literal:
                nodes.append(literal)

            body = inner.strip()
            if not (body.startswith("/*") and body.endswith("*/")):
                nodes.append(self._parse_action(text[start : end + 2], body, name, line))
            position = end + 2

        return Template(name=name, nodes=tuple(nodes), filters=self.filters)

    def _parse_action(self, source: str, body: str, name: str, line: int) -> _Action:
        if not body:
            raise TemplateParseError(f"template {name}:{line}: missing value for command")

        reference, *filters = [part.strip() for part in body.split("|")]
        if not _FIELD_PATTERN.fullmatch(reference):
            raise TemplateParseError(
                f"template {name}:{line}: {reference!r} is not a field reference"
            )

        for filter_name in filters:
            if not _FILTER_PATTERN.fullmatch(filter_name):
                raise TemplateParseError(f"template {name}:{line}: missing command after '|'")
            if filter_name not in self.filters:
                raise TemplateParseError(
                    f"template {name}:{line}: function {filter_name!r} not defined"
                )

        return _Action(
            source=source,
            path=tuple(reference[1:].split(".")),
            filters=tuple(filters),
            line=line,
        )

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        name: str = "template",
        missing: str = "error",
    ) -> str:
        """Parse and execute ``template`` in one step."""

        return self.parse(template, name=name).render(context, missing=missing)
