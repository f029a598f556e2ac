"""Command line interface for goat."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from .build import run_command
from .config import ProjectConfig
from .errors import GoatError
from .resources import PackageTemplateSource, TemplateSource
from .scaffold import ProjectScaffolder
from .stacks import StackPreset, load_catalog
from .wizard import run_wizard

WIZARD_COMMANDS = {"create-fiber": "fiber", "create-gin": "gin"}


def _add_create_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project directory is created (default: current directory)",
    )
    parser.add_argument(
        "--skip-build",
        action="store_true",
        help="Do not run the stack's post-generation command",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goat",
        description="Generate Go application projects from templates",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every directory and file as it is created",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, stack in WIZARD_COMMANDS.items():
        wizard_parser = subparsers.add_parser(
            command, help=f"interactively create a new {stack} project"
        )
        _add_create_options(wizard_parser)

    create_parser = subparsers.add_parser("create", help="create a new project from flags")
    create_parser.add_argument("-s", "--stack", default="fiber", help="Stack to generate")
    create_parser.add_argument("-n", "--name", required=True, help="Name of the project")
    create_parser.add_argument(
        "-m",
        "--module",
        required=True,
        help="Go module name (e.g. github.com/user/project)",
    )
    _add_create_options(create_parser)

    render_parser = subparsers.add_parser(
        "render", help="render a single packaged template to stdout or a file"
    )
    render_parser.add_argument("template", help="Template identifier, e.g. templates/gin/go.mod.tmpl")
    render_parser.add_argument("-n", "--name", default="", help="Value of {{.ProjectName}}")
    render_parser.add_argument("-m", "--module", default="", help="Value of {{.ModuleName}}")
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered template to this path instead of stdout",
    )
    render_parser.add_argument(
        "--missing",
        choices=["keep", "empty", "error"],
        default="error",
        help="Behaviour when a placeholder cannot be resolved",
    )

    subparsers.add_parser("stacks", help="list the stacks that can be generated")

    return parser


def _generate(
    stack: StackPreset,
    project_name: str,
    module_name: str,
    args: argparse.Namespace,
    source: TemplateSource,
) -> int:
    config = ProjectConfig.from_names(project_name, module_name, stack.templates)

    scaffolder = ProjectScaffolder(source, root=args.directory)
    project_dir = scaffolder.generate(config)

    if stack.post_generate and not args.skip_build:
        display = " ".join(stack.post_generate)
        print(f"Running '{display}'...")
        run_command(project_dir, stack.post_generate)
        print(f"'{display}' completed successfully.")

    print(f"Project '{config.project_name}' created successfully!")
    print("Next steps:")
    print(f"  cd {project_dir}")
    if stack.run_hint:
        print(f"  {stack.run_hint}")
    return 0


def _handle_wizard(
    args: argparse.Namespace,
    source: TemplateSource,
    read_line: Callable[[str], str],
) -> int:
    stack = load_catalog(source).get(WIZARD_COMMANDS[args.command])
    result = run_wizard(read_line)
    if result is None:
        print("Cancelled, no project was created.", file=sys.stderr)
        return 1
    return _generate(stack, result.project_name, result.module_name, args, source)


def _handle_create(args: argparse.Namespace, source: TemplateSource) -> int:
    stack = load_catalog(source).get(args.stack)
    return _generate(stack, args.name, args.module, args, source)


def _handle_render(args: argparse.Namespace, source: TemplateSource) -> int:
    config = ProjectConfig(project_name=args.name, module_name=args.module)
    template = ProjectScaffolder(source).load_template(args.template)
    rendered = template.render(config.context(), missing=args.missing)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def _handle_stacks(source: TemplateSource) -> int:
    for stack in load_catalog(source).stacks:
        print(f"{stack.name:<10} {stack.description}")
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    source: TemplateSource | None = None,
    read_line: Callable[[str], str] = input,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    source = source if source is not None else PackageTemplateSource()

    try:
        if args.command in WIZARD_COMMANDS:
            return _handle_wizard(args, source, read_line)
        if args.command == "create":
            return _handle_create(args, source)
        if args.command == "render":
            return _handle_render(args, source)
        if args.command == "stacks":
            return _handle_stacks(source)
    except GoatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
