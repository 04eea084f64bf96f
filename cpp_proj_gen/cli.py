"""Command-line entry point for cpp-proj-gen.

Usage::

    cpp-proj-gen --name-space acme --target-name widget
    python -m cpp_proj_gen -t widget -o ./projects -c 3.20.0
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from cpp_proj_gen.config import DEFAULT_CMAKE_VERSION, DEFAULT_TARGET_NAME, ProjectOptions
from cpp_proj_gen.scaffolder import ProjectGenerator, ScaffoldError
from cpp_proj_gen.scaffolder.generator import CMAKE_PROJECT_NAME_VAR
from cpp_proj_gen.utils import (
    console,
    print_error,
    print_path,
    print_success,
    print_summary_table,
)

# Standard layout registered for every generated project.
INCLUDE_DIR = "include"
SOURCE_DIR = "source"
TEST_DIR = "test"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpp-proj-gen",
        description="C++ project generator.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cpp-proj-gen -t widget\n"
            "  cpp-proj-gen -n acme -t widget -o ./projects\n"
            "  cpp-proj-gen -t widget -c 3.20.0\n"
        ),
    )
    parser.add_argument(
        "--name-space", "-n",
        default=None,
        help="e.g. company name",
    )
    parser.add_argument(
        "--target-name", "-t",
        default=None,
        help=f"CMake target name (default: {DEFAULT_TARGET_NAME})",
    )
    parser.add_argument(
        "--cmake-version", "-c",
        default=None,
        help=f"Minimum CMake version (default: {DEFAULT_CMAKE_VERSION})",
    )
    parser.add_argument(
        "--output-dir", "-o",
        default=None,
        type=Path,
        help="Parent directory of the generated project (default: current directory)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print each path as it is created",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``cpp-proj-gen`` and ``python -m cpp_proj_gen``."""
    args = build_parser().parse_args(argv)

    options = ProjectOptions.from_env().with_overrides(
        namespace=args.name_space,
        target_name=args.target_name,
        cmake_version=args.cmake_version,
        output_dir=args.output_dir,
    )

    try:
        generator = (
            ProjectGenerator(options)
            .add_include_dir(INCLUDE_DIR)
            .add_toplevel_dir(TEST_DIR)
            .add_source_dir(SOURCE_DIR)
        )
        if not args.quiet:
            console.print(
                f"Generating [bold]{escape(str(generator.output_root))}[/bold]", soft_wrap=True
            )
        generator.generate(progress=None if args.quiet else print_path)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    if not args.quiet:
        console.print()
        print_summary_table(
            {
                "Project": generator.variables[CMAKE_PROJECT_NAME_VAR],
                "Target": options.target_name,
                "CMake": options.cmake_version,
                "Output": str(generator.output_root),
            },
            title="cpp-proj-gen",
        )
    print_success("Project generated.")


if __name__ == "__main__":
    main()
