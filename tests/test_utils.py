"""Unit tests for console helpers (cpp_proj_gen.utils)."""

from __future__ import annotations

import pytest

from cpp_proj_gen.utils import (
    console,
    print_error,
    print_path,
    print_success,
    print_summary_table,
)


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self):
        with console.capture() as capture:
            print_summary_table({"Target": "widget", "CMake": "3.15.0"}, title="Run")
        output = capture.get()
        assert "widget" in output
        assert "3.15.0" in output
        assert "Run" in output

    @pytest.mark.unit
    def test_print_summary_table_keeps_brackets_literal(self):
        with console.capture() as capture:
            print_summary_table({"Target": "lib[/]x", "[b]Key": "[red]v"})
        output = capture.get()
        assert "lib[/]x" in output
        assert "[b]Key" in output
        assert "[red]v" in output

    @pytest.mark.unit
    def test_print_path(self):
        with console.capture() as capture:
            print_path("out/widget/include/widget")
        assert "out/widget/include/widget" in capture.get()

    @pytest.mark.unit
    def test_print_error_prefix(self):
        with console.capture() as capture:
            print_error("Failed to create x: Permission denied")
        output = capture.get()
        assert output.startswith("Error:")
        assert "Permission denied" in output

    @pytest.mark.unit
    def test_print_success(self):
        with console.capture() as capture:
            print_success("Project generated.")
        assert "Project generated." in capture.get()
