"""Behavioral tests for the metadata helpers shared by the CLI."""

from __future__ import annotations

from lib_log_context import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    """Verify the metadata banner lists the package name and version."""

    summary = summary_info()
    assert "Info for lib_log_context" in summary
    version_line = next(line for line in summary.splitlines() if line.strip().startswith("version"))
    assert version_line.split("=", 1)[1].strip() == __init__conf__.version
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_print_info_uses_writer() -> None:
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    assert lines[0] == "Info for lib_log_context:\n"
    assert all(line.endswith("\n") for line in lines)


def test_runtime_exports_resolve() -> None:
    from lib_log_context import runtime

    assert all(hasattr(runtime, name) for name in runtime.__all__)
    assert "summary_info" in runtime.__all__
