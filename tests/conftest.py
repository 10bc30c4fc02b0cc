"""Pytest fixtures for dmenu-facade tests."""

import os
import sys

import pytest


@pytest.fixture
def stub_bin(tmp_path, monkeypatch):
    """Create a bin directory that is searched first on PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


@pytest.fixture
def stub_tool(stub_bin):
    """Factory for fake menu tools.

    Writes an executable shell script named `name` (default "dmenu") into a
    directory at the front of PATH, so the real tool is never launched.
    """
    if sys.platform == "win32":
        pytest.skip("stub tools are POSIX shell scripts")

    def _create(body: str, name: str = "dmenu") -> str:
        path = stub_bin / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return name

    return _create


@pytest.fixture
def echo_line(stub_tool):
    """Stub tool that answers with line k (0-based) of its input."""
    def _create(k: int, name: str = "dmenu") -> str:
        return stub_tool(f"sed -n '{k + 1}p'", name=name)

    return _create


@pytest.fixture
def echo_text(stub_tool):
    """Stub tool that reads all input and answers with fixed text."""
    def _create(text: str, name: str = "dmenu", exit_code: int = 0) -> str:
        return stub_tool(
            f"cat > /dev/null\nprintf '%s\\n' '{text}'\nexit {exit_code}",
            name=name,
        )

    return _create


@pytest.fixture
def silent_tool(stub_tool):
    """Stub tool that reads all input and prints nothing, like a cancelled menu."""
    return stub_tool("cat > /dev/null\nexit 1")


@pytest.fixture
def recording_tool(stub_tool, tmp_path):
    """Stub tool that records its arguments and stdin, then answers with `answer`."""
    args_file = tmp_path / "args.txt"
    stdin_file = tmp_path / "stdin.txt"

    def _create(answer: str = "") -> dict:
        reply = f"printf '%s\\n' '{answer}'" if answer else ":"
        stub_tool(
            f"printf '%s\\n' \"$@\" > '{args_file}'\n"
            f"cat > '{stdin_file}'\n"
            f"{reply}"
        )
        return {"args": args_file, "stdin": stdin_file}

    return _create
