from __future__ import annotations
import subprocess
import sys
import pytest
from status_ps1.cloud import shorten_id
from status_ps1.info import shortpath
from status_ps1.util import output, run_command


@pytest.mark.parametrize(
    "path,short",
    [
        ("/", "/"),
        ("/var/lib/data", "/var/lib/data"),
        ("/home/alice/projects/widgets/src", "/home/alice/projects/widgets/src"),
        (
            "/home/alice/projects/widgets/src/widgets/internal/parsers",
            "/.../internal/parsers",
        ),
        (
            "/home/alice//projects/widgets/src/widgets/internal/parsers",
            "/.../internal/parsers",
        ),
        (
            "C:\\Users\\alice\\source\\repos\\widgets\\src\\widgets\\internal",
            "C:/.../widgets/internal",
        ),
        (
            "/a_very_long_directory_name/another_very_long_directory_name",
            "/a_very_long_directory_name/another_very_long_directory_name",
        ),
        (
            "/a_very_long_directory_name/another_very_long_directory_name/x",
            "/.../another_very_long_directory_name/x",
        ),
    ],
)
def test_shortpath(path: str, short: str) -> None:
    assert shortpath(path, sep="/") == short


def test_shortpath_max_len() -> None:
    path = "/srv/data/archive/2024"
    assert shortpath(path, max_len=len(path), sep="/") == path
    assert shortpath(path, max_len=len(path) - 1, sep="/") == "/.../archive/2024"


def test_shortpath_backslash_sep() -> None:
    path = "C:\\Users\\alice\\source\\repos\\widgets"
    assert shortpath(path, max_len=10, sep="\\") == "C:\\...\\repos\\widgets"


def test_shortpath_keeps_end_segments() -> None:
    path = "/" + "/".join(f"segment{i:02d}" for i in range(20))
    short = shortpath(path, sep="/")
    parts = short.split("/")
    assert parts == ["", "...", "segment18", "segment19"]


@pytest.mark.parametrize(
    "sub_id,short",
    [
        ("abcdefgh12345678", "abcd...5678"),
        ("abcdefgh", "abcd...efgh"),
        ("abcdefg", "abcdefg"),
        ("", ""),
    ],
)
def test_shorten_id(sub_id: str, short: str) -> None:
    assert shorten_id(sub_id) == short


def test_output_success() -> None:
    assert output(sys.executable, "-c", "print('  hello  ')") == "hello"


def test_output_failure() -> None:
    assert output(sys.executable, "-c", "import sys; sys.exit(3)") is None


def test_run_command_nonzero_exit() -> None:
    r = run_command(sys.executable, "-c", "import sys; sys.exit(1)")
    assert r is not None
    assert r.returncode == 1


def test_run_command_missing_executable() -> None:
    assert run_command("this-command-does-not-exist-7f3a9c") is None


def test_run_command_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(*_args: object, **kwargs: object) -> subprocess.CompletedProcess:
        raise subprocess.TimeoutExpired(cmd="slow", timeout=kwargs["timeout"])

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert run_command("slow", timeout=0.25) is None


def test_output_invalid_utf8() -> None:
    s = output(
        sys.executable,
        "-c",
        "import sys; sys.stdout.buffer.write(b'{\"name\": \"Caf\\xe9\"}')",
    )
    assert s == '{"name": "Caf\ufffd"}'
