from __future__ import annotations
import pytest
from status_ps1 import __main__ as mainmod
from status_ps1 import info as infomod
from status_ps1.cloud import CloudSession
from status_ps1.git import GitStatus
from status_ps1.identity import Identity

GLYPH = "\ue0a0"


@pytest.fixture(autouse=True)
def fake_probes(monkeypatch: pytest.MonkeyPatch) -> None:
    gs = GitStatus(head="main", detached=False, dirty=True, org="acme", repo="w")
    monkeypatch.setattr(
        infomod, "current_identity", lambda: Identity(user="alice", elevated=False)
    )
    monkeypatch.setattr(infomod, "cloud_session", lambda timeout: CloudSession())
    monkeypatch.setattr(infomod, "git_status", lambda timeout: gs)
    monkeypatch.setattr(mainmod, "git_status", lambda timeout: gs)
    monkeypatch.setenv("PWD", "/home/alice/w")


def test_main_plain(capsys: pytest.CaptureFixture[str]) -> None:
    mainmod.main(["--plain", "--prompt-symbol", ">>"])
    out = capsys.readouterr().out
    assert out.endswith(
        f" alice | Azure ? cli unavailable\nacme/w - {GLYPH} main*\n>> /home/alice/w> \n"
    )


def test_main_git_off(capsys: pytest.CaptureFixture[str]) -> None:
    mainmod.main(["--plain", "--no-cloud", "off"])
    out = capsys.readouterr().out
    assert out.endswith(" alice\nPS /home/alice/w> \n")


def test_main_git_only(capsys: pytest.CaptureFixture[str]) -> None:
    mainmod.main(["--plain", "--git-only"])
    assert capsys.readouterr().out == f"acme/w - {GLYPH} main*\n"


def test_main_git_only_off(capsys: pytest.CaptureFixture[str]) -> None:
    mainmod.main(["--git-only", "off"])
    assert capsys.readouterr().out == "\n"


def test_main_max_path_len(capsys: pytest.CaptureFixture[str]) -> None:
    mainmod.main(["--plain", "--no-cloud", "--max-path-len", "5", "off"])
    out = capsys.readouterr().out
    assert out.endswith("PS /.../alice/w> \n")


def test_main_bash_default(capsys: pytest.CaptureFixture[str]) -> None:
    mainmod.main(["--no-cloud", "off"])
    assert capsys.readouterr().out.endswith(r"\$ " + "\n")
