from __future__ import annotations
from dataclasses import dataclass
import logging
import re
import shutil
from .config import BRANCH_GLYPH, DEFAULT_TIMEOUT
from .styles import Painter
from .styles import StyleClass as SC
from .util import output, run_command

log = logging.getLogger(__name__)

#: Patterns for extracting the organization & repository name from a remote
#: URL.  They are tried in order, and the first match wins.
REMOTE_PATTERNS = [
    re.compile(r"https?://[^/\s]+/(?P<org>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?"),
    re.compile(
        r"(?:git@|ssh://git@)?[\w.-]+[:/](?P<org>[^/\s:]+)/(?P<repo>[^/\s]+?)(?:\.git)?"
    ),
]


@dataclass
class GitStatus:
    #: The name of the current branch, or the short form of the current commit
    #: hash if ``HEAD`` is detached
    head: str

    #: `True` iff the repository is in a detached ``HEAD`` state
    detached: bool

    #: `True` iff there are staged or unstaged changes to tracked files
    dirty: bool

    #: The organization & repository name parsed from the ``origin`` remote,
    #: or `None` if there is no such remote or its URL was not recognized
    org: str | None = None
    repo: str | None = None

    @property
    def dirty_mark(self) -> str:
        return "*" if self.dirty else ""

    def label(self, glyph: str = BRANCH_GLYPH) -> str:
        s = f"{glyph} {self.head}{self.dirty_mark}"
        if self.org is not None and self.repo is not None:
            s = f"{self.org}/{self.repo} - {s}"
        return s

    def display(self, paint: Painter, glyph: str = BRANCH_GLYPH) -> str:
        p = ""
        if self.org is not None and self.repo is not None:
            p += paint(f"{self.org}/{self.repo}", SC.GIT_REPO) + " - "
        # Color of the branch changes depending on whether HEAD is detached:
        p += paint(
            f"{glyph} {self.head}",
            SC.GIT_DETACHED if self.detached else SC.GIT_HEAD,
        )
        if self.dirty:
            p += paint(self.dirty_mark, SC.GIT_DIRTY)
        return p


def git_status(timeout: float = DEFAULT_TIMEOUT) -> GitStatus | None:
    """
    If the current directory is in a Git working tree, ``git_status()``
    returns a `GitStatus` instance describing the current branch, whether
    there are uncommitted changes, and where the ``origin`` remote points.

    If the current directory is not in a working tree, or if Git is not
    installed, or if anything at all goes wrong while querying Git,
    ``git_status()`` returns `None`.  Each Git command is limited to
    ``timeout`` seconds, and a command that times out counts as failed.
    """
    if shutil.which("git") is None:
        log.debug("Git not found on PATH")
        return None
    try:
        return _git_status(timeout)
    except Exception:
        log.debug("Unexpected error while querying Git", exc_info=True)
        return None


def _git_status(timeout: float) -> GitStatus | None:
    if git("rev-parse", "--is-inside-work-tree", timeout=timeout) != "true":
        return None

    detached = False
    head = git("symbolic-ref", "--short", "-q", "HEAD", timeout=timeout)
    if not head:
        head = git("rev-parse", "--short", "HEAD", timeout=timeout)
        detached = True
    if not head:
        log.debug("Could not determine the current branch or commit")
        return None

    unstaged = git_differs("diff", "--quiet", "--ignore-submodules", timeout=timeout)
    staged = git_differs(
        "diff", "--cached", "--quiet", "--ignore-submodules", timeout=timeout
    )

    org: str | None = None
    repo: str | None = None
    if url := git("remote", "get-url", "origin", timeout=timeout):
        if (parsed := parse_remote(url)) is not None:
            org, repo = parsed
        else:
            log.debug("Unrecognized remote URL: %r", url)

    return GitStatus(
        head=head,
        detached=detached,
        dirty=staged or unstaged,
        org=org,
        repo=repo,
    )


def parse_remote(url: str) -> tuple[str, str] | None:
    """
    Extract the organization & repository name from an HTTP(S) or SSH Git
    remote URL.  Returns `None` if the URL is not in either form.
    """
    for rgx in REMOTE_PATTERNS:
        if m := rgx.fullmatch(url.strip()):
            return (m["org"], m["repo"])
    return None


def git(*args: str, timeout: float | None = None) -> str | None:
    """
    Run a Git command (suppressing stderr) and return its stdout with leading &
    trailing whitespace stripped.  If the command fails, return `None`.
    """
    return output("git", *args, timeout=timeout)


def git_differs(*args: str, timeout: float | None = None) -> bool:
    """
    Run a ``git diff --quiet`` command and return `True` iff it reports
    differences (exit status 1).  Any other outcome counts as no differences.
    """
    r = run_command("git", *args, timeout=timeout)
    return r is not None and r.returncode == 1
