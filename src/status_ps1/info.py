from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
import logging
import os
import re
from .cloud import CloudSession, cloud_session
from .config import ELLIPSIS, MAX_CWD_LEN, Config
from .git import GitStatus, git_status
from .identity import Identity, current_identity
from .styles import DARK_THEME, Painter, PlainStyler
from .styles import StyleClass as SC

log = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M"


@dataclass
class PromptInfo:
    #: When the prompt was rendered
    timestamp: datetime

    #: The current user & privilege level, or `None` if they could not be
    #: determined
    identity: Identity | None

    #: The active Azure session, or `None` if cloud integration is disabled
    cloud: CloudSession | None

    #: The path to the current working directory, truncated by `shortpath()`
    cwdstr: str

    #: The status of the current Git repository, or `None` if not in one
    git: GitStatus | None

    @classmethod
    def get(cls, config: Config | None = None) -> PromptInfo:
        if config is None:
            config = Config()

        try:
            identity: Identity | None = current_identity()
        except Exception:
            log.debug("Could not determine user identity", exc_info=True)
            identity = None

        if config.cloud:
            cloud = cloud_session(timeout=config.cloud_timeout)
        else:
            cloud = None

        if config.git:
            gs = git_status(timeout=config.git_timeout)
        else:
            gs = None

        return cls(
            timestamp=datetime.now(),
            identity=identity,
            cloud=cloud,
            cwdstr=cwdstr(max_len=config.max_cwd_len, ellipsis=config.ellipsis),
            git=gs,
        )

    def display(self, paint: Painter, config: Config | None = None) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        if config is None:
            config = Config()

        # First line: the time, who we are, and where we're logged in to
        ps1 = paint(self.timestamp.strftime(TIMESTAMP_FORMAT), SC.TIMESTAMP)
        if self.identity is not None:
            if self.identity.elevated:
                ps1 += " " + paint("[ADMIN]", SC.ADMIN)
            ps1 += " " + paint(self.identity.user, SC.USER)
        if self.cloud is not None:
            ps1 += " | " + self.cloud.display(paint, config.ellipsis)
        ps1 += "\n"

        # The repository gets its own line, but only if we're in one:
        if self.git is not None:
            ps1 += self.git.display(paint, config.branch_glyph) + "\n"

        # Last line: the actual prompt
        ps1 += paint(config.prompt_symbol, SC.PROMPT) + " "
        ps1 += paint(self.cwdstr, SC.CWD)
        ps1 += paint.styler.prompt_suffix + " "

        return ps1


def render_prompt(config: Config | None = None, paint: Painter | None = None) -> str:
    """
    Gather the current environment's status and return the complete prompt
    text.  Unless a ``paint`` is given, the text carries no color codes.
    """
    if paint is None:
        paint = Painter(PlainStyler(), DARK_THEME)
    return PromptInfo.get(config).display(paint, config)


def cwdstr(max_len: int = MAX_CWD_LEN, ellipsis: str = ELLIPSIS) -> str:
    """
    Show the path to the current working directory, truncated to fit within
    ``max_len`` characters where possible
    """
    # Prefer $PWD to os.getcwd() as the former does not resolve symlinks
    cwd = os.environ.get("PWD") or os.getcwd()
    return shortpath(cwd, max_len=max_len, ellipsis=ellipsis)


def shortpath(
    path: str,
    max_len: int = MAX_CWD_LEN,
    sep: str = os.sep,
    ellipsis: str = ELLIPSIS,
) -> str:
    """
    If ``path`` is longer than ``max_len``, keep only its first component and
    its last two, with ``ellipsis`` standing in for everything in between.
    Paths with fewer than four components are never shortened.
    """
    if len(path) <= max_len:
        return path
    parts = re.split(r"[\\/]+", path)
    if len(parts) < 4:
        return path
    return sep.join([parts[0], ellipsis, parts[-2], parts[-1]])
