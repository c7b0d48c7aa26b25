from __future__ import annotations
from dataclasses import dataclass

#: Default maximum display length of the path to the current working directory
MAX_CWD_LEN = 48

#: Marker substituted for the parts of a path or ID that are cut out
ELLIPSIS = "..."

#: Powerline "branch" symbol shown before the Git branch name
BRANCH_GLYPH = "\ue0a0"

#: Text shown before the path on the final line of the prompt
PROMPT_SYMBOL = "PS"

#: Default timeout in seconds for each invocation of an external CLI
DEFAULT_TIMEOUT = 3.0


@dataclass(frozen=True)
class Config:
    """Settings fixed once at startup and shared by the whole render"""

    max_cwd_len: int = MAX_CWD_LEN
    ellipsis: str = ELLIPSIS
    branch_glyph: str = BRANCH_GLYPH
    prompt_symbol: str = PROMPT_SYMBOL

    #: Whether to query Git for repository status
    git: bool = True
    git_timeout: float = DEFAULT_TIMEOUT

    #: Whether to query the Azure CLI for the active session
    cloud: bool = True
    cloud_timeout: float = DEFAULT_TIMEOUT
