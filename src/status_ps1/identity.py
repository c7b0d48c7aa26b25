from __future__ import annotations
from dataclasses import dataclass
import getpass
import os
import re
import sys


@dataclass(frozen=True)
class Identity:
    #: The login name of the process owner, without any domain qualifier
    user: str

    #: `True` iff the process has administrative privileges
    elevated: bool


def current_identity() -> Identity:
    """
    Return the name of the current user and whether the process is elevated.

    Errors from the underlying platform calls are not caught; there is no
    sensible default for either value.
    """
    return Identity(user=short_username(getpass.getuser()), elevated=is_elevated())


def short_username(name: str) -> str:
    """Strip a ``DOMAIN\\`` (or ``DOMAIN/``) qualifier from an account name"""
    return re.split(r"[\\/]", name)[-1]


def is_elevated() -> bool:
    if sys.platform == "win32":
        import ctypes

        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    else:
        return os.geteuid() == 0
