from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol


class Color(Enum):
    """
    An enumeration of the supported foreground colors.  Each color's value
    equals its xterm number.
    """

    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 11
    LIGHT_BLUE = 12
    LIGHT_MAGENTA = 13
    LIGHT_CYAN = 14

    def asfg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the foreground
        color
        """
        c = self.value
        return c + 30 if c < 8 else c + 82


@dataclass
class Style:
    color: Color | None = None
    bold: bool = False

    def as_params(self) -> list[str]:
        params = []
        if self.color is not None:
            params.append(str(self.color.asfg()))
        if self.bold:
            params.append("1")
        return params


class Styler(Protocol):
    prompt_suffix: ClassVar[str]

    def __call__(self, s: str, style: Style) -> str: ...


class BashStyler:
    """Escapes & styles strings for use in Bash's PS1 variable"""

    #: The prompt symbol placed after the path, just before a final space
    prompt_suffix: ClassVar[str] = r"\$"

    def __call__(self, s: str, style: Style) -> str:
        r"""
        Escape ``s`` for PS1 and wrap it in the SGR sequences for ``style``.
        The sequences are enclosed in ``\[ ... \]`` so that Bash does not count
        them toward the prompt's width.
        """
        s = s.replace("\\", r"\\")
        if params := style.as_params():
            s = rf"\[\e[{';'.join(params)}m\]{s}\[\e[m\]"
        return s


class ZshStyler:
    """Escapes & styles strings for use in zsh's PS1 variable"""

    prompt_suffix: ClassVar[str] = "%#"

    def __call__(self, s: str, style: Style) -> str:
        s = s.replace("%", "%%")
        if style.bold:
            s = f"%B{s}%b"
        if style.color is not None:
            s = f"%F{{{style.color.value}}}{s}%f"
        return s


class ANSIStyler:
    """Styles strings with raw ANSI escape sequences for direct display"""

    prompt_suffix: ClassVar[str] = "$"

    def __call__(self, s: str, style: Style) -> str:
        if params := style.as_params():
            s = f"\x1B[{';'.join(params)}m{s}\x1B[m"
        return s


class PlainStyler:
    """
    Leaves strings unstyled.  This is the format for shells that take the
    prompt text verbatim and apply their own coloring, such as PowerShell's
    ``prompt`` function.
    """

    prompt_suffix: ClassVar[str] = ">"

    def __call__(self, s: str, _style: Style) -> str:
        return s


StyleClass = Enum(
    "StyleClass",
    [
        "TIMESTAMP",
        "ADMIN",
        "USER",
        "CLOUD",
        "GIT_REPO",
        "GIT_HEAD",
        "GIT_DETACHED",
        "GIT_DIRTY",
        "PROMPT",
        "CWD",
    ],
)

Theme = dict[StyleClass, Style]

DARK_THEME = {
    StyleClass.TIMESTAMP: Style(Color.LIGHT_BLUE),
    StyleClass.ADMIN: Style(Color.RED, bold=True),
    StyleClass.USER: Style(Color.LIGHT_RED),
    StyleClass.CLOUD: Style(Color.CYAN),
    StyleClass.GIT_REPO: Style(Color.LIGHT_MAGENTA),
    StyleClass.GIT_HEAD: Style(Color.LIGHT_GREEN),
    StyleClass.GIT_DETACHED: Style(Color.LIGHT_BLUE),
    StyleClass.GIT_DIRTY: Style(Color.LIGHT_YELLOW, bold=True),
    StyleClass.PROMPT: Style(),
    StyleClass.CWD: Style(Color.LIGHT_CYAN),
}

LIGHT_THEME = DARK_THEME | {
    StyleClass.TIMESTAMP: Style(Color.BLUE),
    StyleClass.GIT_REPO: Style(Color.MAGENTA),
    StyleClass.GIT_HEAD: Style(Color.GREEN),
    StyleClass.GIT_DETACHED: Style(Color.BLUE),
    StyleClass.CWD: Style(Color.BLUE),
}

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


@dataclass
class Painter:
    styler: Styler
    theme: Theme

    def __call__(self, s: str, klass: StyleClass) -> str:
        return self.styler(s, self.theme[klass])
