from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Color(Enum):
    """Foreground colors, valued by xterm color number"""

    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    DARK_GRAY = 8
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 11
    LIGHT_BLUE = 12
    LIGHT_MAGENTA = 13
    LIGHT_CYAN = 14

    def asfg(self) -> int:
        c = self.value
        return c + 30 if c < 8 else c + 82


@dataclass(frozen=True)
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
    def __call__(self, s: str, style: Style) -> str: ...


class ANSIStyler:
    """Styles text with raw ANSI escapes, for shells that print output as-is"""

    def __call__(self, s: str, style: Style) -> str:
        if s and (params := style.as_params()):
            s = f"\x1B[{';'.join(params)}m{s}\x1B[m"
        return s


class BashStyler:
    r"""
    Styles text for Bash's PS1, wrapping escapes in ``\[ ... \]`` so that
    Bash does not count them towards the prompt width
    """

    def __call__(self, s: str, style: Style) -> str:
        s = self.escape(s)
        if s and (params := style.as_params()):
            s = rf"\[\e[{';'.join(params)}m\]{s}\[\e[m\]"
        return s

    def escape(self, s: str) -> str:
        return s.replace("\\", r"\\")


class ZshStyler:
    """Styles text for zsh's PS1 using prompt escapes"""

    def __call__(self, s: str, style: Style) -> str:
        s = self.escape(s)
        if not s:
            return s
        if style.bold:
            s = f"%B{s}%b"
        if style.color is not None:
            s = f"%F{{{style.color.value}}}{s}%f"
        return s

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


STYLERS: dict[str, type[Styler]] = {
    "ansi": ANSIStyler,
    "bash": BashStyler,
    "zsh": ZshStyler,
}


StyleClass = Enum(
    "StyleClass",
    [
        "FRAME",
        "CWD",
        "VCS_HEAD",
        "VCS_DETACHED",
        "VCS_DIRTY",
        "JJ_PREFIX",
        "JJ_REST",
        "BADGE",
        "DURATION",
        "EXIT_CODE",
    ],
)

Theme = dict[StyleClass, Style]

DARK_THEME = {
    StyleClass.FRAME: Style(Color.YELLOW),
    StyleClass.CWD: Style(Color.CYAN, bold=True),
    StyleClass.VCS_HEAD: Style(Color.MAGENTA),
    StyleClass.VCS_DETACHED: Style(Color.LIGHT_BLUE),
    StyleClass.VCS_DIRTY: Style(Color.MAGENTA),
    StyleClass.JJ_PREFIX: Style(Color.MAGENTA, bold=True),
    StyleClass.JJ_REST: Style(Color.DARK_GRAY, bold=True),
    StyleClass.BADGE: Style(Color.LIGHT_BLUE),
    StyleClass.DURATION: Style(Color.RED),
    StyleClass.EXIT_CODE: Style(Color.RED, bold=True),
}

LIGHT_THEME = DARK_THEME | {
    StyleClass.CWD: Style(Color.BLUE, bold=True),
    StyleClass.VCS_DETACHED: Style(Color.BLUE),
    StyleClass.BADGE: Style(Color.BLUE),
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
