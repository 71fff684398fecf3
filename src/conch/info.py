from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import re
from .config import PromptConfig
from .styles import Painter
from .styles import StyleClass as SC
from .util import format_duration, format_path
from .vcs import DEFAULT_TIMEOUT, VcsContext, discover

log = logging.getLogger(__name__)

#: Value of :envvar:`CMD_DURATION_MS` that some shells report spuriously
#: instead of the real duration of the last command
BOGUS_DURATION = "0823"


@dataclass
class PromptInfo:
    #: The text to display for the current working directory; see
    #: `format_path()`
    cwdstr: str

    #: The state of the repository containing the current directory, if any
    vcs: VcsContext | None

    #: `True` iff we're inside a Nix shell
    nix: bool

    #: `True` iff direnv has loaded an environment for the current directory
    direnv: bool

    #: The formatted duration of the previous command, if it's worth showing
    duration: str | None

    #: The exit status of the previous command, if nonzero
    exit_code: str | None

    @classmethod
    def get(
        cls,
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        vcs: bool = True,
        vcs_timeout: float = DEFAULT_TIMEOUT,
    ) -> PromptInfo:
        if env is None:
            env = os.environ
        if cwd is None:
            cwd = Path.cwd()
        ctx = discover(cwd, timeout=vcs_timeout) if vcs else None
        return cls(
            cwdstr=format_path(cwd, ctx, home_dir()),
            vcs=ctx,
            nix="IN_NIX_SHELL" in env,
            direnv="DIRENV_FILE" in env,
            duration=parse_duration(env.get("CMD_DURATION_MS")),
            exit_code=parse_exit_code(env.get("LAST_EXIT_CODE")),
        )

    def display(self, paint: Painter, config: PromptConfig | None = None) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        prompt = (config or PromptConfig()).new_prompt()
        prompt.push(self.cwdstr, SC.CWD)
        if self.vcs is not None:
            prompt.push_part(self.vcs.display_part())
        if self.nix:
            prompt.push("nix", SC.BADGE)
        if self.direnv:
            prompt.push("direnv", SC.BADGE)
        prompt.push_if(self.duration, SC.DURATION)
        prompt.push_if(self.exit_code, SC.EXIT_CODE)
        return prompt.render(paint)


def home_dir() -> Path | None:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as e:
        log.debug("Could not determine home directory: %s", e)
        return None


def parse_duration(value: str | None) -> str | None:
    """
    Convert a :envvar:`CMD_DURATION_MS` value to a display string, or `None`
    if it is unset, bogus, invalid, or too short to show
    """
    if value is None or value == BOGUS_DURATION:
        return None
    if not re.fullmatch(r"[0-9]+", value):
        log.debug("Ignoring invalid CMD_DURATION_MS value %r", value)
        return None
    return format_duration(int(value))


def parse_exit_code(value: str | None) -> str | None:
    if value is None or value == "0":
        return None
    return value
