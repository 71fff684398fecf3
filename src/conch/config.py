from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from .prompt import Prompt

#: Separator shown between prompt items when decorations are enabled
SEPARATOR = " ∵ "

#: Text shown before the first item of a multi-line prompt
MULTILINE_PREFIX = "┏━ "

#: Text shown after the last item of a multi-line prompt
MULTILINE_SUFFIX = "\n┃"


@dataclass
class PromptConfig:
    #: If true, the prompt is rendered without a prefix, suffix, or fancy
    #: separator
    plain: bool = False

    #: If true (and ``plain`` is false), the prompt is framed to span two
    #: lines
    multiline: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> PromptConfig:
        """
        Read configuration from the environment variables
        :envvar:`CONCH_PLAIN` and :envvar:`CONCH_MULTILINE`
        """
        return cls(
            plain=env.get("CONCH_PLAIN") in ("1", "true"),
            multiline=env.get("CONCH_MULTILINE") not in ("0", "false"),
        )

    def new_prompt(self) -> Prompt:
        """Return an empty `Prompt` framed according to this configuration"""
        if self.plain:
            return Prompt()
        elif self.multiline:
            return Prompt(
                separator=SEPARATOR, prefix=MULTILINE_PREFIX, suffix=MULTILINE_SUFFIX
            )
        else:
            return Prompt(separator=SEPARATOR)
