from __future__ import annotations
from dataclasses import dataclass, field
from .styles import Painter
from .styles import StyleClass as SC


@dataclass(frozen=True)
class Segment:
    text: str
    style: SC

    def render(self, paint: Painter) -> str:
        return paint(self.text, self.style)


#: A sequence of segments displayed back-to-back as a single item of the
#: prompt, i.e., with no separator between them
Part = list[Segment]


@dataclass
class Prompt:
    """
    An ordered collection of styled items that are rendered one after another,
    joined by ``separator`` and framed by ``prefix`` and ``suffix``.  The
    separator & framing strings are rendered in the ``style`` style.
    """

    parts: list[Part] = field(default_factory=list)
    separator: str = " "
    prefix: str = ""
    suffix: str = ""
    style: SC = SC.FRAME

    def push(self, text: str, style: SC) -> None:
        self.parts.append([Segment(text, style)])

    def push_if(self, text: str | None, style: SC) -> None:
        if text is not None:
            self.push(text, style)

    def push_part(self, part: Part) -> None:
        if part:
            self.parts.append(list(part))

    def render(self, paint: Painter) -> str:
        s = paint(self.prefix, self.style)
        s += paint(self.separator, self.style).join(
            "".join(seg.render(paint) for seg in part) for part in self.parts
        )
        s += paint(self.suffix, self.style)
        return s
