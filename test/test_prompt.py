from __future__ import annotations
from conch.prompt import Prompt, Segment
from conch.styles import DARK_THEME, ANSIStyler, BashStyler, Painter, ZshStyler
from conch.styles import StyleClass as SC


def test_render_empty() -> None:
    paint = Painter(ANSIStyler(), DARK_THEME)
    assert Prompt().render(paint) == ""


def test_render_default_separator() -> None:
    prompt = Prompt()
    prompt.push("foo", SC.CWD)
    prompt.push("bar", SC.VCS_HEAD)
    paint = Painter(ANSIStyler(), DARK_THEME)
    assert prompt.render(paint) == "\x1B[36;1mfoo\x1B[m\x1B[33m \x1B[m\x1B[35mbar\x1B[m"


def test_render_framed() -> None:
    prompt = Prompt(separator=" | ", prefix="<", suffix=">")
    prompt.push("foo", SC.CWD)
    prompt.push("bar", SC.BADGE)
    paint = Painter(ANSIStyler(), DARK_THEME)
    assert prompt.render(paint) == (
        "\x1B[33m<\x1B[m"
        "\x1B[36;1mfoo\x1B[m"
        "\x1B[33m | \x1B[m"
        "\x1B[94mbar\x1B[m"
        "\x1B[33m>\x1B[m"
    )


def test_push_if() -> None:
    prompt = Prompt()
    prompt.push_if(None, SC.DURATION)
    prompt.push_if("1.5s", SC.DURATION)
    prompt.push_if(None, SC.EXIT_CODE)
    assert prompt.parts == [[Segment("1.5s", SC.DURATION)]]


def test_push_part_no_inner_separator() -> None:
    prompt = Prompt(separator="/")
    prompt.push("a", SC.CWD)
    prompt.push_part([Segment("kx", SC.JJ_PREFIX), Segment("qpmnzt", SC.JJ_REST)])
    prompt.push_part([])
    paint = Painter(ANSIStyler(), DARK_THEME)
    assert prompt.render(paint) == (
        "\x1B[36;1ma\x1B[m"
        "\x1B[33m/\x1B[m"
        "\x1B[35;1mkx\x1B[m"
        "\x1B[90;1mqpmnzt\x1B[m"
    )


def test_push_part_copies() -> None:
    part = [Segment("main", SC.VCS_HEAD)]
    prompt = Prompt()
    prompt.push_part(part)
    part.append(Segment("*", SC.VCS_DIRTY))
    assert prompt.parts == [[Segment("main", SC.VCS_HEAD)]]


def test_render_bash() -> None:
    prompt = Prompt()
    prompt.push("C:\\foo", SC.CWD)
    paint = Painter(BashStyler(), DARK_THEME)
    assert prompt.render(paint) == r"\[\e[36;1m\]C:\\foo\[\e[m\]"


def test_render_zsh() -> None:
    prompt = Prompt(separator=" ")
    prompt.push("100%", SC.CWD)
    prompt.push("1", SC.EXIT_CODE)
    paint = Painter(ZshStyler(), DARK_THEME)
    assert prompt.render(paint) == (
        "%F{6}%B100%%%b%f%F{3} %f%F{1}%B1%b%f"
    )
