from __future__ import annotations
import argparse
import logging
import os
import sys
from . import __version__
from .config import PromptConfig
from .info import PromptInfo
from .styles import STYLERS, THEMES, Painter
from .vcs import DEFAULT_TIMEOUT

log = logging.getLogger("conch")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Print a VCS-aware shell prompt.  Set CONCH_PLAIN=1 to disable"
            " decorations or CONCH_MULTILINE=0 for a single-line prompt."
        )
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="styler",
        const="ansi",
        help="Format prompt for direct display (default)",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="styler",
        const="bash",
        help="Format prompt for Bash's PS1",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="styler",
        const="zsh",
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=os.environ.get("CONCH_LOG_LEVEL", "WARNING").upper(),
        help="Set the level of diagnostics written to stderr  [default: WARNING]",
    )
    parser.add_argument(
        "--no-vcs",
        action="store_true",
        help="Do not look for a Jujutsu or Git repository",
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        default="dark",
        help="Select the color theme to use  [default: dark]",
    )
    parser.add_argument(
        "--vcs-timeout",
        type=float,
        metavar="SECONDS",
        default=DEFAULT_TIMEOUT,
        help=(
            "Give up on VCS integration if a VCS command runs longer than"
            f" this  [default: {DEFAULT_TIMEOUT:g}]"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="conch: %(levelname)s: %(message)s",
        level=getattr(logging, args.log_level, logging.WARNING),
    )
    styler = STYLERS[args.styler or "ansi"]()
    paint = Painter(styler=styler, theme=THEMES[args.theme])
    try:
        info = PromptInfo.get(vcs=not args.no_vcs, vcs_timeout=args.vcs_timeout)
    except OSError as e:
        log.debug("Failed to gather prompt information", exc_info=True)
        sys.exit(f"conch: could not determine current directory: {e}")
    sys.stdout.write(info.display(paint, PromptConfig.from_env(os.environ)))


if __name__ == "__main__":
    main()
