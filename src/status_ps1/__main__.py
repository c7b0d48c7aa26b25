from __future__ import annotations
import argparse
import logging
from . import __version__
from .config import DEFAULT_TIMEOUT, MAX_CWD_LEN, PROMPT_SYMBOL, Config
from .git import git_status
from .info import PromptInfo
from .styles import THEMES, ANSIStyler, BashStyler, Painter, PlainStyler, ZshStyler


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Multi-line shell prompt with Azure & Git status"
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt for direct display",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1 (default)",
    )
    parser.add_argument(
        "--plain",
        action="store_const",
        dest="stylecls",
        const=PlainStyler,
        help="Output the prompt without any styling (e.g., for PowerShell)",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "--cloud-timeout",
        type=float,
        metavar="SECONDS",
        default=DEFAULT_TIMEOUT,
        help=(
            "Give up on each Azure CLI command that runs longer than this"
            f"  [default: {DEFAULT_TIMEOUT:g}]"
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log why prompt segments were degraded to stderr",
    )
    parser.add_argument(
        "-G",
        "--git-only",
        action="store_true",
        help="Only output the Git portion of the prompt",
    )
    parser.add_argument(
        "--git-timeout",
        type=float,
        metavar="SECONDS",
        default=DEFAULT_TIMEOUT,
        help=(
            "Give up on each Git command that runs longer than this"
            f"  [default: {DEFAULT_TIMEOUT:g}]"
        ),
    )
    parser.add_argument(
        "--max-path-len",
        type=int,
        metavar="N",
        default=MAX_CWD_LEN,
        help=f"Abbreviate paths longer than this  [default: {MAX_CWD_LEN}]",
    )
    parser.add_argument(
        "--no-cloud",
        action="store_true",
        help="Do not show the Azure CLI session",
    )
    parser.add_argument(
        "--prompt-symbol",
        metavar="STR",
        default=PROMPT_SYMBOL,
        help=f"Text to show before the path  [default: {PROMPT_SYMBOL}]",
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        default="dark",
        help="Select the color theme to use  [default: dark]",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "git_flag", nargs="?", help='Set to "off" to disable Git integration'
    )
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(
            format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            level=logging.DEBUG,
        )
    config = Config(
        max_cwd_len=args.max_path_len,
        prompt_symbol=args.prompt_symbol,
        git=args.git_flag != "off",
        git_timeout=args.git_timeout,
        cloud=not args.no_cloud,
        cloud_timeout=args.cloud_timeout,
    )
    styler = (args.stylecls or BashStyler)()
    paint = Painter(styler=styler, theme=THEMES[args.theme])
    if args.git_only:
        if config.git and (gs := git_status(timeout=config.git_timeout)):
            s = gs.display(paint, config.branch_glyph)
        else:
            s = ""
    else:
        s = PromptInfo.get(config).display(paint, config)
    print(s)


if __name__ == "__main__":
    main()
