"""CLI for QuickPass: generate passwords, rate a configuration, launch the GUI."""

import argparse
import logging
from typing import List, Optional

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .clipboard import PyperclipStrategy, copy_text
from .config import Configuration, MIN_LENGTH, MAX_LENGTH, default_configuration, load_config, log_level
from .generator import generate
from .strength import StrengthResult, score_strength

BAR_WIDTH = 20


def _setup_logging(verbose: bool, settings: dict) -> None:
    level = logging.DEBUG if verbose else log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def _strength_color(percent: int) -> str:
    if percent >= 80:
        return "green"
    if percent >= 50:
        return "yellow"
    return "red"


def render_bar(result: StrengthResult, width: int = BAR_WIDTH) -> str:
    filled = round(result.percent / 100 * width)
    return "#" * filled + "-" * (width - filled)


def _config_from_args(args) -> Configuration:
    return Configuration(
        length=args.length,
        include_numbers=not args.no_numbers,
        include_symbols=not args.no_symbols,
    )


def cmd_generate(args) -> int:
    config = _config_from_args(args)
    strength = score_strength(config.length, config.include_numbers, config.include_symbols)
    color = _strength_color(strength.percent)
    pw = ""
    for i in range(args.copies):
        pw = generate(config)
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    print(f"Strength: [{color}]{strength.label}[/{color}] • {strength.percent}%")
    if args.copy:
        if copy_text(pw, [PyperclipStrategy()]):
            print("[green]Copied to clipboard.[/green]")
        else:
            print("[yellow]Clipboard unavailable; copy the password manually.[/yellow]")
    return 0


def cmd_strength(args) -> int:
    config = _config_from_args(args)
    result = score_strength(config.length, config.include_numbers, config.include_symbols)
    color = _strength_color(result.percent)
    body = (
        f"Length: {config.length}\n"
        f"Numbers: {'yes' if config.include_numbers else 'no'}\n"
        f"Symbols: {'yes' if config.include_symbols else 'no'}\n"
        f"[{color}]{escape('[' + render_bar(result) + ']')}[/{color}]"
    )
    print(Panel(body, title=f"Strength: {result.label} • {result.percent}%"))
    return 0


def cmd_gui(args) -> int:
    # imported lazily so the terminal commands never load PySide6
    from .gui import main as gui_main
    return gui_main()


def _length(value: str) -> int:
    n = int(value)
    if not MIN_LENGTH <= n <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}")
    return n


def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def build_parser(default_length: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quickpass")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    def add_config_flags(p):
        p.add_argument("--length", "-n", type=_length, default=default_length,
                       help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
        p.add_argument("--no-numbers", action="store_true", help="Leave out digits")
        p.add_argument("--no-symbols", action="store_true", help="Leave out symbols")

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    add_config_flags(gen)
    gen.add_argument("--copies", "-c", type=_positive, default=1, help="How many passwords to generate")
    gen.add_argument("--copy", action="store_true", help="Copy the last password to the clipboard")
    gen.set_defaults(func=cmd_generate)

    st = sub.add_parser("strength", help="Rate a length/character-class configuration")
    add_config_flags(st)
    st.set_defaults(func=cmd_strength)

    g = sub.add_parser("gui", help="Open the generator window")
    g.set_defaults(func=cmd_gui)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_config()
    parser = build_parser(default_configuration(settings).length)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, settings)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
