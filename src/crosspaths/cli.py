"""Command-line interface for crosspaths."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .config import ConfigLoader
from .errors import PathsError, UnrecognizedPlatformError
from .logging import LogContext, setup_logging
from .paths import POSIX, SLASH, WINDOWS, Paths
from .schema import CrossPathsConfig
from .target import detect_target

APP_NAME = "crosspaths"

VARIANTS: Dict[str, Paths] = {
    "posix": POSIX,
    "windows": WINDOWS,
    "slash": SLASH,
}


def resolve_paths(variant: str, platform: Optional[str] = None) -> Paths:
    """Map a configured variant name to its path operations.

    Raises:
        UnrecognizedPlatformError: If ``variant`` is ``target`` and the
            platform has no known path syntax.
    """
    if variant == "target":
        paths = detect_target(platform)
        if paths is None:
            raise UnrecognizedPlatformError(
                "no path syntax known for this platform",
                platform=platform or sys.platform,
            )
        return paths
    return VARIANTS[variant]


def _single_path(op: Callable[[Paths, str], object]) -> Callable[[Paths, argparse.Namespace], List[str]]:
    def run(paths: Paths, args: argparse.Namespace) -> List[str]:
        return [_render(op(paths, args.path))]
    return run


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


COMMANDS: Dict[str, Callable[[Paths, argparse.Namespace], List[str]]] = {
    "clean": _single_path(Paths.clean),
    "base": _single_path(Paths.base),
    "dir": _single_path(Paths.dir),
    "ext": _single_path(Paths.ext),
    "is-abs": _single_path(Paths.is_abs),
    "volume": _single_path(Paths.volume_name),
    "to-url": _single_path(Paths.to_url),
    "split": lambda paths, args: list(paths.split(args.path)),
    "join": lambda paths, args: [paths.join(*args.elems)],
    "rel": lambda paths, args: [paths.rel(args.base, args.target)],
    "from-url": lambda paths, args: [paths.from_url(args.url)],
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Manipulate POSIX and Windows paths without touching a filesystem"
    )
    parser.add_argument(
        "--variant",
        choices=["target", *VARIANTS],
        help="Path syntax to use (overrides config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (TOML)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in [
        ("clean", "Print the shortest equivalent path"),
        ("base", "Print the last element"),
        ("dir", "Print all but the last element"),
        ("ext", "Print the extension"),
        ("split", "Print directory and file on separate lines"),
        ("is-abs", "Print whether the path is absolute"),
        ("volume", "Print the volume prefix"),
        ("to-url", "Print the URL for the path"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("path")

    join_parser = subparsers.add_parser("join", help="Join elements into one path")
    join_parser.add_argument("elems", nargs="*")

    rel_parser = subparsers.add_parser("rel", help="Print target relative to base")
    rel_parser.add_argument("base")
    rel_parser.add_argument("target")

    url_parser = subparsers.add_parser("from-url", help="Print the path a URL refers to")
    url_parser.add_argument("url")

    return parser


def run_command(paths: Paths, args: argparse.Namespace) -> int:
    """Run one subcommand and print its result.

    Returns:
        Exit code (0 for success, 1 if the input was rejected)
    """
    logger = logging.getLogger(__package__ or __name__)

    with LogContext(logger, command=args.command, variant=paths.name):
        try:
            lines = COMMANDS[args.command](paths, args)
        except PathsError as e:
            logger.error(f"{args.command} failed: {e.message}")
            return 1

    for line in lines:
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    config = ConfigLoader(CrossPathsConfig, app_name=APP_NAME).load(defaults_path=args.config)

    log_file = Path(config.logging.file) if config.logging.file else None
    setup_logging(
        level=args.log_level or config.logging.level,
        format=config.logging.format,
        log_file=log_file,
    )
    logger = logging.getLogger(__package__ or __name__)

    variant = args.variant or config.paths.variant
    try:
        paths = resolve_paths(variant)
    except UnrecognizedPlatformError as e:
        logger.error(f"{e.message}: {e.context['platform']}")
        return 2

    logger.debug(f"Using {paths.name} path syntax")
    return run_command(paths, args)


if __name__ == "__main__":
    sys.exit(main())
