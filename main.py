"""movies — load movie lists and browse them with an interactive command loop."""

import logging
import sys
from argparse import ArgumentParser

from catalog.config import LOG_LEVELS, load_config, load_yaml_config
from catalog.errors import LoadError
from catalog.parser import load_catalog
from catalog.shell import CommandShell
from catalog.watchlist import Watchlist

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="movies",
        description="Load movie lists and query them interactively from stdin.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="movie-list",
        help="Movie list file(s); ids must be unique across all of them",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML config file",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Log level for diagnostics on stderr (default: from config, WARNING)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(load_yaml_config(args.config))
    except (ValueError, OSError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(asctime)s [movies] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        catalog = load_catalog(
            args.files,
            delimiter=config.delimiter,
            encoding=config.encoding,
            initial_capacity=config.initial_capacity,
        )
    except LoadError as ex:
        print(ex, file=sys.stderr)
        return 1

    logger.info("Catalog ready: %d movies from %d file(s)", len(catalog), len(args.files))
    watchlist = Watchlist(catalog, initial_capacity=config.initial_capacity)
    shell = CommandShell(catalog, watchlist)
    return shell.run(sys.stdin)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
