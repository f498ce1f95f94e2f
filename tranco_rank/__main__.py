"""
Entry point for the tranco_rank command line.
"""

import argparse
import logging
import sys

from tqdm.contrib.logging import logging_redirect_tqdm

from .application.exceptions import NotFoundError, TrancoError
from .infrastructure.containers import Container
from .version import version

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Applies basic logging configuration."""
    logging.basicConfig(level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tranco_rank",
        description="Look up domain ranks in the Tranco list",
    )

    parser.add_argument(
        "domains",
        nargs="*",
        help="Domains to look up, e.g., example.com",
    )

    parser.add_argument(
        "--date",
        required=True,
        help="Date of the list to use, as YYYY-MM-DD.",
    )

    parser.add_argument(
        "--subdomains",
        action="store_true",
        help="Use the list that includes subdomains (FQDN) instead of PLDs.",
    )

    parser.add_argument(
        "--scale",
        help="Number of entries of the list to download, e.g., 1000000.",
    )

    parser.add_argument(
        "--cache-root",
        help="Directory holding downloaded lists (default: ~/.tranco).",
    )

    parser.add_argument(
        "--show-source",
        action="store_true",
        help="Print the download URL and cached file path of the list.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {version()}",
    )

    return parser


def run_application(args: argparse.Namespace) -> int:
    """Wires the list using the DI container and prints the ranks."""

    container = Container()
    config = container.config()
    setup_logging(level=config.logging.level)

    container.cli_args.from_dict({
        "date": args.date,
        "include_subdomains": args.subdomains,
        "scale": str(args.scale or config.tranco.default_scale),
        "cache_root": args.cache_root or config.paths.cache_root,
    })

    try:
        with logging_redirect_tqdm():
            tranco = container.tranco_list()
    except TrancoError as e:
        logger.error(f"An application error occurred: {e}")
        return 1

    if args.show_source:
        print(f"url\t{tranco.url()}")
        print(f"path\t{tranco.default_file_path()}")

    for domain in args.domains:
        try:
            print(f"{domain}\t{tranco.rank(domain)}")
        except NotFoundError:
            print(f"{domain}\t-")
        except TrancoError as e:
            logger.error(f"An application error occurred: {e}")
            return 1

    return 0


def main(argv=None) -> int:
    parser = build_parser()
    return run_application(parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
