"""Console entry point printing the breakdown of a shared recipe."""

import argparse
from collections.abc import Sequence

from pe_calculator.app_logging import configure_logging
from pe_calculator.config import Settings
from pe_calculator.containers import build_container
from pe_calculator.services.report import format_report_text


def main(argv: Sequence[str] | None = None) -> int:
    """Print the recipe encoded in a share link, or an empty recipe."""
    parser = argparse.ArgumentParser(
        prog="pe-calculator",
        description="P:E Diet Recipe Calculator: print a shared recipe.",
    )
    parser.add_argument(
        "link",
        nargs="?",
        default="",
        help="share link or '#recipe=<token>' fragment",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(debug=settings.debug)
    container = build_container(settings)
    session = container.open_session(args.link)
    print(format_report_text(session.report()))
    link = session.bridge.share_link(settings.base_url)
    if link:
        print(f"\nShare link: {link}")
    return 0
