"""Command-line interface for linkscraper."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.table import Table

from . import __version__
from .errors import LinkScraperError
from .logging_config import setup_logging
from .models.config import ScrapeConfig
from .sources import scrape_any

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="linkscraper",
        description="List every URL referenced by XML, SVG, XLink or plain-text documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape a document, picking the scraper from the file suffix
  linkscraper catalog.xml

  # Only XLink references, leaving extended links by nesting depth
  linkscraper --format xlink --end-matching depth linkbase.xml

  # JSON lines for further processing
  linkscraper --json drawing.svg notes.txt
        """,
    )

    parser.add_argument("files", nargs="+", type=Path, help="Documents to scrape")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    scrape_group = parser.add_argument_group("Scraping")
    scrape_group.add_argument(
        "--format",
        "-f",
        choices=["auto", "xml", "hrefs", "xlink", "svg", "text"],
        help="Scraper to run (default: auto, chosen from the file suffix)",
    )
    scrape_group.add_argument(
        "--config",
        "-c",
        type=Path,
        help="YAML configuration file",
    )
    scrape_group.add_argument(
        "--chunk-size",
        help="Bytes read per tokenizer feed (e.g. 64kb)",
    )
    scrape_group.add_argument(
        "--end-matching",
        choices=["name", "depth"],
        help="How the end of an XLink extended element is found (default: name)",
    )
    scrape_group.add_argument(
        "--filter-locator-href",
        action="store_true",
        help="Run XLink locator hrefs through the URL matcher",
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per link instead of a table",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose logging",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )
    output_group.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )

    return parser


def build_config(args: argparse.Namespace) -> ScrapeConfig:
    """Merge the YAML config file (if any) with command-line overrides."""
    data: dict[str, Any] = {}
    if args.config:
        data = ScrapeConfig.from_yaml_file(args.config).model_dump(exclude_unset=True)

    if args.format:
        data["format"] = args.format
    if args.chunk_size:
        data["chunk_size"] = args.chunk_size

    xlink_kwargs: dict[str, Any] = dict(data.get("xlink", {}))
    if args.end_matching:
        xlink_kwargs["end_matching"] = args.end_matching
    if args.filter_locator_href:
        xlink_kwargs["filter_locator_href"] = True
    if xlink_kwargs:
        data["xlink"] = xlink_kwargs

    if args.verbose:
        data["log_level"] = "DEBUG"
    elif args.quiet:
        data["log_level"] = "ERROR"
    if args.log_file:
        data["log_file"] = args.log_file

    return ScrapeConfig(**data)


def print_links(console: Console, path: Path, links: list[Any], as_json: bool) -> None:
    if as_json:
        for link in links:
            console.out(json.dumps({"file": str(path), **link.to_dict()}), highlight=False)
        return

    table = Table(title=str(path))
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Kind", style="green")
    table.add_column("Detail")
    for link in links:
        row = link.to_dict()
        table.add_row(row["url"], str(row["line"]), str(row["column"]), row["kind"], row.get("detail") or "")
    console.print(table)


def run_scraper(args: argparse.Namespace) -> int:
    """Scrape every file given on the command line."""
    console = Console()
    error_console = Console(stderr=True)

    try:
        config = build_config(args)
    except Exception as e:
        error_console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    setup_logging(config.log_level, str(config.log_file) if config.log_file else None, force=True)

    failed = 0
    for path in args.files:
        try:
            links = scrape_any(path, config)
        except LinkScraperError as e:
            failed += 1
            logger.error(f"Failed to scrape {path}: {e}")
            error_console.print(f"[red]Failed:[/red] {path} - {e}")
            continue
        print_links(console, path, links, args.json)

    return 0 if failed == 0 else 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_scraper(args)


if __name__ == "__main__":
    sys.exit(main())
