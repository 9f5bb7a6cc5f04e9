"""CLI entrypoint for historical photo acquisition."""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from config import get_settings
from models import PhotoCategory, PhotoRecord
from orchestrator import PhotoAcquisitionService
from utils import PhotoAcquisitionError, setup_logger


console = Console()


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Historical photo acquisition CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    fetch = sub.add_parser("fetch", help="Fetch validated historical photos from Wikimedia Commons")
    fetch.add_argument("--count", type=_positive_int, default=5)
    fetch.add_argument(
        "--category",
        choices=[category.value for category in PhotoCategory],
        default=PhotoCategory.ALL.value,
    )
    fetch.add_argument("--force-refresh", action="store_true")
    fetch.add_argument("--json", action="store_true", help="Print records as JSON")
    return parser


def _render_table(records: Sequence[PhotoRecord], requested: int) -> None:
    table = Table(title=f"Historical photos ({len(records)}/{requested})")
    table.add_column("Year", justify="right")
    table.add_column("Title")
    table.add_column("Coordinates")
    table.add_column("Format")
    table.add_column("License")

    for record in records:
        table.add_row(
            str(record.year),
            record.title,
            f"{record.coordinates.latitude:.4f}, {record.coordinates.longitude:.4f}",
            record.metadata.format,
            record.metadata.license,
        )
    console.print(table)


async def _fetch(args: argparse.Namespace) -> Tuple[PhotoRecord, ...]:
    async with PhotoAcquisitionService() as service:
        return await service.fetch_photos(args.count, args.category, args.force_refresh)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    general = get_settings().general
    setup_logger(level=general.log_level.upper(), log_file=general.log_file)

    if args.command == "fetch":
        try:
            records = asyncio.run(_fetch(args))
        except PhotoAcquisitionError as exc:
            console.print(f"[red]{exc.user_message}[/red]")
            return 1

        if args.json:
            print(json.dumps([record.model_dump(mode="json") for record in records], ensure_ascii=False, indent=2))
        else:
            _render_table(records, args.count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
