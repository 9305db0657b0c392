#!/usr/bin/env python3
"""Dump the current TTR invasion and field office feeds.

Refreshes every requested feed once and prints the normalized snapshot,
the way a companion app's list views would show it.

Usage
-----
::

    python scripts/dump_feeds.py
    python scripts/dump_feeds.py --feed invasions --json
    TTR_TIME_ZONE=America/New_York python scripts/dump_feeds.py -v

Options::

    --feed NAME          invasions, field_offices or all (default: all)
    --streets            Also print the street cog distribution table
    --json               Output as machine-readable JSON
    -v, --verbose        Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import tzinfo
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyttr import FeedStore, TtrClient, TtrConfig, TtrRefreshError  # noqa: E402
from pyttr.display import format_clock_time, format_updated  # noqa: E402
from pyttr.reference import NEIGHBORHOODS  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _print_invasions(store: FeedStore[Any, Any], tz: tzinfo | None) -> None:
    snapshot = store.current()
    print(_section("Invasions"))
    if snapshot.fetch_error:
        print(f"  (server reported: {snapshot.fetch_error})")
    for street, invasion in sorted(snapshot.items_by_location.items()):
        print(f"  {invasion.enemy_type}s in {street}: {invasion.progress} defeated")
        print(f"      as of {format_clock_time(invasion.as_of, tz)}")
    if not snapshot.items_by_location:
        print("  No invasions")
    print(f"  {format_updated(snapshot, tz) or 'Invasions loading'}")


def _print_field_offices(store: FeedStore[Any, Any], tz: tzinfo | None) -> None:
    snapshot = store.current()
    print(_section("Field Offices"))
    offices = sorted(snapshot.items_by_location.values(), key=lambda office: office.difficulty)
    for office in offices:
        state = "open" if office.is_open else "closed"
        print(f"  {office.stars} Star Field Office in {office.location_name} ({state})")
        print(f"      {office.annexes_remaining} Annexes Left")
    if not offices:
        print("  No field offices")
    print(f"  {format_updated(snapshot, tz) or 'Field Offices loading'}")


def _print_streets() -> None:
    print(_section("Street Cogs"))
    for neighborhood in NEIGHBORHOODS:
        print(f"  {neighborhood.name}")
        for street in neighborhood.streets:
            pct = street.cog_percentages
            print(
                f"    {street.name}: Bossbots {pct.bossbot}% Lawbots {pct.lawbot}% "
                f"Cashbots {pct.cashbot}% Sellbots {pct.sellbot}%"
            )


def _as_json(stores: list[FeedStore[Any, Any]], include_streets: bool) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for store in stores:
        out[store.name] = {
            "state": str(store.state),
            "error": str(store.last_error) if store.last_error else None,
            "snapshot": store.current().model_dump(mode="json"),
        }
    if include_streets:
        out["streets"] = {
            neighborhood.name: {street.name: street.cog_percentages.as_dict() for street in neighborhood.streets}
            for neighborhood in NEIGHBORHOODS
        }
    return out


# ── main ─────────────────────────────────────────────────────


async def _run(args: argparse.Namespace) -> int:
    config = TtrConfig.from_env()
    tz = config.tzinfo()
    exit_code = 0

    async with TtrClient(config) as client:
        stores: list[FeedStore[Any, Any]] = []
        if args.feed in ("all", "invasions"):
            stores.append(client.invasions)
        if args.feed in ("all", "field_offices"):
            stores.append(client.field_offices)

        for store in stores:
            try:
                await store.refresh()
            except TtrRefreshError as exc:
                print(f"{store.name}: {exc}", file=sys.stderr)
                exit_code = 1

        if args.json:
            print(json.dumps(_as_json(stores, args.streets), indent=2))
            return exit_code

        for store in stores:
            if store is client.invasions:
                _print_invasions(store, tz)
            else:
                _print_field_offices(store, tz)
        if args.streets:
            _print_streets()

    return exit_code


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.split("\n", 1)[0])
    parser.add_argument("--feed", choices=("all", "invasions", "field_offices"), default="all")
    parser.add_argument("--streets", action="store_true", help="Print the street cog table")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
