"""Manual check against the live tracking portal.

Usage:
    python -m iranpost <tracking_number> [tracking_number ...]

Examples:
    python -m iranpost 123456789012345678901234
"""

import asyncio
import json
import logging
import sys
from typing import List

import aiohttp

from .app.dates import format_am_pm, format_relative_day
from .post.adapter import IranPostAdapter, IranPostBackend
from .post.client import IranPostClient


def print_section(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 80)
    print(f"  {title}")
    print("=" * 80)


async def check_tracking(backend: IranPostBackend, tracking_number: str) -> bool:
    """Track one number and print its events."""
    print_section(f"Tracking: {tracking_number}")
    result = await backend.track(tracking_number)
    if not result.found:
        print("✗ No events found")
        return False

    print(f"✓ Found {len(result.events)} events")
    for event in result.events:
        print(f"\n{event.step_number}. {event.description}")
        print(f"   Date: {event.event_date} ({format_relative_day(event.event_date)})")
        print(f"   Time: {event.event_time} ({format_am_pm(event.event_time)})")
        print(f"   Location: {event.location or 'N/A'}")
        if event.date_inferred:
            print("   (date could not be parsed, today was used)")

    print("\nAs stored:")
    print(json.dumps([event.to_dict() for event in result.events], indent=2, ensure_ascii=False))
    return True


async def main(tracking_numbers: List[str]) -> int:
    """Run the pipeline for each tracking number in turn."""
    found = 0
    async with aiohttp.ClientSession() as session:
        backend = IranPostBackend(IranPostClient(session), IranPostAdapter())
        for tracking_number in tracking_numbers:
            if await check_tracking(backend, tracking_number):
                found += 1

    print_section(f"Done: {found}/{len(tracking_numbers)} found")
    return 0 if found else 1


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(asyncio.run(main(sys.argv[1:])))
