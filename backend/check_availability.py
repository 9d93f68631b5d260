#!/usr/bin/env python3
"""
Check unavailable dates for one category straight from the Mews Connector API
Usage: python check_availability.py [category_id] [start_date] [end_date] [--json]
Example: python check_availability.py 0b1c8e2f-4a7d-4f0e-9c3b-1a2b3c4d5e6f 2025-04-01 2025-04-30
"""

import asyncio
import sys
import os
import json
import argparse
import logging

from dotenv import load_dotenv

# Add the backend directory to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from availability_proxy.api.validation import parse_availability_request
from availability_proxy.core import AvailabilityProxyError, Settings, load_upstream_config
from availability_proxy.services import AvailabilityResolver


async def check_availability(category_id: str, start_date: str, end_date: str, as_json: bool = False):
    """Resolve and print unavailable dates for one category"""
    config = load_upstream_config(Settings())
    query = parse_availability_request(
        {"categoryId": category_id, "startDate": start_date, "endDate": end_date}
    )

    result = await AvailabilityResolver(config).resolve(query)

    if as_json:
        print(json.dumps(result.model_dump(), indent=2))
        return result

    print(f"Category: {category_id}")
    print(f"Dates: {start_date} to {end_date}")
    print(f"Day start: {config.day_start.isoformat()} {config.timezone.key}")
    print("=" * 60)
    if not result.unavailable:
        print("All dates available")
    for day in result.unavailable:
        print(day)

    return result

def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Check unavailable dates for a category via the Mews Connector API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python check_availability.py <category-id> 2025-04-01 2025-04-30
  python check_availability.py <category-id> 2025-04-01 2025-04-30 --json
        """
    )

    parser.add_argument("category_id", help="Mews resource category ID")
    parser.add_argument("start_date", help="First date (YYYY-MM-DD)")
    parser.add_argument("end_date", help="Last date, inclusive (YYYY-MM-DD)")
    parser.add_argument("--json", action="store_true", help="Print the JSON response instead of a list")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    return parser.parse_args()

async def main():
    """Main function with command line argument parsing"""
    args = parse_args()
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        await check_availability(args.category_id, args.start_date, args.end_date, as_json=args.json)
    except AvailabilityProxyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    asyncio.run(main())
