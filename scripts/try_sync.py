#!/usr/bin/env python3
"""
Sólon Sync Script

Runs one real sync against Gemini from the command line, without starting
the API server. Useful to eyeball the grounded reply and the interpreted
result for a given location.

Usage:
    python scripts/try_sync.py --location "Ciudad de México" --skills "Ventas"
    python scripts/try_sync.py --location "Los Angeles, CA" --country "Estados Unidos" \\
        --lat 34.05 --lng -118.24
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from solon.agents.solon.interpreter import SolonSyncError
from solon.schemas.profile import GeoCoordinates, UserProfile
from solon.schemas.solon import SolonResult
from solon.services.solon_service import sync_patterns
from solon.utils.clock import Clock

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_result(result: SolonResult) -> None:
    """Pretty print the interpreted result."""
    print("\n" + "=" * 60)
    print(f"✅ {len(result.profile_jobs)} profile job(s), {len(result.nearby_jobs)} nearby job(s)")
    print("=" * 60)

    for i, job in enumerate(result.profile_jobs, 1):
        print(f"--- Job #{i} ---")
        print(f"  Company:   {job.company_name}")
        print(f"  Address:   {job.address}")
        print(f"  Contact:   {job.contact_info or '-'}")
        print(f"  Method:    {job.application_method}")
        print(f"  Urgency:   {job.urgency}")
        print(f"  Reqs:      {', '.join(job.requirements) or '-'}")
        print()

    if result.investment is None:
        print("No investment strategy returned.\n")
    else:
        print(f"Investment from {result.investment.initial_capital}: {result.investment.methodology}")
        for sector in result.investment.sectors:
            print(f"  [{sector.sector}] {len(sector.tips)} tip(s)")
        print()

    if result.sources:
        print("Sources:")
        for uri in result.sources:
            print(f"  - {uri}")


async def run_sync(profile: UserProfile) -> None:
    if not os.getenv("GOOGLE_API_KEY") and not os.getenv("API_KEY"):
        print("\n⚠️  ERROR: GOOGLE_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GOOGLE_API_KEY=your-gemini-api-key")
        return

    print(f"\nLocation: {profile.location}, {profile.country}")
    print(f"Skills:   {profile.skills or '-'}")
    print("\nCalling Gemini API (with Google Search + Google Maps grounding)...")

    try:
        result = await sync_patterns(profile, Clock().now())
    except SolonSyncError as e:
        print(f"\n❌ {e.message}\n")
        return

    print_result(result)


def main():
    parser = argparse.ArgumentParser(
        description="Run one Sólon sync against Gemini",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--location", "-l", type=str, required=True, help="City, state or postal code")
    parser.add_argument(
        "--country", "-c",
        type=str,
        default="México",
        choices=["México", "Estados Unidos"],
        help="Country (default: México)"
    )
    parser.add_argument("--skills", "-s", type=str, default="", help="Free-text skills")
    parser.add_argument("--lat", type=float, help="Latitude for the maps location bias")
    parser.add_argument("--lng", type=float, help="Longitude for the maps location bias")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    coordinates = None
    if args.lat is not None and args.lng is not None:
        coordinates = GeoCoordinates(latitude=args.lat, longitude=args.lng)

    profile = UserProfile(
        country=args.country,
        location=args.location,
        skills=args.skills,
        coordinates=coordinates,
    )
    asyncio.run(run_sync(profile))


if __name__ == "__main__":
    main()
