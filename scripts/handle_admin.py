#!/usr/bin/env python3
"""
Resource id administration script
Inspect, set, test, clear and re-fetch the stored CrudCrud resource id
"""

import asyncio
import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from core.config import get_settings
from core.logger import setup_logging
from campaign_service.factory import CampaignServiceFactory
from campaign_service.handles import ManualProvisioner
from campaign_service.messages import user_message
from campaign_service.models import ProbeResult
from campaign_service.protocols import CampaignServiceError


async def show_info(factory: CampaignServiceFactory):
    """Show the stored resource id"""
    info = factory.manager.info()
    if info is None:
        print("No resource id stored")
        return
    print(f"Resource ID: {info.handle}")
    print(f"Storage key: {info.storage_key}")


async def set_handle(factory: CampaignServiceFactory, handle: str):
    """Store a resource id entered by hand"""
    factory.manager.override(handle)
    print(f"Resource ID set to: {handle.strip()}")


async def test_handle(factory: CampaignServiceFactory, handle: str = None) -> bool:
    """Probe a resource id (the stored one by default)"""
    result = await factory.manager.test(handle)
    if result == ProbeResult.LIVE:
        print("✅ Resource ID is valid")
    elif result == ProbeResult.EXPIRED:
        print("❌ Resource ID has expired")
    else:
        print("⚠️  Could not confirm the resource ID; it will still be used")
    return result.usable


async def clear_handle(factory: CampaignServiceFactory):
    """Remove the stored resource id"""
    factory.manager.invalidate()
    print("Resource ID cleared. A new one will be fetched on next request.")


async def fetch_handle(factory: CampaignServiceFactory):
    """Discard the stored resource id and provision a new one"""
    handle = await factory.manager.refresh()
    print(f"New resource ID: {handle}")


async def list_campaigns(factory: CampaignServiceFactory, user_id: str):
    """List the campaigns one user owns"""
    campaigns = await factory.service.list_campaigns(user_id)
    print(f"Found {len(campaigns)} campaigns for {user_id}:")
    print("-" * 80)
    for campaign in campaigns:
        print(
            f"[{campaign.id}] {campaign.name} | ${campaign.budget_goal_usd:,.2f} | "
            f"{campaign.start_date} -> {campaign.end_date}"
        )


async def main():
    """Entry point"""
    parser = argparse.ArgumentParser(description="CrudCrud resource id administration")
    parser.add_argument(
        "--manual", action="store_true",
        help="Ask for a resource id instead of scraping the CrudCrud homepage",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show the stored resource id")

    set_parser = subparsers.add_parser("set", help="Store a resource id")
    set_parser.add_argument("handle", help="32+ character hex resource id")

    test_parser = subparsers.add_parser("test", help="Check a resource id against CrudCrud")
    test_parser.add_argument("handle", nargs="?", help="Resource id (defaults to the stored one)")

    subparsers.add_parser("clear", help="Remove the stored resource id")

    subparsers.add_parser("fetch", help="Fetch a fresh resource id")

    list_parser = subparsers.add_parser("list", help="List campaigns for a user")
    list_parser.add_argument("--user", required=True, help="Owner user id, e.g. user_A")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    settings = get_settings()
    logger = setup_logging(settings.logging)
    logger.debug(f"Environment: {settings.environment}")

    provisioner = ManualProvisioner() if args.manual else None
    factory = CampaignServiceFactory(settings.backing_store, provisioner=provisioner)
    await factory.initialize()

    try:
        if args.command == "info":
            await show_info(factory)

        elif args.command == "set":
            await set_handle(factory, args.handle)

        elif args.command == "test":
            if not await test_handle(factory, args.handle):
                sys.exit(1)

        elif args.command == "clear":
            await clear_handle(factory)

        elif args.command == "fetch":
            await fetch_handle(factory)

        elif args.command == "list":
            await list_campaigns(factory, args.user)

    except CampaignServiceError as e:
        print(f"Error: {user_message(e)} ({e})")
        sys.exit(1)
    finally:
        await factory.close()


if __name__ == "__main__":
    asyncio.run(main())
