#!/usr/bin/env python3
"""
RentQuote management CLI.

Usage:
    python manage.py serve               Start the API server
    python manage.py migrate             Apply pending database migrations
    python manage.py db-status           Show applied and pending migrations
    python manage.py verify              Run database integrity checks
    python manage.py availability ID     Print an item's availability breakdown
    python manage.py quote-risk ID       Print a quote's lines and risk
"""

import argparse
import asyncio
import json
import sys

from src.config import configure_logging, get_settings


def cmd_serve(args: argparse.Namespace) -> None:
    """Start uvicorn in the foreground."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port

    print(f"Starting server on {host}:{port}...")
    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending migrations."""
    from src.infrastructure.storage.sqlite.migrations import run_migrations

    results = asyncio.run(run_migrations(create_backup_before=not args.no_backup))
    if not results:
        print("Database is up to date.")
        return

    for result in results:
        mark = "OK  " if result.success else "FAIL"
        print(f"  [{mark}] v{result.version} {result.name} ({result.execution_time_ms} ms)")
        if result.error:
            print(f"         {result.error}")

    if not all(r.success for r in results):
        sys.exit(1)


def cmd_db_status(args: argparse.Namespace) -> None:
    """Show migration status."""
    from src.infrastructure.storage.sqlite.migrations import get_migration_status

    status = asyncio.run(get_migration_status())
    print(json.dumps(status, indent=2))


def cmd_verify(args: argparse.Namespace) -> None:
    """Run integrity checks and exit non-zero on any failure."""
    from src.infrastructure.storage.sqlite.migrations import verify_schema_integrity

    checks = asyncio.run(verify_schema_integrity())
    failed = False
    for check in checks:
        print(f"  {check['check']:<16} {check['status']}")
        failed = failed or check["status"] != "PASS"

    if failed:
        sys.exit(1)


async def _item_availability(item_id: str) -> dict:
    from src.application.services import get_availability_service
    from src.infrastructure.storage.sqlite import close_pool

    try:
        service = await get_availability_service()
        breakdown = await service.get_item_availability_breakdown(item_id)
        return breakdown.model_dump()
    finally:
        await close_pool()


def cmd_availability(args: argparse.Namespace) -> None:
    """Print the availability breakdown of one item."""
    breakdown = asyncio.run(_item_availability(args.item_id))
    print(json.dumps({"item_id": args.item_id, **breakdown}, indent=2))


async def _quote_risk(quote_id: str) -> dict:
    from src.application.use_cases import GetQuoteDetailUseCase
    from src.infrastructure.storage.sqlite import close_pool

    try:
        use_case = GetQuoteDetailUseCase()
        result = await use_case.execute(quote_id)
        return use_case.to_response(result).model_dump(mode="json")
    finally:
        await close_pool()


def cmd_quote_risk(args: argparse.Namespace) -> None:
    """Print a quote's lines with their risk, and the quote-level risk."""
    from src.core.exceptions import QuoteNotFoundError

    try:
        detail = asyncio.run(_quote_risk(args.quote_id))
    except QuoteNotFoundError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    for line in detail["items"]:
        print(
            f"  {line['risk']:<6} {line['item_name'] or line['item_id']}: "
            f"requested {line['quantity']}, available {line['breakdown']['available']}, "
            f"buffer {line['buffer']}"
        )
    print(f"Quote risk: {detail['risk']}  total: {detail['total']:.2f}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="RentQuote management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: from settings)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: from settings)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply pending migrations")
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip the pre-migration backup")
    p_migrate.set_defaults(func=cmd_migrate)

    # db-status
    p_status = sub.add_parser("db-status", help="Show migration status")
    p_status.set_defaults(func=cmd_db_status)

    # verify
    p_verify = sub.add_parser("verify", help="Run database integrity checks")
    p_verify.set_defaults(func=cmd_verify)

    # availability
    p_avail = sub.add_parser("availability", help="Show an item's availability breakdown")
    p_avail.add_argument("item_id", help="Inventory item ID")
    p_avail.set_defaults(func=cmd_availability)

    # quote-risk
    p_risk = sub.add_parser("quote-risk", help="Show a quote's risk")
    p_risk.add_argument("quote_id", help="Quote ID")
    p_risk.set_defaults(func=cmd_quote_risk)

    args = parser.parse_args()
    configure_logging("DEBUG" if args.verbose else None)
    args.func(args)


if __name__ == "__main__":
    main()
