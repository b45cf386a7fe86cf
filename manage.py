# =============================================================================
# SUPPLIER MINIMAL API - MANAGEMENT CLI
# =============================================================================
# File: manage.py
# Description: Administrative commands: schema creation and claim grants
#
# Usage:
#   python manage.py create-tables
#   python manage.py grant-claim admin@example.com RemoveSupplier
#   python manage.py revoke-claim admin@example.com RemoveSupplier
# =============================================================================

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from auth.service import AuthService
from core.config import settings
from core.exceptions import ApiException
from db.factory import DBFactory


logger = logging.getLogger("manage")


async def create_tables() -> int:
    await DBFactory.create_tables()
    logger.info(f"Tables created ({settings.db_type})")
    return 0


async def grant_claim(email: str, claim_type: str, claim_value: str) -> int:
    adapter = DBFactory.get_db_adapter()
    async with adapter.get_session() as session:
        await AuthService(session).grant_claim(email, claim_type, claim_value)
    return 0


async def revoke_claim(email: str, claim_type: str) -> int:
    adapter = DBFactory.get_db_adapter()
    async with adapter.get_session() as session:
        removed = await AuthService(session).revoke_claim(email, claim_type)
    if removed == 0:
        logger.warning(f"{email} had no {claim_type} claim")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=f"{settings.app_name} management commands")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("create-tables", help="Create all database tables")

    grant = sub.add_parser("grant-claim", help="Attach a claim to a user")
    grant.add_argument("email", help="User e-mail")
    grant.add_argument("claim_type", metavar="TYPE", help="Claim type, e.g. RemoveSupplier")
    grant.add_argument("claim_value", metavar="VALUE", nargs="?", default="", help="Claim value (default empty)")

    revoke = sub.add_parser("revoke-claim", help="Remove all claims of a type from a user")
    revoke.add_argument("email", help="User e-mail")
    revoke.add_argument("claim_type", metavar="TYPE", help="Claim type")

    return ap


async def run(args: argparse.Namespace) -> int:
    try:
        if args.command == "create-tables":
            return await create_tables()
        # Claim commands need the schema in place
        await DBFactory.create_tables()
        if args.command == "grant-claim":
            return await grant_claim(args.email, args.claim_type, args.claim_value)
        return await revoke_claim(args.email, args.claim_type)
    except ApiException as e:
        logger.error(e.message)
        return 1
    finally:
        await DBFactory.disconnect()


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
