#!/usr/bin/env python3
"""CLI for storefront management tasks.

Usage:
    python -m storefront.cli <command>

Commands:
    migrate   Create all tables
    rollback  Drop all tables
    seed      Load the JSON seed files into the database
    serve     Run the API server
"""

import argparse
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront import models
from storefront.config import SEEDS_DIR, configure_logging, get_settings
from storefront.database import Base, get_engine, get_session_factory, initialize_database

logger = logging.getLogger(__name__)


def _load_seed_file(path: Path) -> list[dict[str, Any]]:
    with path.open(encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array")
    return records


def seed_users(session: Session, records: list[dict[str, Any]]) -> int:
    """Insert users whose email is not taken by an active user. Passwords are hashed."""
    from storefront.infrastructure.identity.services.password_service import hash_password

    created = 0
    for record in records:
        stmt = select(models.User.id).where(
            models.User.email == record["email"], models.User.deleted_at.is_(None)
        )
        if session.execute(stmt).scalar_one_or_none() is not None:
            logger.info("Skipping existing user %s", record["email"])
            continue

        session.add(
            models.User(
                name=record["name"],
                email=record["email"],
                password=hash_password(record["password"]),
                phone_number=record.get("phone_number", ""),
                address=record.get("address", ""),
                role=record.get("role", "user"),
            )
        )
        created += 1

    session.commit()
    return created


def seed_products(session: Session, records: list[dict[str, Any]]) -> int:
    """Insert products whose merk is not taken by an active product."""
    created = 0
    for record in records:
        stmt = select(models.Product.id).where(
            models.Product.merk == record["merk"], models.Product.deleted_at.is_(None)
        )
        if session.execute(stmt).scalar_one_or_none() is not None:
            logger.info("Skipping existing product %s", record["merk"])
            continue

        session.add(
            models.Product(
                name=record["name"],
                description=record["description"],
                merk=record["merk"],
                material=record.get("material", ""),
                price=Decimal(str(record["price"])),
            )
        )
        created += 1

    session.commit()
    return created


def cmd_migrate() -> int:
    logger.info("Creating tables...")
    Base.metadata.create_all(bind=get_engine())
    logger.info("Migrations complete")
    return 0


def cmd_rollback() -> int:
    logger.info("Dropping tables...")
    Base.metadata.drop_all(bind=get_engine())
    logger.info("Rollback complete")
    return 0


def cmd_seed(seeds_dir: Path = SEEDS_DIR) -> int:
    session_factory = get_session_factory(get_settings())
    with session_factory() as session:
        users = seed_users(session, _load_seed_file(seeds_dir / "users.json"))
        products = seed_products(session, _load_seed_file(seeds_dir / "products.json"))
    logger.info("Seeded %d users and %d products", users, products)
    return 0


def cmd_serve() -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run("storefront.main:app", host=settings.HOST, port=settings.PORT)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="storefront management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("migrate", help="Create all tables")
    subparsers.add_parser("rollback", help="Drop all tables")
    seed_parser = subparsers.add_parser("seed", help="Load the JSON seed files")
    seed_parser.add_argument(
        "--dir", type=Path, default=SEEDS_DIR, help="Directory holding users.json and products.json"
    )
    subparsers.add_parser("serve", help="Run the API server")

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    if args.command == "serve":
        return cmd_serve()

    initialize_database(settings)
    if args.command == "migrate":
        return cmd_migrate()
    elif args.command == "rollback":
        return cmd_rollback()
    elif args.command == "seed":
        return cmd_seed(args.dir)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
