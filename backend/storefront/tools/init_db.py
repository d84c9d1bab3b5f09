"""
CLI to create the database tables for the configured DATABASE_URL.

- Imports every model so all tables are registered.
- Creates missing tables; with --drop, drops all tables first.
- Prints JSON with fields: {"database_url": str, "tables": [str, ...], "dropped": bool}.

Usage examples:
  python -m storefront.tools.init_db
  DATABASE_URL=postgresql+psycopg://user:pw@localhost/shop python -m storefront.tools.init_db --drop
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from storefront.core.config import get_settings
from storefront.core.logging import init_logging
from storefront.db.base import Base, import_all_models
from storefront.db.session import Database, redact_url


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the storefront database tables.")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (defaults to DATABASE_URL / DB_URL from the environment).",
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop all tables before creating them (destroys data).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    init_logging(settings.log_level)

    database = Database(args.database_url or settings.database_url, create_tables=False)
    database.init()
    try:
        import_all_models()
        if args.drop:
            Base.metadata.drop_all(bind=database.engine)
        Base.metadata.create_all(bind=database.engine)
        tables = sorted(Base.metadata.tables)
    finally:
        database.close()

    print(json.dumps({"database_url": redact_url(database.url), "tables": tables, "dropped": bool(args.drop)}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
