"""Command that checks that a database connection can be established."""

from __future__ import annotations

import argparse
import logging
import sys

from idmstore.database import ConfigError, DbError, new_db

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Connect using the dotenv file and report the outcome."""
    parser = argparse.ArgumentParser(description="Check the database connection.")
    parser.add_argument("env", nargs="?", default=".env", help="dotenv file with DB settings")
    args = parser.parse_args(argv)

    try:
        db = new_db(args.env)
    except (ConfigError, DbError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        print("Database connection established")
    finally:
        try:
            db.close()
        except Exception as exc:  # closing must not hide the outcome
            log.error("error closing db: %s", exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())