"""
Script to initialize the database with tables.
"""
import logging

from yavin.db.init_db import init_db


def init() -> None:
    """Initialize database."""
    logging.basicConfig(level=logging.INFO, format='%(levelname)s:\t%(name)s\t%(message)s')
    print("Creating database tables...")
    init_db()
    print("✅ Database tables created")


if __name__ == "__main__":
    init()
