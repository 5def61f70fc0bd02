# scripts/setup/init_db.py
"""
Initialize database — creates the vehicles and movements tables.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from app.database import create_tables, engine
from app.config import settings


def main():
    print("Vehicle Movements DB Initialization")
    print("=" * 40)
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except SQLAlchemyError as e:
        print(f"Cannot connect to database: {e}")
        print("\nCheck DATABASE_URL in .env and that the server is running.")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    inspector = inspect(engine)
    tables = sorted(inspector.get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        indexes = [ix["name"] for ix in inspector.get_indexes(t)]
        print(f"   - {t}  indexes={indexes}")

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.HOST} --port {settings.PORT} --reload")


if __name__ == "__main__":
    main()
