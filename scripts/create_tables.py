"""
Create the order store table in Cloud SQL.

Uses the same connection path as the worker (Cloud SQL Python Connector with
IAM authentication) and the table definition from ordersync.db.tables.

Usage:
    python scripts/create_tables.py [table_name]
"""

import os
import sys

from dotenv import load_dotenv
from sqlalchemy import text

from ordersync.db import DatabaseConnection
from ordersync.db.tables import DEFAULT_ORDERS_TABLE, build_orders_table, metadata

load_dotenv()


def grant_postgres_access(table_name: str):
    """Grant the postgres user access so the table can be viewed in Cloud SQL Studio.

    With IAM authentication the table is owned by the service account.
    """
    print("\n🔐 Granting postgres user access to table...")

    try:
        with DatabaseConnection.get_engine().begin() as conn:
            conn.execute(text("GRANT USAGE ON SCHEMA public TO postgres"))
            conn.execute(
                text(
                    f'GRANT SELECT, INSERT, UPDATE, DELETE ON "{table_name}" TO postgres'
                )
            )
        print("✅ Postgres user access granted")
    except Exception as e:
        print(f"⚠️  Failed to grant postgres access (non-fatal): {e}")


def main():
    print("🚀 ordersync Table Setup")
    print("=" * 50)

    table_name = (
        sys.argv[1] if len(sys.argv) > 1 else os.getenv("ORDERS_TABLE", DEFAULT_ORDERS_TABLE)
    )
    table = build_orders_table(table_name)

    print("\n⚠️  This will create (if missing):")
    print(f"   Table: {table_name}")
    print(f"   Instance: {os.getenv('INSTANCE_CONNECTION_NAME')}")
    print(f"   Database: {os.getenv('DB_NAME', 'ordersync')}")
    print(f"   User: {os.getenv('DB_USER')}")

    response = input("\nProceed? (yes/no): ").strip().lower()
    if response not in ["yes", "y"]:
        print("❌ Cancelled")
        sys.exit(0)

    print("\n🔌 Connecting to Cloud SQL...")
    try:
        DatabaseConnection.initialize()
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    try:
        metadata.create_all(DatabaseConnection.get_engine(), tables=[table])
        print(f"✅ Table {table_name} ready")
        grant_postgres_access(table_name)
    finally:
        DatabaseConnection.close()


if __name__ == "__main__":
    main()
