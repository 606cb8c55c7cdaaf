"""Prepare the database before the API process starts.

A fresh database gets every table created from the models and Alembic is
stamped to head; an existing one is upgraded through the migrations.
Pass ``--seed`` to load the demo skills, credit packages and accounts.
"""

import argparse
import subprocess
import sys

from sqlalchemy import inspect

from livefit.db.base import Base
from livefit.db.seed import seed_demo_data
from livefit.db.session import SessionLocal, engine
from livefit.models import Coach, Course, CreditPackage, Skill, User  # noqa: F401


def prepare_schema() -> None:
    tables = inspect(engine).get_table_names()

    if "users" not in tables:
        print("Fresh database detected, creating all tables...")
        Base.metadata.create_all(bind=engine)
        subprocess.check_call([sys.executable, "-m", "alembic", "stamp", "head"])
        print("Tables created and Alembic stamped to head.")
    else:
        print("Existing database, running migrations...")
        subprocess.check_call([sys.executable, "-m", "alembic", "upgrade", "head"])
        print("Migrations complete.")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="insert demo data")
    args = parser.parse_args()

    prepare_schema()
    if args.seed:
        with SessionLocal() as db:
            seed_demo_data(db)
        print("Demo data seeded.")


if __name__ == "__main__":
    main()
