"""Offline checks for a results database.

Usage: python -m faststats.scripts.audit_results path/to/results.db [--sweep]
"""
import argparse
import logging

import pandas as pd

from faststats.exceptions import FastStatsError
from faststats.util.db_util import ATTEMPT_COLUMNS, Database

logger = logging.getLogger(__name__)


def attempt_encoding_report(database):
    """
    Count how each attempt column encodes its values.

    Misses are expected to be zero or negative; this shows which one the data
    actually uses.

    Returns:
        DataFrame: one row per attempt column with positive, zero, negative
        and null counts.
    """
    df = pd.DataFrame(database.get_attempts(), columns=["lifter", "hometown", *ATTEMPT_COLUMNS])

    rows = []
    for column in ATTEMPT_COLUMNS:
        values = pd.to_numeric(df[column], errors="coerce")
        rows.append([
            column,
            int((values > 0).sum()),
            int((values == 0).sum()),
            int((values < 0).sum()),
            int(values.isna().sum()),
        ])
    return pd.DataFrame(rows, columns=["column", "positive", "zero", "negative", "null"])


def sweep_identities(app, database):
    """Aggregate every lifter in the database and return those that fail."""
    from faststats.queries import aggregate_results

    failures = []
    with app.app_context():
        for lifter, hometown in database.get_identities():
            try:
                aggregate_results(lifter, hometown)
            except FastStatsError as exc:
                logger.error("failed to aggregate %r, %r: %s", lifter, hometown, exc)
                failures.append((lifter, hometown, str(exc)))
    return failures


def main(argv=None):
    parser = argparse.ArgumentParser(description="Audit a weightlifting results database.")
    parser.add_argument("db_path")
    parser.add_argument("--sweep", action="store_true", help="aggregate every lifter and report failures")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    database = Database(args.db_path)
    print(attempt_encoding_report(database).to_string(index=False))

    if args.sweep:
        from config import Config
        from faststats import create_app

        class AuditConfig(Config):
            SQLALCHEMY_DATABASE_URI = f"sqlite:///file:{database.db_path}?mode=ro&uri=true"

        failures = sweep_identities(create_app(AuditConfig), database)
        print(f"{len(failures)} lifters failed to aggregate")
        for lifter, hometown, message in failures:
            print(f"  {lifter}, {hometown}: {message}")
        return 1 if failures else 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
