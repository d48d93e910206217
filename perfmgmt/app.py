"""Demonstration run: fill a local database and query the employee server."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Sequence

from .database import DatabaseManager
from .models import Employee, PerformanceReview, Role
from .network import NetworkManager

__all__ = ["run_demo", "main"]

DEFAULT_DB_PATH = "databaseExample.db"
DEFAULT_SERVER_URL = "127.0.0.1:5000"

_HIRE_DATE = "20200101"


def _demo_employees() -> list[Employee]:
    return [
        Employee(1, 20251207, "George Michael", _HIRE_DATE, Role.BOSS, True, None),
        Employee(2, 20251208, "John Nash", _HIRE_DATE, Role.SPECIALIST, True, 1),
        Employee(3, 20251209, "Albert Einstein", _HIRE_DATE, Role.SPECIALIST, True, 1),
        Employee(4, 20251210, "Mahmoud Hesabi", _HIRE_DATE, Role.SPECIALIST, True, 1),
    ]


def _demo_review() -> PerformanceReview:
    return PerformanceReview(
        review_id=1,
        employee_id=2,
        reviewer_id=1,
        review_date="2025-04-27",
        overall_rating=9.5,
        punctuality_rating=9.0,
        quality_of_work_rating=8.5,
        communication_rating=8.0,
        teamwork_rating=9.0,
        technical_skills_rating=9.9,
        problem_solving_rating=10.0,
        creativity_rating=10.0,
        adaptability_rating=8.0,
        leadership_rating=7.0,
        initiative_rating=10.0,
        comments="He is good!",
    )


def _report(tag: str, error: Exception) -> None:
    print(f"[{tag}] : {error}", file=sys.stderr)


def run_demo(db_path: str, server_url: str) -> list[Employee] | None:
    """Populate the database at db_path and fetch employees from server_url.

    Errors are reported on stderr and do not stop the run. Returns the
    employees fetched from the server, or None when fetching failed.
    """
    with DatabaseManager(db_path) as db:
        for employee in _demo_employees():
            try:
                db.add_employee(employee)
            except (sqlite3.Error, ValueError) as error:
                _report("addEmployee", error)

        try:
            db.get_employee(0)
        except (sqlite3.Error, ValueError) as error:
            _report("getEmployee", error)

        db.get_all_employees()

        try:
            db.deactivate_employee(4)
        except (sqlite3.Error, ValueError) as error:
            _report("deactivateEmployee", error)

        try:
            db.add_performance_review(_demo_review())
        except sqlite3.Error as error:
            _report("addPerformanceReview", error)

        db.get_performance_for_employee(2)

    try:
        employees = NetworkManager(server_url).fetch_all_employees()
    except (OSError, ValueError, KeyError, TypeError) as error:
        _report("fetchAllEmployees", error)
        return None

    for employee in employees:
        print(employee, end="\n\n")
    return employees


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="perfmgmt",
        description="Fill a demo employee database and query the employee server.",
    )
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="path of the SQLite database")
    parser.add_argument("--server", default=DEFAULT_SERVER_URL, help="base URL of the employee server")
    args = parser.parse_args(argv)
    run_demo(args.db, args.server)
    return 0


if __name__ == "__main__":
    sys.exit(main())