"""SQLite storage for employees and performance reviews."""

from __future__ import annotations

import sqlite3
from types import TracebackType
from typing import Iterable

from .models import Employee, PerformanceReview, role_to_string, string_to_role

__all__ = ["DatabaseManager"]

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS employees ("
    "employee_id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT NOT NULL,"
    "role TEXT NOT NULL CHECK(role IN ('Manager', 'Boss', 'Specialist', 'Technician')),"
    "reports_to INT,"
    "hire_date TEXT,"
    "personnel_code INT,"
    "is_active INT DEFAULT 1,"
    "FOREIGN KEY (reports_to) REFERENCES employees(employee_id)"
    ");",
    "CREATE TABLE IF NOT EXISTS performance_reviews ("
    "review_id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "employee_id INTEGER NOT NULL,"
    "reviewer_id INTEGER NOT NULL,"
    "review_date DATE NOT NULL DEFAULT CURRENT_DATE,"
    "overall_rating REAL,"
    "comments TEXT,"
    "punctuality_rating REAL CHECK(punctuality_rating BETWEEN 1 AND 10),"
    "quality_of_work_rating REAL CHECK(quality_of_work_rating BETWEEN 1 AND 10),"
    "teamwork_rating REAL CHECK(teamwork_rating BETWEEN 1 AND 10),"
    "communication_rating REAL CHECK(communication_rating BETWEEN 1 AND 10),"
    "problem_solving_rating REAL CHECK(problem_solving_rating BETWEEN 1 AND 10),"
    "creativity_rating REAL CHECK(creativity_rating BETWEEN 1 AND 10),"
    "technical_skills_rating REAL CHECK(technical_skills_rating BETWEEN 1 AND 10),"
    "adaptability_rating REAL CHECK(adaptability_rating BETWEEN 1 AND 10),"
    "leadership_rating REAL CHECK(leadership_rating BETWEEN 1 AND 10),"
    "initiative_rating REAL CHECK(initiative_rating BETWEEN 1 AND 10),"
    "FOREIGN KEY (employee_id) REFERENCES employees(employee_id),"
    "FOREIGN KEY (reviewer_id) REFERENCES employees(employee_id)"
    ");",
    "CREATE INDEX IF NOT EXISTS idx_employee_name ON employees(name);",
    "CREATE INDEX IF NOT EXISTS idx_employee_role ON employees(role);",
    "CREATE INDEX IF NOT EXISTS idx_review_employee_id ON performance_reviews(employee_id);",
    "CREATE INDEX IF NOT EXISTS idx_review_reviewer_id ON performance_reviews(reviewer_id);",
    "CREATE INDEX IF NOT EXISTS idx_review_date ON performance_reviews(review_date);",
)

_EMPLOYEE_COLUMNS = "employee_id, name, role, reports_to, hire_date, personnel_code, is_active"

_REVIEW_RATINGS = (
    "punctuality_rating",
    "quality_of_work_rating",
    "teamwork_rating",
    "communication_rating",
    "problem_solving_rating",
    "creativity_rating",
    "technical_skills_rating",
    "adaptability_rating",
    "leadership_rating",
    "initiative_rating",
)

_REVIEW_COLUMNS = ", ".join(
    (
        "review_id",
        "employee_id",
        "reviewer_id",
        "review_date",
        "overall_rating",
        "comments",
        *_REVIEW_RATINGS,
    )
)


def _require_positive(value: int, what: str) -> None:
    if value <= 0:
        raise ValueError(f"invalid {what}: {value}")


def _employee_from_row(row: sqlite3.Row) -> Employee:
    role = string_to_role(row["role"])
    if role is None:
        raise ValueError(f"unknown role in database: {row['role']!r}")
    return Employee(
        employee_id=row["employee_id"],
        personnel_code=row["personnel_code"] or 0,
        name=row["name"],
        hire_date=row["hire_date"] or "",
        role=role,
        is_active=bool(row["is_active"]),
        reports_to=row["reports_to"],
    )


def _review_from_row(row: sqlite3.Row) -> PerformanceReview:
    ratings = {name: float(row[name] or 0.0) for name in _REVIEW_RATINGS}
    overall = row["overall_rating"]
    return PerformanceReview(
        review_id=row["review_id"],
        employee_id=row["employee_id"],
        reviewer_id=row["reviewer_id"],
        review_date=str(row["review_date"]),
        overall_rating=None if overall is None else float(overall),
        comments=row["comments"],
        **ratings,
    )


class DatabaseManager:
    """Stores employees and their performance reviews in an SQLite database.

    Invalid identifiers raise ValueError; database failures raise the
    corresponding sqlite3 error.
    """

    def __init__(self, db_address: str) -> None:
        self._conn = sqlite3.connect(db_address)
        self._conn.row_factory = sqlite3.Row
        self.initialize_database()

    def initialize_database(self) -> None:
        """Create the tables and indexes if they do not exist yet."""
        with self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    # ---- Employee management ----

    def add_employee(self, employee: Employee) -> None:
        """Insert a new employee with its own identifier."""
        _require_positive(employee.employee_id, "employee id")
        with self._conn:
            self._conn.execute(
                f"INSERT INTO employees ({_EMPLOYEE_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?);",
                (
                    employee.employee_id,
                    employee.name,
                    role_to_string(employee.role),
                    employee.reports_to,
                    employee.hire_date,
                    employee.personnel_code,
                    int(employee.is_active),
                ),
            )

    def get_employee(self, employee_id: int) -> Employee | None:
        """Return the employee with the given id, or None if there is none."""
        _require_positive(employee_id, "employee id")
        row = self._conn.execute(
            f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE employee_id = ?;",
            (employee_id,),
        ).fetchone()
        return None if row is None else _employee_from_row(row)

    def get_all_employees(self) -> list[Employee]:
        """Return every stored employee."""
        return self._employees(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees;", ())

    def get_employees_reporting_to_head(self, reviewer_id: int) -> list[Employee]:
        """Return the employees who report to the given head."""
        _require_positive(reviewer_id, "reviewer id")
        return self._employees(
            f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE reports_to = ?;",
            (reviewer_id,),
        )

    def update_employee(self, employee: Employee) -> None:
        """Overwrite the stored fields of an existing employee."""
        _require_positive(employee.employee_id, "employee id")
        with self._conn:
            self._conn.execute(
                "UPDATE employees SET name = ?, role = ?, reports_to = ?, hire_date = ?, "
                "personnel_code = ?, is_active = ? WHERE employee_id = ?;",
                (
                    employee.name,
                    role_to_string(employee.role),
                    employee.reports_to,
                    employee.hire_date,
                    employee.personnel_code,
                    int(employee.is_active),
                    employee.employee_id,
                ),
            )

    def deactivate_employee(self, employee_id: int) -> None:
        """Mark an employee as no longer active."""
        _require_positive(employee_id, "employee id")
        with self._conn:
            self._conn.execute(
                "UPDATE employees SET is_active = ? WHERE employee_id = ?;",
                (0, employee_id),
            )

    # ---- Performance review management ----

    def add_performance_review(self, review: PerformanceReview) -> None:
        """Insert a review; its date is set by the database to the current date."""
        columns = ("review_id", "employee_id", "reviewer_id", "overall_rating", "comments", *_REVIEW_RATINGS)
        values = (
            review.review_id,
            review.employee_id,
            review.reviewer_id,
            review.overall_rating,
            review.comments,
            *(getattr(review, name) for name in _REVIEW_RATINGS),
        )
        placeholders = ", ".join("?" for _ in columns)
        with self._conn:
            self._conn.execute(
                f"INSERT INTO performance_reviews ({', '.join(columns)}) VALUES ({placeholders});",
                values,
            )

    def get_performance_review(self, review_id: int) -> PerformanceReview | None:
        """Return the review with the given id, or None if there is none."""
        _require_positive(review_id, "review id")
        row = self._conn.execute(
            f"SELECT {_REVIEW_COLUMNS} FROM performance_reviews WHERE review_id = ?;",
            (review_id,),
        ).fetchone()
        return None if row is None else _review_from_row(row)

    def get_performance_for_employee(self, employee_id: int) -> PerformanceReview | None:
        """Return the latest stored review of an employee, or None if there is none."""
        row = self._conn.execute(
            f"SELECT {_REVIEW_COLUMNS} FROM performance_reviews WHERE employee_id = ? "
            "ORDER BY rowid DESC LIMIT 1;",
            (employee_id,),
        ).fetchone()
        return None if row is None else _review_from_row(row)

    # ---- Lifecycle ----

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> "DatabaseManager":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _employees(self, query: str, params: Iterable[object]) -> list[Employee]:
        return [_employee_from_row(row) for row in self._conn.execute(query, tuple(params))]