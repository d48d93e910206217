"""Domain models: employees, performance reviews and their enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

__all__ = [
    "Role",
    "FunctionTeams",
    "Employee",
    "PerformanceReview",
    "role_to_string",
    "string_to_role",
    "function_teams_to_string",
    "string_to_function_teams",
]


class Role(Enum):
    """Position an employee holds."""

    MANAGER = "Manager"
    BOSS = "Boss"
    SPECIALIST = "Specialist"
    TECHNICIAN = "Technician"

    def __str__(self) -> str:
        return self.value


class FunctionTeams(Enum):
    """Functional team an employee can belong to."""

    HARDWARE = "HARDWARE"
    SOFTWARE = "SOFTWARE"
    MECHANIC = "MECHANIC"
    ENGINEERING = "ENGINEERING"
    PRODUCT = "PRODUCT"

    def __str__(self) -> str:
        return self.value


def role_to_string(role: Role) -> str:
    """Return the display name of a role, or "unknown" for anything else."""
    return role.value if isinstance(role, Role) else "unknown"


def string_to_role(text: str) -> Role | None:
    """Return the role with the given display name, or None if there is none."""
    try:
        return Role(text)
    except ValueError:
        return None


def function_teams_to_string(team: FunctionTeams) -> str:
    """Return the name of a functional team, or "unknown" for anything else."""
    return team.value if isinstance(team, FunctionTeams) else "unknown"


def string_to_function_teams(text: str) -> FunctionTeams | None:
    """Return the functional team with the given name, or None if there is none."""
    try:
        return FunctionTeams(text)
    except ValueError:
        return None


def _as_int(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")


def _as_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if isinstance(value, str):
        return value
    raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")


def _as_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if isinstance(value, bool):
        return value
    raise TypeError(f"{key!r} must be a boolean, not {type(value).__name__}")


@dataclass
class Employee:
    """A member of staff."""

    employee_id: int = 0
    personnel_code: int = 0
    name: str = ""
    hire_date: str = ""
    role: Role = Role.SPECIALIST
    is_active: bool = True
    reports_to: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping used on the wire."""
        result: dict[str, Any] = {
            "employeeId": self.employee_id,
            "name": self.name,
            "hireDate": self.hire_date,
            "personnelCode": self.personnel_code,
            "isActive": self.is_active,
            "role": role_to_string(self.role),
        }
        if self.reports_to is not None:
            result["reportsTo"] = self.reports_to
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """Build an employee from its wire mapping.

        Raises KeyError for a missing field, TypeError for a field of the
        wrong type and ValueError for an unknown role.
        """
        role_name = _as_str(data, "role")
        role = string_to_role(role_name)
        if role is None:
            raise ValueError(f"unknown role: {role_name!r}")
        reports_to = None
        if data.get("reportsTo") is not None:
            reports_to = _as_int(data, "reportsTo")
        return cls(
            employee_id=_as_int(data, "employeeId"),
            personnel_code=_as_int(data, "personnelCode"),
            name=_as_str(data, "name"),
            hire_date=_as_str(data, "hireDate"),
            role=role,
            is_active=_as_bool(data, "isActive"),
            reports_to=reports_to,
        )

    def __str__(self) -> str:
        reports_to = "null" if self.reports_to is None else str(self.reports_to)
        lines = [
            "------------------",
            f"Employee ID: {self.employee_id}",
            f"Personnel Code: {self.personnel_code}",
            f"Name: {self.name}",
            f"Hire Date: {self.hire_date}",
            f"Role: {role_to_string(self.role)}",
            f"Employee Status: {'Active' if self.is_active else 'Not-Active'}",
            f"ReportsTo: {reports_to}",
        ]
        return "\n".join(lines) + "\n"


@dataclass
class PerformanceReview:
    """A rating of one employee by a reviewer."""

    review_id: int = 0
    employee_id: int = 0
    reviewer_id: int = 0
    review_date: str = ""
    overall_rating: float | None = None
    punctuality_rating: float = 0.0
    quality_of_work_rating: float = 0.0
    communication_rating: float = 0.0
    teamwork_rating: float = 0.0
    technical_skills_rating: float = 0.0
    problem_solving_rating: float = 0.0
    creativity_rating: float = 0.0
    adaptability_rating: float = 0.0
    leadership_rating: float = 0.0
    initiative_rating: float = 0.0
    comments: str | None = None

    def __str__(self) -> str:
        lines = [
            f"Review ID : {self.review_id}",
            f"Date of Review : {self.review_date}",
        ]
        if self.overall_rating is not None:
            lines.append(f"Overall Rating : {self.overall_rating:g}")
        lines += [
            f"Punctuality Rating : {self.punctuality_rating:g}",
            f"Quality of Work : {self.quality_of_work_rating:g}",
            f"Communication Rating : {self.communication_rating:g}",
            f"Teamwork Rating : {self.teamwork_rating:g}",
            f"Technical Skill Rating : {self.technical_skills_rating:g}",
            f"Problem Solving : {self.problem_solving_rating:g}",
            f"Creativity Rating : {self.creativity_rating:g}",
            f"Adaptibility Rating : {self.adaptability_rating:g}",
            f"Leadership Rating : {self.leadership_rating:g}",
            f"Initiative Rating : {self.initiative_rating:g}",
        ]
        if self.comments is not None:
            lines += ["Comments : ", self.comments]
        return "\n".join(lines) + "\n"