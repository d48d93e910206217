# perfmgmt

`perfmgmt` keeps records of employees and their performance reviews in a SQLite database. It also has a small client that reads employee records from a remote HTTP API. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Models

`perfmgmt.models` holds the data types:

- `Role` is one of `Manager`, `Boss`, `Specialist` or `Technician`.
- `FunctionTeams` is one of `HARDWARE`, `SOFTWARE`, `MECHANIC`, `ENGINEERING` or `PRODUCT`.
- `Employee` is a dataclass with `employee_id`, `personnel_code`, `name`, `hire_date`, `role` (default `Role.SPECIALIST`), `is_active` (default `True`) and an optional `reports_to` manager id.
- `PerformanceReview` is a dataclass with the ids of the review, the employee and the reviewer, a `review_date`, an optional `overall_rating`, ten ratings (punctuality, quality of work, communication, teamwork, technical skills, problem solving, creativity, adaptability, leadership, initiative) and optional `comments`.

`role_to_string` and `string_to_role` convert roles to and from their names. `function_teams_to_string` and `string_to_function_teams` do the same for teams. The `to_string` functions return `"unknown"` for a value that is not a member. The `string_to` functions return `None` for a name they do not know.

`Employee.to_dict()` gives the JSON-shaped mapping used by the remote API. It uses the keys `employeeId`, `name`, `hireDate`, `personnelCode`, `isActive` and `role`. It adds `reportsTo` only when the employee reports to someone. `Employee.from_dict()` reads such a mapping back. It raises `KeyError` for a missing field, `TypeError` for a field of the wrong type and `ValueError` for an unknown role.

`str()` of an employee or a review gives a multi-line, human-readable summary.

```python
from perfmgmt.models import Employee, Role

boss = Employee(1, 20251207, "George Michael", "20200101", Role.BOSS, True, None)
print(boss)
print(boss.to_dict())
```

## Database

`perfmgmt.database.DatabaseManager(path)` opens a SQLite database. If the tables and indexes it needs do not exist, it creates them. It can be used as a context manager, which closes the connection on exit. You can also call `close()` yourself.

```python
from perfmgmt.database import DatabaseManager
from perfmgmt.models import Employee, Role

with DatabaseManager("company.db") as db:
    db.add_employee(Employee(1, 20251207, "George Michael", "20200101", Role.BOSS, True, None))
    db.add_employee(Employee(2, 20251208, "John Nash", "20200101", Role.SPECIALIST, True, 1))
    print(db.get_employee(2))
    print(db.get_employees_reporting_to_head(1))
    db.deactivate_employee(2)
```

Employee operations:

- `add_employee(employee)` inserts an employee under its own id.
- `get_employee(employee_id)` returns the employee, or `None` if no employee has that id.
- `get_all_employees()` returns a list of all stored employees.
- `get_employees_reporting_to_head(reviewer_id)` returns the employees whose `reports_to` is that id.
- `update_employee(employee)` overwrites the stored fields of an employee.
- `deactivate_employee(employee_id)` sets the employee's `is_active` to false.

Review operations:

- `add_performance_review(review)` inserts a review. The database sets the review date to the current date. Each rating must be between 1 and 10, or the database rejects the row.
- `get_performance_review(review_id)` returns the review, or `None` if no review has that id.
- `get_performance_for_employee(employee_id)` returns the latest review stored for the employee, or `None` if there is none.

An id of zero or less raises `ValueError`. Database failures raise the matching `sqlite3` error. Examples are a duplicate id or a rating outside 1 to 10.

## Remote API

`perfmgmt.network.NetworkManager(base_url).fetch_all_employees()` reads `/api/employees` from the server and returns a list of `Employee` objects. A base URL without a scheme, such as `127.0.0.1:5000`, is reached over plain HTTP.

The method raises `OSError` if the server cannot be reached or answers with an error status. It raises `ValueError` if the body is not a JSON array or holds an unknown role, and `KeyError` or `TypeError` if an entry is malformed.

## Command line

```
perfmgmt [--db PATH] [--server URL]
```

This command runs a demonstration. It fills the database at `--db` (default `databaseExample.db`) with four sample employees and one sample review. It then deactivates employee 4. Last, it fetches the employee list from the server at `--server` (default `127.0.0.1:5000`) and prints each employee. Errors are reported on stderr and do not stop the run, and the command exits with status 0. On a second run, the sample records are already in the database. The duplicate inserts are then reported as errors.

## What it does not do

- It does not provide the employee server. It is only a client for it.
- The client only reads the employee list. It does not fetch single employees or reviews, and it does not send new or changed records.
- Reviews cannot be updated, deleted or listed by reviewer.
- No value is kept in `FunctionTeams` for an employee.