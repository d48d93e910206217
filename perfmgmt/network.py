"""HTTP client for the remote employee service."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Mapping

from .models import Employee

__all__ = ["NetworkManager"]

_TIMEOUT = 10.0
_EMPLOYEES_PATH = "/api/employees"


def _normalise_base_url(base_url: str) -> str:
    url = base_url if "://" in base_url else f"http://{base_url}"
    return url.rstrip("/")


def _employee_from_item(item: Any) -> Employee:
    if not isinstance(item, Mapping):
        raise TypeError(f"employee entry must be an object, not {type(item).__name__}")
    return Employee.from_dict(item)


class NetworkManager:
    """Talks to the employee server over HTTP.

    A base URL given without a scheme, such as "127.0.0.1:5000", is
    reached over plain HTTP.
    """

    def __init__(self, base_url: str) -> None:
        self.base_url = _normalise_base_url(base_url)

    def fetch_all_employees(self) -> list[Employee]:
        """Fetch every employee the server knows about.

        Raises OSError when the server cannot be reached or answers with an
        error status, ValueError for a body that is not a JSON array or holds
        an unknown role, and KeyError or TypeError for malformed entries.
        """
        url = self.base_url + _EMPLOYEES_PATH
        with urllib.request.urlopen(url, timeout=_TIMEOUT) as response:
            body = response.read()
        data = json.loads(body)
        if not isinstance(data, list):
            raise ValueError("expected a JSON array of employees")
        return [_employee_from_item(item) for item in data]