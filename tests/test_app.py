import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from perfmgmt.app import main, run_demo
from perfmgmt.database import DatabaseManager
from perfmgmt.models import Employee, Role


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = self.server.payload
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    httpd.payload = b"[]"
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield httpd
    httpd.shutdown()
    httpd.server_close()
    thread.join()


@pytest.fixture
def dead_url():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"127.0.0.1:{port}"


def test_demo_populates_database(tmp_path, dead_url):
    db_path = str(tmp_path / "demo.db")
    assert run_demo(db_path, dead_url) is None
    with DatabaseManager(db_path) as db:
        employees = db.get_all_employees()
        assert [e.employee_id for e in employees] == [1, 2, 3, 4]
        assert db.get_employee(1).name == "George Michael"
        assert db.get_employee(1).reports_to is None
        assert db.get_employee(4).is_active is False
        assert db.get_employee(3).is_active is True
        reports = db.get_employees_reporting_to_head(1)
        assert {e.employee_id for e in reports} == {2, 3, 4}


def test_demo_stores_review(tmp_path, dead_url):
    db_path = str(tmp_path / "demo.db")
    run_demo(db_path, dead_url)
    with DatabaseManager(db_path) as db:
        review = db.get_performance_for_employee(2)
    assert review.review_id == 1
    assert review.reviewer_id == 1
    assert review.comments == "He is good!"
    assert review.overall_rating == pytest.approx(9.5)


def test_demo_can_run_twice(tmp_path, dead_url, capsys):
    db_path = str(tmp_path / "demo.db")
    run_demo(db_path, dead_url)
    run_demo(db_path, dead_url)
    err = capsys.readouterr().err
    assert "[addEmployee]" in err
    with DatabaseManager(db_path) as db:
        assert len(db.get_all_employees()) == 4
        assert db.get_performance_review(1).employee_id == 2


def test_demo_reports_invalid_lookup_and_network_failure(tmp_path, dead_url, capsys):
    run_demo(str(tmp_path / "demo.db"), dead_url)
    err = capsys.readouterr().err
    assert "[getEmployee]" in err
    assert "[fetchAllEmployees]" in err


def test_demo_returns_and_prints_server_employees(tmp_path, server, capsys):
    remote = [Employee(7, 20251207, "George Michael", "20200101", Role.MANAGER, True, None)]
    server.payload = json.dumps([e.to_dict() for e in remote]).encode()
    result = run_demo(str(tmp_path / "demo.db"), f"127.0.0.1:{server.server_address[1]}")
    assert result == remote
    out = capsys.readouterr().out
    assert out == str(remote[0]) + "\n\n"


def test_main_uses_given_paths(tmp_path, dead_url, capsys):
    db_path = tmp_path / "cli.db"
    assert main(["--db", str(db_path), "--server", dead_url]) == 0
    assert db_path.exists()
    assert "[fetchAllEmployees]" in capsys.readouterr().err
    with DatabaseManager(str(db_path)) as db:
        assert len(db.get_all_employees()) == 4