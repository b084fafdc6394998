import pytest
from fastapi.testclient import TestClient

from core import status_codes
from main import create_app

CONFIG = """
[server]
version = "9.9.9"

[[rules]]
attribute = "avatar"
less_than = "1KB"

[[rules]]
attribute = "photos"
between = [10, 100]
"""


@pytest.fixture
def client(tmp_path):
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(CONFIG, encoding="utf-8")
    app = create_app(config_path=cfg_path, log_dir=tmp_path / "logs")
    with TestClient(app) as c:
        yield c


def test_valid_request(client):
    r = client.post("/attachments/validate", json={
        "task_id": "t1",
        "attachments": {
            "avatar": {"filename": "a.png", "byte_size": 512},
            "photos": [{"filename": "p.jpg", "byte_size": 50}],
        },
    })
    assert r.status_code == 200
    assert r.json() == {"request_id": "t1", "status_code": status_codes.OK, "data": {"valid": True}}


def test_invalid_request_reports_errors(client):
    r = client.post("/attachments/validate", json={
        "attachments": {
            "avatar": None,
            "photos": [
                {"filename": "ok.jpg", "byte_size": 50},
                {"filename": "big.jpg", "byte_size": 500},
                {"filename": "bigger.jpg", "byte_size": 5000},
            ],
        },
    })
    js = r.json()
    assert js["status_code"] == status_codes.ATTACHMENT_SIZE_INVALID
    assert js["request_id"]
    errors = js["data"]["errors"]
    assert len(errors) == 1
    assert errors[0]["attribute"] == "photos"
    assert errors[0]["type"] == "file_size_not_between"
    assert errors[0]["options"]["filename"] == "big.jpg"
    assert errors[0]["message"] == "file size must be between 10 Bytes and 100 Bytes (current size is 500 Bytes)"


def test_missing_attachments(client):
    r = client.post("/attachments/validate", json={"task_id": "t2"})
    assert r.json() == {"request_id": "t2", "status_code": status_codes.MISSING_ATTACHMENTS, "data": {}}


def test_health_counts_requests(client):
    client.post("/attachments/validate", json={"attachments": {"avatar": {"filename": "a", "byte_size": 1}}})
    client.post("/attachments/validate", json={"attachments": {"avatar": {"filename": "a", "byte_size": 4096}}})

    js = client.get("/attachments/health").json()
    assert js["status"] == "healthy"
    assert js["version"] == "9.9.9"
    assert js["rules"] == 2
    assert js["total_requests"] == 2
    assert js["passed_count"] == 1
    assert js["rejected_count"] == 1
    assert js["error_count"] == 1


@pytest.mark.parametrize("name", ["valid", "errors"])
def test_reserved_attribute_name(client, name):
    r = client.post("/attachments/validate", json={
        "task_id": "t3",
        "attachments": {name: {"filename": "a.png", "byte_size": 1}},
    })
    assert r.status_code == 200
    assert r.json() == {"request_id": "t3", "status_code": status_codes.INVALID_ATTRIBUTE_NAME, "data": {}}
