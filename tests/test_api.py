from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(**overrides)))


def test_health():
    response = _client(app_version="9.9.9").get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "9.9.9"}


def test_evaluate_returns_value_steps_and_ast():
    response = _client().post("/evaluate", json={"expression": "(2+3)*4"})

    assert response.status_code == 200
    body = response.json()
    assert body["value"] == 20
    assert body["steps"] == ["2 + 3 = 5", "5 * 4 = 20"]
    assert body["ast"]["node_type"] == "binop"
    assert body["ast"]["op"] == "*"
    assert body["ast"]["right"] == {"node_type": "literal", "value": 4}


def test_evaluate_parse_error_maps_to_422():
    response = _client().post("/evaluate", json={"expression": "1+2)"})

    assert response.status_code == 422
    assert response.json() == {
        "kind": "unmatched_closing_parenthesis",
        "detail": "unexpected ')' without opening '('",
    }


def test_evaluate_division_by_zero_maps_to_422():
    response = _client().post("/evaluate", json={"expression": "4/(2-2)"})

    assert response.status_code == 422
    assert response.json()["kind"] == "division_by_zero"


def test_evaluate_batch_reports_each_expression():
    response = _client().post(
        "/evaluate/batch",
        json={"expressions": ["1+2", "12+3", "2*3+1"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["succeeded"] == 2
    assert body["failed"] == 1
    assert [o["value"] for o in body["outcomes"]] == [3, None, 7]
    assert body["outcomes"][1]["error_kind"] == "multi_digit_number"


def test_evaluate_batch_rejects_oversized_batch():
    response = _client(max_batch_size=2).post(
        "/evaluate/batch",
        json={"expressions": ["1", "2", "3"]},
    )

    assert response.status_code == 413
