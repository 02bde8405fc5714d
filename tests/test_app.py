from fastapi.testclient import TestClient

from modules.gcd_calculator.tool.app import app

client = TestClient(app)


def test_title_comes_from_manifest():
    assert app.title == "GCD Calculator"


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_compute():
    response = client.post("/compute", data={"numbers": "12, 18", "algorithm": "stein"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["gcd"] == 6
    assert payload["algorithm"] == "stein"
    assert payload["elapsed_ticks"] >= 0


def test_compute_default_algorithm_from_settings(monkeypatch):
    monkeypatch.setenv("SPARKY_GCD_DEFAULT_ALGORITHM", "stein")
    response = client.post("/compute", data={"numbers": "21 14"})
    assert response.status_code == 200
    assert response.json()["algorithm"] == "stein"


def test_compute_limit_from_settings(monkeypatch):
    monkeypatch.setenv("SPARKY_GCD_MAX_ITEMS", "2")
    response = client.post("/compute", data={"numbers": "2 4 6"})
    assert response.status_code == 400
    assert response.json() == {"error": "Too many numbers (limit 2)."}


def test_compute_rejects_all_zero():
    response = client.post("/compute", data={"numbers": "0 0"})
    assert response.status_code == 400
    assert response.json() == {"error": "All numbers cannot be 0 at the same time."}


def test_compute_requires_numbers():
    response = client.post("/compute", data={"numbers": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "Numbers are required."}


def test_compare():
    response = client.post("/compare", data={"numbers": "100 75 50"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["agree"] is True
    assert payload["results"]["euclidean"]["gcd"] == 25


def test_compare_rejects_minimum():
    response = client.post("/compare", data={"numbers": "-2147483648 2"})
    assert response.status_code == 400
