import pytest
from fastapi.testclient import TestClient

from universe.engine import build_app, import_attr
from universe.registry import MODULES_PATH, load_manifest, load_modules
from universe.settings import get_settings


def test_load_modules_reads_manifest():
    modules = load_modules()
    meta = modules["gcd_calculator"]
    assert meta["slug"] == "gcd"
    assert meta["mount"] == "/gcd"
    assert meta["public"] is True
    assert meta["entrypoints"]["api"] == "modules.gcd_calculator.tool.app:app"


def test_load_manifest_missing(tmp_path):
    assert load_manifest(tmp_path) is None


def test_load_modules_defaults(tmp_path):
    module_dir = tmp_path / "sample_tool"
    module_dir.mkdir()
    (module_dir / "module.yaml").write_text("name: sample_tool\n", encoding="utf-8")
    (tmp_path / "empty").mkdir()

    modules = load_modules(tmp_path)
    assert list(modules) == ["sample_tool"]
    assert modules["sample_tool"]["mount"] == "/sample-tool"
    assert modules["sample_tool"]["path"] == module_dir


def test_modules_path_points_at_repo():
    assert (MODULES_PATH / "gcd_calculator" / "module.yaml").exists()


def test_import_attr_requires_colon():
    with pytest.raises(ValueError):
        import_attr("modules.gcd_calculator.tool.app")


def test_build_app_mounts_module():
    client = TestClient(build_app())
    listing = client.get("/modules").json()
    assert {
        "name": "gcd_calculator",
        "title": "GCD Calculator",
        "category": "Numbers",
        "mount": "/gcd",
    } in listing

    response = client.post("/gcd/compute", data={"numbers": "8 12"})
    assert response.status_code == 200
    assert response.json()["gcd"] == 4


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SPARKY_GCD_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPARKY_GCD_LOG_JSON", "false")
    monkeypatch.setenv("SPARKY_GCD_DEFAULT_ALGORITHM", "Stein")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.default_algorithm == "stein"
    assert settings.max_items == 100
