from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form
from fastapi.responses import JSONResponse

from modules.gcd_calculator.core.compute import compare_algorithms, compute_gcd
from universe.logger import setup_logger
from universe.registry import load_manifest
from universe.settings import get_settings

BASE_DIR = Path(__file__).parent
MODULE_DIR = BASE_DIR.parent

manifest = load_manifest(MODULE_DIR) or {}
logger = setup_logger(__name__)

app = FastAPI(title=manifest.get("title") or "GCD Calculator")


def _rejected(route: str, error: str) -> JSONResponse:
    logger.info("gcd_request_rejected", route=route, error=error)
    return JSONResponse({"error": error}, status_code=400)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/compute")
def compute(
    numbers: str | None = Form(None),
    algorithm: str | None = Form(None),
):
    settings = get_settings()
    result, error = compute_gcd(
        numbers,
        algorithm,
        default_algorithm=settings.default_algorithm,
        max_items=settings.max_items,
    )
    if error:
        return _rejected("compute", error)
    return result


@app.post("/compare")
def compare(numbers: str | None = Form(None)):
    result, error = compare_algorithms(numbers, max_items=get_settings().max_items)
    if error:
        return _rejected("compare", error)
    return result
