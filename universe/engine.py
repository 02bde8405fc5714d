from __future__ import annotations

from importlib import import_module
from typing import Any

from fastapi import FastAPI

from universe.logger import setup_logger
from universe.registry import load_modules

logger = setup_logger(__name__)


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def build_app() -> FastAPI:
    app = FastAPI(title="Sparky Universe")

    @app.get("/modules")
    def list_modules():
        return [
            {
                "name": meta["name"],
                "title": meta.get("title") or meta["name"],
                "category": meta.get("category") or "Other",
                "mount": meta["mount"],
            }
            for meta in load_modules().values()
            if meta.get("public", True)
        ]

    for meta in load_modules().values():
        entrypoints = meta.get("entrypoints") or {}
        api_entry = entrypoints.get("api")
        if not api_entry:
            continue

        subapp = import_attr(api_entry)
        app.mount(meta["mount"], subapp)
        logger.info("module_mounted", module=meta["name"], mount=meta["mount"])

    return app
