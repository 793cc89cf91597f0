from __future__ import annotations

from fastapi import FastAPI

from api.formulas import router as formulas_router


def create_app() -> FastAPI:
    app = FastAPI(title="Formula builder")
    app.include_router(formulas_router)
    return app


app = create_app()
