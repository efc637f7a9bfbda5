"""Liveness endpoints so the hosting platform keeps the process up."""

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

ALIVE_TEXT = "Gold Bot is running ✅"


def create_app() -> FastAPI:
    app = FastAPI(title="Gold Bot", version="0.1.0")

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return ALIVE_TEXT

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app
