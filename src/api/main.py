"""
FastAPI Application — Passport Scopes.

Groups the values requested by a passport form into scopes
(identity, address, phone, email) and renders one row per scope.
"""

import logging

from fastapi import FastAPI

from src.api.routes.scopes import router as scopes_router
from src.api.schemas.responses import HealthResponse
from src.config.settings import get_settings

VERSION = "1.0.0"

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Passport Scopes",
    description="Scope grouping, completeness and row summaries for passport forms.",
    version=VERSION,
)

# Register scope routes
app.include_router(scopes_router, prefix="/api/v1", tags=["Scopes"])


# ── Health ──
@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", version=VERSION, env=get_settings().env)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("src.api.main:app", host=settings.api_host, port=settings.api_port, reload=settings.debug)
