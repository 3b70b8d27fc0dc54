from typing import Any

from fastapi import FastAPI

from kitsune_styles import __version__

app = FastAPI(
    title="Kitsune Styles API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from kitsune_styles.api.routes import styles  # noqa: E402

app.include_router(styles.router, prefix="/api/styles", tags=["Styles"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok", "version": __version__}
