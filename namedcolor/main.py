import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.match import router as match_router
from .settings import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Named Color Matcher")

# The design-tool plugin UI calls the service from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(match_router, prefix="/api/v1", tags=["match"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
