"""Tapeline measurement service: FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tapeline.config import settings
from tapeline.api.routes_parse import router as parse_router
from tapeline.api.routes_format import router as format_router

__version__ = "0.1.0"

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Parse measurement text into numbers and format numbers for display.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parse_router, prefix="/api")
app.include_router(format_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}
