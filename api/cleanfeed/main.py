import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .routers import cache, health, keywords, scan, settings, stats

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

# API metadata for OpenAPI documentation
description = """
## CleanFeed Filter API

Rule-based detection of adult-content promotion in social feeds, with
per-account verdict caching.

### Key Features

* **Text rules:** promotional phrases, link aggregators, isolated "OF" abbreviation
* **Identifier rules:** NSFW and suspicious account-handle patterns
* **Verdict cache:** 24h TTL, bounded to 1000 accounts
* **Render-agnostic:** returns verdicts only; hiding or blurring is up to the caller

### Quick Start

1. **Health Check:** `GET /health`
2. **Classify an item:** `POST /scan`
3. **Manage keywords:** `GET/POST /keywords`, `DELETE /keywords/{keyword}`
"""

app = FastAPI(
    title="CleanFeed Filter API",
    description=description,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "health", "description": "Service health"},
        {"name": "scan", "description": "Classify text and identifiers"},
        {"name": "keywords", "description": "Inspect and edit the keyword set"},
        {"name": "cache", "description": "Verdict cache statistics and reset"},
        {"name": "stats", "description": "Daily filter counters"},
        {"name": "settings", "description": "Filter settings"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(scan.router, prefix="/scan", tags=["scan"])
app.include_router(keywords.router, prefix="/keywords", tags=["keywords"])
app.include_router(cache.router, prefix="/cache", tags=["cache"])
app.include_router(stats.router, prefix="/stats", tags=["stats"])
app.include_router(settings.router, prefix="/settings", tags=["settings"])
