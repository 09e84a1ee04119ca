"""
Negotiation Ledger API
Records freight negotiation calls and the deals they produce, and serves
shipment metrics for the operations dashboard.

Endpoints:
  GET  /health                    – Health check
  POST /api/calls                 – Log a call (creates a deal when outcome is "yes")
  GET  /api/calls[/{id}]          – List / fetch calls
  PUT  /api/calls/{id}            – Replace a call
  DEL  /api/calls/{id}            – Delete a call (linked deals are kept)
  *    /api/deals[/{id}]          – Same shape for deals
  GET  /api/metrics               – Shipment / driver metrics snapshot
  GET  /api/data                  – Raw shipment catalog

Writes (POST/PUT/DELETE) require header: X-API-Key
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.db.connection import Database
from app.db.schema import init_db
from app.errors import LedgerError, ValidationError
from app.routes import health, calls, deals, metrics

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s: Settings = app.state.settings
    with Database(s.database_path) as db:
        init_db(db)
        app.state.db = db
        log.info("%s ready (database: %s, shipments: %s)",
                 s.app_name, s.database_path, s.shipments_path)
        yield
        app.state.db = None


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Wrong-typed or malformed input is reported like any other invalid field
    fields: list[str] = []
    for err in exc.errors():
        loc = err.get("loc") or ("body",)
        # ("body", "sentiment") -> "sentiment"; a bad body as a whole -> "body"
        name = str(loc[1] if len(loc) > 1 else loc[0])
        if name not in fields:
            fields.append(name)
    error = ValidationError(f"Invalid fields: {', '.join(fields)}", fields=fields)
    return await ledger_error_handler(request, error)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Negotiation Ledger API",
        description="Call outcomes, negotiated deals and shipment metrics.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health.router)
    app.include_router(calls.router)
    app.include_router(deals.router)
    app.include_router(metrics.router)

    if settings.dashboard_dir and Path(settings.dashboard_dir).is_dir():
        app.mount(
            "/dashboard",
            StaticFiles(directory=settings.dashboard_dir, html=True),
            name="dashboard",
        )

    return app


app = create_app()
