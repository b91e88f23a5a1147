"""
Propper FastAPI Application — Audit proxy for the Figma plugin and CLI.

  POST /audit  → score a component against the rules dictionary
  GET  /rules  → the loaded rules dictionary
  GET  /docs   → API documentation and component summary
  GET  /health → {"status": "ok", ...}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from propper.api.routes.audit import router as audit_router
from propper.api.routes.health import router as health_router
from propper.api.routes.rules import router as rules_router
from propper.config import VERSION, settings
from propper.core.rules_loader import get_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("propper")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A broken rules file must stop the service before it takes traffic
    rules = get_rules()
    logger.info(
        f"Propper proxy ready: rules v{rules.version}, "
        f"components={', '.join(rules.components)}"
    )
    yield


app = FastAPI(
    title="Propper",
    description="Code-readiness audits for Figma components",
    version=VERSION,
    lifespan=lifespan,
    # /docs is served by the rules router
    docs_url="/swagger",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(audit_router)
app.include_router(rules_router)
app.include_router(health_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "body": body.decode("utf-8")[:100]},
    )
