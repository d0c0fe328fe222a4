"""
Loja - FastAPI Application

REST API para montar pedidos, calcular a taxa de entrega e pagar com
cartão, PIX ou boleto.

Usage:
    uvicorn loja.api.main:app --reload --host 0.0.0.0 --port 8000

Docs:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

from dotenv import load_dotenv
import os

load_dotenv()  # load .env from current working directory (project root)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import time

from loja import __version__
from loja.core.config import get_store_config
from loja.core.exceptions import (
    InvalidPaymentCredentials,
    InvalidStoreConfig,
    LojaError,
    MalformedCardNumber,
    NoPaymentMethodSelected,
    UnknownPaymentKind,
)
from loja.core.logging import setup_logger
from loja.payments import get_registry

logger = logging.getLogger(__name__)

# Status code per domain error; anything else derived from LojaError is a 400
_ERROR_STATUS = {
    UnknownPaymentKind: 400,
    InvalidPaymentCredentials: 400,
    MalformedCardNumber: 422,
    NoPaymentMethodSelected: 409,
    InvalidStoreConfig: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown."""
    setup_logger()
    logger.info("Loja API starting...")

    config = get_store_config()
    logger.info(f"Store: {config.name} (delivery fee {config.delivery_fee})")

    kinds = get_registry().list_kinds()
    logger.info(f"Payment registry: {len(kinds)} kind(s): {kinds}")

    logger.info("API ready")
    yield

    logger.info("Loja API shutting down...")


app = FastAPI(
    title="Loja API",
    description="Pedidos com taxa de entrega e formas de pagamento intercambiáveis.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS – configurable via .env CORS_ORIGINS, comma-separated
_DEFAULT_CORS = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_CORS).split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(f"{request.method} {request.url.path} [{response.status_code}] ({process_time:.3f}s)")
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(LojaError)
async def loja_error_handler(request: Request, exc: LojaError):
    status_code = _ERROR_STATUS.get(type(exc), 400)
    log = logger.error if status_code >= 500 else logger.warning
    log(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "message": exc.message},
    )


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    return JSONResponse(
        status_code=404,
        content={"error": "Not Found", "message": f"'{request.url.path}' not found"},
    )


@app.exception_handler(Exception)
async def any_exception_handler(request: Request, exc: Exception):
    """Catch-all so unhandled exceptions still return JSON."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": "Check server logs."},
    )


# Health endpoints
@app.get("/", tags=["Health"])
async def root():
    return {
        "name": "Loja API",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    health = {"status": "healthy", "components": {"api": "ok"}}
    kinds = get_registry().list_kinds()
    if kinds:
        health["components"]["payments"] = "ok"
    else:
        health["status"] = "degraded"
        health["components"]["payments"] = "error: no payment methods registered"
    return health


# Register routers
from loja.api.routers import orders

app.include_router(orders.router, tags=["Orders"])

logger.info("Routers registered: orders")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("loja.api.main:app", host="0.0.0.0", port=8000, reload=True)
