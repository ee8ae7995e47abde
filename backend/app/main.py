"""
Point d'entrée principal de l'API Student Records.
Démarrage : uvicorn app.main:app --reload  (ou python -m app)
"""

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

import app.models  # noqa: F401 — enregistre les modèles dans Base.metadata avant les routers
from app.config import settings
from app.database import check_database_connection
from app.logging_config import configure_logging
from app.routers import students

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : la base doit répondre avant d'accepter des requêtes."""
    await run_in_threadpool(check_database_connection)
    yield


app = FastAPI(
    title="Student Records API",
    description="API CRUD des fiches élèves (nom, âge, semestre)",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Journalise méthode, chemin, statut et durée de chaque requête, même en cas d'exception."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            "%s %s → %d (%.1f ms)",
            request.method, request.url.path, status_code, duration_ms,
        )


app.include_router(students.router)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc} : {err.get('msg')}")
    return "Requête invalide : " + "; ".join(parts)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """JSON illisible, champ manquant, id non numérique : 400 (et non 422)."""
    return JSONResponse(status_code=400, content={"error": _format_validation_errors(exc)})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Toutes les erreurs HTTP sont renvoyées sous la forme {"error": "<message>"}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Intercepte toutes les exceptions non gérées et renvoie une 500 au format commun."""
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Student Records API", "version": "0.1.0"}


def mount_frontend(application: FastAPI, directory: str) -> bool:
    """
    Sert le bundle frontend prébuildé sous /.
    Doit être appelé en dernier : le montage sur / capte tout chemin non routé.
    """
    if not os.path.isdir(directory):
        logger.warning("Dossier frontend %s introuvable, fichiers statiques non servis.", directory)
        return False
    application.mount("/", StaticFiles(directory=directory, html=True), name="frontend")
    return True


mount_frontend(app, settings.STATIC_DIR)
