"""
Point d'entrée principal de l'API de suivi des élèves et des demandes de congé.
Démarrage : uvicorn app.main:app --reload  (ou python -m app.main)

python -m app.main écoute sur settings.HOST:settings.PORT (variables HOST et PORT,
fichier .env) ; la connexion MongoDB lit MONGO_URI et MONGO_DB_NAME.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.database import connect
from app.routers import leave_requests, students, users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : ouvre le client MongoDB une seule fois et le ferme à l'arrêt."""
    client, app.state.db = await connect()
    yield
    if client is not None:
        await client.close()
        logger.info("Connexion MongoDB fermée.")


app = FastAPI(
    title="Counseling API",
    description="Inscription des élèves et du personnel, assignation des counselors, demandes de congé",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(students.router)
app.include_router(users.router)
app.include_router(leave_requests.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Les détails dict sont renvoyés tels quels ({"error": ...} ou {"message": ...})."""
    content = exc.detail if isinstance(exc.detail, dict) else {"detail": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Toute exception non gérée devient une 500 générique ; le détail reste dans les logs."""
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": "internal_error"},
    )


@app.get("/health", tags=["Santé"])
def health_check(request: Request):
    """Vérifie que l'API est opérationnelle et indique si la base est connectée."""
    database = "connected" if getattr(request.app.state, "db", None) is not None else "unavailable"
    return {"status": "ok", "service": "Counseling API", "version": VERSION, "database": database}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
