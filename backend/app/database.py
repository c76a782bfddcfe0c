"""
Connexion MongoDB partagée pour toute la durée de vie du processus.
Le client est créé au démarrage (lifespan) et le handle est injecté dans
chaque handler via la dépendance get_db.
"""

import logging
from typing import Optional

from bson import ObjectId
from fastapi import HTTPException, Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.config import settings
from app.models import COLLECTIONS

logger = logging.getLogger(__name__)


async def ensure_indexes(db: AsyncDatabase) -> None:
    """Crée les index manquants (opération idempotente côté MongoDB)."""
    for name, indexes in COLLECTIONS.items():
        await db[name].create_indexes(indexes)
    logger.info("Index MongoDB vérifiés sur %d collections.", len(COLLECTIONS))


async def connect() -> tuple[Optional[AsyncMongoClient], Optional[AsyncDatabase]]:
    """
    Ouvre le client MongoDB et vérifie la connexion.

    Un échec est journalisé sans interrompre le démarrage : l'API écoute
    quand même et chaque requête nécessitant la base répond 500.
    """
    if not settings.MONGO_URI:
        logger.error("Connexion MongoDB impossible : MONGO_URI n'est pas défini.")
        return None, None

    client = None
    try:
        client = AsyncMongoClient(
            settings.MONGO_URI,
            serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
            tz_aware=True,
        )
        await client.admin.command("ping")
        db = client[settings.MONGO_DB_NAME]
        await ensure_indexes(db)
    except (PyMongoError, ValueError) as exc:
        logger.error("Connexion MongoDB impossible : %s", exc)
        if client is not None:
            await client.close()
        return None, None

    logger.info("Connecté à MongoDB (base %s).", settings.MONGO_DB_NAME)
    return client, db


def get_db(request: Request) -> AsyncDatabase:
    """Dépendance FastAPI — fournit le handle de base ouvert au démarrage."""
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(
            status_code=500,
            detail={"error": "Database unavailable", "details": "database_unavailable"},
        )
    return db


def parse_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Convertit un identifiant hexadécimal en ObjectId, None s'il est mal formé."""
    if value is None or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
