"""
Exceptions métier levées par les services et traduction des erreurs du store
en réponses client. Les détails bruts de MongoDB ne sont jamais renvoyés :
ils sont journalisés et remplacés par un code d'erreur fermé.
"""

import logging

from fastapi import HTTPException
from pymongo.errors import ConnectionFailure, DuplicateKeyError, PyMongoError

logger = logging.getLogger(__name__)


class StudentNotFoundError(Exception):
    """Aucun élève ne correspond au numéro de rôle."""


class InvalidCounselorError(Exception):
    """L'identifiant ne désigne pas un utilisateur de rôle counselor."""


class InvalidCredentialsError(Exception):
    """Identifiant inconnu ou mot de passe incorrect (volontairement indistincts)."""


def error_code(exc: PyMongoError) -> str:
    if isinstance(exc, DuplicateKeyError):
        return "duplicate_key"
    if isinstance(exc, ConnectionFailure):
        return "database_unavailable"
    return "database_error"


def store_error(message: str, exc: PyMongoError) -> HTTPException:
    """Construit la réponse 500 d'un handler dont l'opération MongoDB a échoué."""
    logger.error("%s : %s", message, exc, exc_info=exc)
    return HTTPException(status_code=500, detail={"error": message, "details": error_code(exc)})
