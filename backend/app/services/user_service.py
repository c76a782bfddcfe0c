"""
Service métier pour les utilisateurs : inscription, connexion, listage,
et vérification du rôle counselor utilisée par les élèves et les congés.
"""

import logging
from typing import Optional

from pymongo.asynchronous.database import AsyncDatabase

from app.database import parse_object_id
from app.exceptions import InvalidCounselorError, InvalidCredentialsError
from app.models import user as user_model
from app.schemas.user import UserCreate, UserResponse
from app.security import hash_password, verify_password

logger = logging.getLogger(__name__)

COUNSELOR_ROLE = "counselor"


async def register_user(db: AsyncDatabase, data: UserCreate) -> UserResponse:
    """
    Crée un utilisateur avec un mot de passe haché.
    Un email déjà utilisé lève DuplicateKeyError (index unique).
    """
    document = user_model.new_user(
        name=data.name,
        email=data.email,
        role=data.role,
        password_hash=await hash_password(data.password),
    )
    result = await db.users.insert_one(document)
    document["_id"] = result.inserted_id

    logger.info("Utilisateur inscrit : %s (%s, rôle %s)", data.email, result.inserted_id, data.role)
    return to_response(document)


async def authenticate_user(db: AsyncDatabase, email: str, password: str) -> dict:
    """
    Vérifie les identifiants et retourne le document utilisateur.
    Email inconnu et mot de passe faux lèvent la même InvalidCredentialsError.
    """
    user = await db.users.find_one({"email": email})
    if user is None or not await verify_password(password, user["password"]):
        logger.warning("Échec de connexion utilisateur pour %s", email)
        raise InvalidCredentialsError()
    return user


async def list_users(db: AsyncDatabase, role: Optional[str] = None) -> list[UserResponse]:
    """Retourne les utilisateurs, filtrés par rôle si fourni."""
    query = {"role": role} if role else {}
    users = await db.users.find(query, {"password": 0}).to_list()
    return [to_response(u) for u in users]


async def get_counselor(db: AsyncDatabase, counselor_id: Optional[str]) -> dict:
    """
    Retourne le document d'un utilisateur de rôle counselor.
    Lève InvalidCounselorError si l'identifiant est absent, mal formé,
    inconnu ou désigne un autre rôle.
    """
    oid = parse_object_id(counselor_id)
    if oid is None:
        raise InvalidCounselorError(counselor_id)

    counselor = await db.users.find_one({"_id": oid}, {"password": 0})
    if counselor is None or counselor.get("role") != COUNSELOR_ROLE:
        raise InvalidCounselorError(counselor_id)
    return counselor


def to_response(document: dict) -> UserResponse:
    return UserResponse(
        id=str(document["_id"]),
        name=document["name"],
        email=document["email"],
        role=document["role"],
        created_at=document.get("createdAt"),
        updated_at=document.get("updatedAt"),
    )
