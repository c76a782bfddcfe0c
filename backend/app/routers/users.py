"""
Router pour les utilisateurs (counselors, administrateurs).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.database import get_db
from app.exceptions import InvalidCredentialsError, store_error
from app.schemas.user import UserCreate, UserLogin, UserLoginResult, UserRegistered, UserResponse
from app.services import user_service

router = APIRouter(prefix="/users", tags=["Utilisateurs"])


@router.post("/register", response_model=UserRegistered, status_code=201, summary="Inscrire un utilisateur")
async def register_user(data: UserCreate, db: AsyncDatabase = Depends(get_db)):
    """Inscrit un utilisateur. Un email déjà utilisé échoue en 500 (details: duplicate_key)."""
    try:
        user = await user_service.register_user(db, data)
    except PyMongoError as e:
        raise store_error("Error registering user", e)
    return UserRegistered(message="User registered successfully", user=user)


@router.post("/login", response_model=UserLoginResult, summary="Connexion d'un utilisateur")
async def login_user(data: UserLogin, db: AsyncDatabase = Depends(get_db)):
    """Vérifie les identifiants et retourne l'identifiant et le rôle, sans session."""
    try:
        user = await user_service.authenticate_user(db, data.email, data.password)
    except InvalidCredentialsError:
        raise HTTPException(status_code=401, detail={"error": "Invalid credentials"})
    except PyMongoError as e:
        raise store_error("Error logging in", e)
    return UserLoginResult(message="Login successful", user_id=str(user["_id"]), role=user["role"])


@router.get("", response_model=List[UserResponse], summary="Lister les utilisateurs")
async def list_users(role: Optional[str] = None, db: AsyncDatabase = Depends(get_db)):
    """Retourne tous les utilisateurs, ou ceux du rôle demandé."""
    try:
        return await user_service.list_users(db, role)
    except PyMongoError as e:
        raise store_error("Error fetching users", e)
