"""
Schémas Pydantic pour les utilisateurs (counselors et administrateurs).
"""

from datetime import datetime
from typing import Literal, Optional

from app.schemas.common import CamelModel

Role = Literal["student", "counselor", "admin"]


class UserCreate(CamelModel):
    """Schéma d'inscription d'un utilisateur (POST /users/register)."""
    name: str
    email: str
    role: Role
    password: str


class UserLogin(CamelModel):
    email: str
    password: str


class UserResponse(CamelModel):
    """Utilisateur public : le hash du mot de passe n'est jamais exposé."""
    id: str
    name: str
    email: str
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRegistered(CamelModel):
    message: str
    user: UserResponse


class UserLoginResult(CamelModel):
    message: str
    user_id: str
    role: str
