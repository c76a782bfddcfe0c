"""
Schémas Pydantic pour les élèves.
"""

from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel
from app.schemas.user import UserResponse


class StudentCreate(CamelModel):
    """Schéma d'inscription d'un élève (POST /students/register)."""
    name: str
    roll_number: str
    registration_number: str
    year: int
    password: str


class StudentLogin(CamelModel):
    roll_number: str
    password: str


class CounselorAssign(CamelModel):
    """Corps de PUT /students/{rollNumber}/assign-counselor."""
    counselor_id: str


class StudentResponse(CamelModel):
    """Élève public, counselor développé en utilisateur (ou null)."""
    id: str
    name: str
    roll_number: str
    registration_number: str
    year: int
    counselor: Optional[UserResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StudentResult(CamelModel):
    """Enveloppe {message, student} des inscriptions et assignations."""
    message: str
    student: StudentResponse


class StudentLoginResult(CamelModel):
    message: str
    roll_number: str
