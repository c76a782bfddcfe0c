"""
Router pour les élèves.
POST /students/register                     : inscription
POST /students/login                        : vérification des identifiants
GET  /students                              : listage (filtres year, counselorId)
GET  /students/{rollNumber}                 : consultation
PUT  /students/{rollNumber}/assign-counselor : assignation d'un counselor
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.database import get_db
from app.exceptions import (
    InvalidCounselorError,
    InvalidCredentialsError,
    StudentNotFoundError,
    store_error,
)
from app.schemas.student import (
    CounselorAssign,
    StudentCreate,
    StudentLogin,
    StudentLoginResult,
    StudentResponse,
    StudentResult,
)
from app.services import student_service

router = APIRouter(prefix="/students", tags=["Élèves"])

STUDENT_NOT_FOUND = {"message": "Student not found"}


@router.post("/register", response_model=StudentResult, status_code=201, summary="Inscrire un élève")
async def register_student(data: StudentCreate, db: AsyncDatabase = Depends(get_db)):
    """
    Inscrit un élève. Le mot de passe est haché (bcrypt) avant stockage et
    n'apparaît pas dans la réponse. Un doublon de rollNumber ou de
    registrationNumber échoue en 500 (details: duplicate_key).
    """
    try:
        student = await student_service.register_student(db, data)
    except PyMongoError as e:
        raise store_error("Error registering student", e)
    return StudentResult(message="Student registered successfully", student=student)


@router.post("/login", response_model=StudentLoginResult, summary="Connexion d'un élève")
async def login_student(data: StudentLogin, db: AsyncDatabase = Depends(get_db)):
    """Vérifie les identifiants sans émettre de session ni de jeton."""
    try:
        roll_number = await student_service.authenticate_student(db, data.roll_number, data.password)
    except InvalidCredentialsError:
        raise HTTPException(status_code=401, detail={"error": "Invalid credentials"})
    except PyMongoError as e:
        raise store_error("Error logging in", e)
    return StudentLoginResult(message="Login successful", roll_number=roll_number)


@router.get("", response_model=List[StudentResponse], summary="Lister les élèves")
async def list_students(
    year: Optional[int] = None,
    counselor_id: Optional[str] = Query(None, alias="counselorId"),
    db: AsyncDatabase = Depends(get_db),
):
    """Retourne les élèves, filtrés par année et/ou counselor, counselor développé."""
    try:
        return await student_service.list_students(db, year=year, counselor_id=counselor_id)
    except PyMongoError as e:
        raise store_error("Error fetching students", e)


@router.get("/{roll_number}", response_model=StudentResponse, summary="Détail d'un élève")
async def get_student(roll_number: str, db: AsyncDatabase = Depends(get_db)):
    """Retourne un élève par son numéro de rôle."""
    try:
        return await student_service.get_student(db, roll_number)
    except StudentNotFoundError:
        raise HTTPException(status_code=404, detail=STUDENT_NOT_FOUND)
    except PyMongoError as e:
        raise store_error("Error fetching student", e)


@router.put("/{roll_number}/assign-counselor", response_model=StudentResult,
            summary="Assigner un counselor à un élève")
async def assign_counselor(roll_number: str, data: CounselorAssign, db: AsyncDatabase = Depends(get_db)):
    """
    Assigne un counselor à l'élève.
    counselorId doit désigner un utilisateur de rôle counselor, sinon 400
    et l'élève reste inchangé.
    """
    try:
        student = await student_service.assign_counselor(db, roll_number, data.counselor_id)
    except InvalidCounselorError:
        raise HTTPException(status_code=400, detail={"error": "Invalid counselor ID"})
    except StudentNotFoundError:
        raise HTTPException(status_code=404, detail=STUDENT_NOT_FOUND)
    except PyMongoError as e:
        raise store_error("Error assigning counselor", e)
    return StudentResult(message="Counselor assigned successfully", student=student)
