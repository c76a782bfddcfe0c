"""
Service métier pour les élèves : inscription, consultation, assignation
d'un counselor, connexion et listage filtré.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from app.database import parse_object_id
from app.exceptions import InvalidCredentialsError, StudentNotFoundError
from app.models import student as student_model
from app.schemas.student import StudentCreate, StudentResponse
from app.security import hash_password, verify_password
from app.services import user_service

logger = logging.getLogger(__name__)


async def register_student(db: AsyncDatabase, data: StudentCreate) -> StudentResponse:
    """
    Crée un élève avec un mot de passe haché, sans counselor.
    Un rollNumber ou registrationNumber déjà pris lève DuplicateKeyError.
    """
    document = student_model.new_student(
        name=data.name,
        roll_number=data.roll_number,
        registration_number=data.registration_number,
        year=data.year,
        password_hash=await hash_password(data.password),
    )
    result = await db.students.insert_one(document)
    document["_id"] = result.inserted_id

    logger.info("Élève inscrit : %s (%s)", data.roll_number, result.inserted_id)
    return to_response(document)


async def get_student(db: AsyncDatabase, roll_number: str) -> StudentResponse:
    """Retourne un élève par son numéro de rôle, counselor développé."""
    student = await db.students.find_one({"rollNumber": roll_number}, {"password": 0})
    if student is None:
        raise StudentNotFoundError(roll_number)
    return (await populate_counselors(db, [student]))[0]


async def assign_counselor(db: AsyncDatabase, roll_number: str, counselor_id: str) -> StudentResponse:
    """
    Assigne un counselor à un élève.

    Validations :
    1. counselor_id désigne un utilisateur de rôle counselor (sinon InvalidCounselorError,
       l'élève n'est pas modifié)
    2. L'élève existe (sinon StudentNotFoundError)

    La mise à jour et la relecture se font en un seul find-and-update.
    """
    counselor = await user_service.get_counselor(db, counselor_id)

    student = await db.students.find_one_and_update(
        {"rollNumber": roll_number},
        {"$set": {"counselor": counselor["_id"], "updatedAt": datetime.now(timezone.utc)}},
        projection={"password": 0},
        return_document=ReturnDocument.AFTER,
    )
    if student is None:
        raise StudentNotFoundError(roll_number)

    logger.info("Counselor %s assigné à l'élève %s", counselor["_id"], roll_number)
    return to_response(student, counselor)


async def authenticate_student(db: AsyncDatabase, roll_number: str, password: str) -> str:
    """
    Vérifie les identifiants d'un élève et retourne son numéro de rôle.
    Élève inconnu et mot de passe faux lèvent la même InvalidCredentialsError.
    """
    student = await db.students.find_one({"rollNumber": roll_number})
    if student is None or not await verify_password(password, student["password"]):
        logger.warning("Échec de connexion élève pour %s", roll_number)
        raise InvalidCredentialsError()
    return student["rollNumber"]


async def list_students(
    db: AsyncDatabase,
    year: Optional[int] = None,
    counselor_id: Optional[str] = None,
) -> list[StudentResponse]:
    """
    Retourne les élèves filtrés par année et/ou counselor (filtres cumulables).
    Un counselor_id mal formé ne correspond à aucun élève.
    """
    query: dict = {}
    if year is not None:
        query["year"] = year
    if counselor_id is not None:
        oid = parse_object_id(counselor_id)
        if oid is None:
            return []
        query["counselor"] = oid

    students = await db.students.find(query, {"password": 0}).to_list()
    return await populate_counselors(db, students)


async def populate_counselors(db: AsyncDatabase, students: list[dict]) -> list[StudentResponse]:
    """Remplace la référence counselor de chaque élève par l'utilisateur correspondant."""
    counselor_ids = list({s["counselor"] for s in students if s.get("counselor") is not None})
    counselors: dict = {}
    if counselor_ids:
        users = await db.users.find({"_id": {"$in": counselor_ids}}, {"password": 0}).to_list()
        counselors = {u["_id"]: u for u in users}

    return [to_response(s, counselors.get(s.get("counselor"))) for s in students]


def to_response(document: dict, counselor: Optional[dict] = None) -> StudentResponse:
    return StudentResponse(
        id=str(document["_id"]),
        name=document["name"],
        roll_number=document["rollNumber"],
        registration_number=document["registrationNumber"],
        year=document["year"],
        counselor=user_service.to_response(counselor) if counselor else None,
        created_at=document.get("createdAt"),
        updated_at=document.get("updatedAt"),
    )
