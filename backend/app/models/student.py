"""
Document MongoDB pour les élèves.
Collection : students — rollNumber et registrationNumber uniques.
counselor référence un document users (ObjectId) ; le rôle counselor est
vérifié au moment de l'assignation, pas par le store.
"""

from datetime import datetime, timezone

from pymongo import ASCENDING, IndexModel

COLLECTION = "students"

INDEXES = [
    IndexModel([("rollNumber", ASCENDING)], unique=True, name="rollNumber_unique"),
    IndexModel([("registrationNumber", ASCENDING)], unique=True, name="registrationNumber_unique"),
    IndexModel([("counselor", ASCENDING)], name="counselor"),
]


def new_student(
    name: str,
    roll_number: str,
    registration_number: str,
    year: int,
    password_hash: str,
) -> dict:
    now = datetime.now(timezone.utc)
    return {
        "name": name,
        "rollNumber": roll_number,
        "registrationNumber": registration_number,
        "year": year,
        "password": password_hash,
        "counselor": None,
        "createdAt": now,
        "updatedAt": now,
    }
