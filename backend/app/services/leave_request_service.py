"""
Service métier pour les demandes de congé : consultation par counselor.
"""

import logging
from typing import Optional

from pymongo import DESCENDING
from pymongo.asynchronous.database import AsyncDatabase

from app.models.leave_request import DEFAULT_STATUS
from app.schemas.leave_request import LeaveRequestResponse
from app.services import student_service, user_service

logger = logging.getLogger(__name__)


async def list_for_counselor(db: AsyncDatabase, counselor_id: Optional[str]) -> list[LeaveRequestResponse]:
    """
    Retourne les demandes de congé des élèves suivis par un counselor,
    de la plus récente à la plus ancienne, élève développé.

    Étapes :
    1. Vérifier que counselor_id désigne un counselor (InvalidCounselorError sinon)
    2. Récupérer les élèves dont counselor == counselor_id
    3. Récupérer les demandes dont studentId appartient à ces élèves
    """
    counselor = await user_service.get_counselor(db, counselor_id)

    students = await db.students.find({"counselor": counselor["_id"]}, {"password": 0}).to_list()
    if not students:
        return []

    by_id = {s["_id"]: s for s in students}
    leave_requests = await (
        db.leaverequests.find({"studentId": {"$in": list(by_id)}})
        .sort("createdAt", DESCENDING)
        .to_list()
    )

    logger.debug(
        "Counselor %s : %d élèves, %d demandes de congé",
        counselor["_id"], len(students), len(leave_requests),
    )
    return [to_response(lr, by_id.get(lr.get("studentId")), counselor) for lr in leave_requests]


def to_response(
    document: dict,
    student: Optional[dict] = None,
    counselor: Optional[dict] = None,
) -> LeaveRequestResponse:
    return LeaveRequestResponse(
        id=str(document["_id"]),
        reason=document.get("reason"),
        start_date=document.get("startDate"),
        end_date=document.get("endDate"),
        status=document.get("status") or DEFAULT_STATUS,
        student_id=student_service.to_response(student, counselor) if student else None,
        created_at=document.get("createdAt"),
    )
