"""
Router pour les demandes de congé.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.database import get_db
from app.exceptions import InvalidCounselorError, store_error
from app.schemas.leave_request import LeaveRequestResponse
from app.services import leave_request_service

router = APIRouter(prefix="/leave-requests", tags=["Demandes de congé"])


@router.get("", response_model=List[LeaveRequestResponse],
            summary="Demandes de congé des élèves d'un counselor")
async def list_leave_requests(
    counselor_id: Optional[str] = Query(None, alias="counselorId"),
    db: AsyncDatabase = Depends(get_db),
):
    """
    Retourne les demandes de congé des élèves suivis par le counselor.
    404 si counselorId est absent ou ne désigne pas un counselor.
    """
    try:
        return await leave_request_service.list_for_counselor(db, counselor_id)
    except InvalidCounselorError:
        raise HTTPException(status_code=404, detail={"error": "Counselor not found or not authorized"})
    except PyMongoError as e:
        raise store_error("Error fetching leave requests", e)
