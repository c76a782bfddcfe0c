"""
Schémas Pydantic pour les demandes de congé.
"""

from datetime import datetime
from typing import Optional

from app.models.leave_request import DEFAULT_STATUS
from app.schemas.common import CamelModel
from app.schemas.student import StudentResponse


class LeaveRequestResponse(CamelModel):
    id: str
    reason: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: str = DEFAULT_STATUS
    student_id: Optional[StudentResponse] = None  # référence développée
    created_at: Optional[datetime] = None
