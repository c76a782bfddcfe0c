# Collections MongoDB et leurs index, parcourus au démarrage par ensure_indexes.

from app.models import leave_request, student, user

COLLECTIONS = {
    user.COLLECTION: user.INDEXES,
    student.COLLECTION: student.INDEXES,
    leave_request.COLLECTION: leave_request.INDEXES,
}
