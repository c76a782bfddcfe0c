"""
Document MongoDB pour les demandes de congé.
Collection : leaverequests — studentId référence un document students
(intégrité référentielle non garantie par le store).

Champs : reason, startDate, endDate, status (défaut "pending"), studentId, createdAt.
Aucune route ne crée de demande pour l'instant.
"""

from pymongo import ASCENDING, IndexModel

COLLECTION = "leaverequests"

DEFAULT_STATUS = "pending"

INDEXES = [IndexModel([("studentId", ASCENDING)], name="studentId")]
