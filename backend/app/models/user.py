"""
Document MongoDB pour les utilisateurs (counselors et administrateurs).
Collection : users — email unique.
"""

from datetime import datetime, timezone

from pymongo import ASCENDING, IndexModel

COLLECTION = "users"

INDEXES = [IndexModel([("email", ASCENDING)], unique=True, name="email_unique")]


def new_user(name: str, email: str, role: str, password_hash: str) -> dict:
    now = datetime.now(timezone.utc)
    return {
        "name": name,
        "email": email,
        "password": password_hash,
        "role": role,  # student, counselor ou admin
        "createdAt": now,
        "updatedAt": now,
    }
