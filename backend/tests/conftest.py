"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à MongoDB.
"""

import os

# Avant tout import de app.config : pas de connexion au démarrage, bcrypt rapide.
os.environ["MONGO_URI"] = ""
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import get_db  # noqa: E402
from app.main import app  # noqa: E402
from factories import make_db  # noqa: E402


@pytest.fixture
def db():
    return make_db()


@pytest.fixture
def client(db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
