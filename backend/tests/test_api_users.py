"""
Tests d'intégration API pour les utilisateurs.
POST /users/register, POST /users/login, GET /users
"""

from unittest.mock import MagicMock

import bcrypt
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, OperationFailure

from factories import make_user

REGISTRATION = {
    "name": "Anita Rao",
    "email": "anita@college.edu",
    "role": "counselor",
    "password": "c0unsel",
}


def test_register_user_succes(client, db):
    user_id = ObjectId()
    db.users.insert_one.return_value = MagicMock(inserted_id=user_id)

    response = client.post("/users/register", json=REGISTRATION)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["id"] == str(user_id)
    assert body["user"]["email"] == "anita@college.edu"
    assert body["user"]["role"] == "counselor"
    assert "createdAt" in body["user"]
    assert "password" not in body["user"]

    stored = db.users.insert_one.call_args.args[0]
    assert stored["password"] != "c0unsel"
    assert bcrypt.checkpw(b"c0unsel", stored["password"].encode())


def test_register_user_role_inconnu(client):
    """Rôle hors student/counselor/admin → 422."""
    response = client.post("/users/register", json={**REGISTRATION, "role": "principal"})
    assert response.status_code == 422


def test_register_user_email_doublon(client, db):
    db.users.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error index: email_unique")

    response = client.post("/users/register", json=REGISTRATION)

    assert response.status_code == 500
    assert response.json() == {"error": "Error registering user", "details": "duplicate_key"}


def test_login_user_succes(client, db):
    user = make_user(email="anita@college.edu", role="admin")
    db.users.find_one.return_value = user

    response = client.post("/users/login", json={"email": "anita@college.edu", "password": "secret"})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Login successful",
        "userId": str(user["_id"]),
        "role": "admin",
    }
    db.users.find_one.assert_awaited_once_with({"email": "anita@college.edu"})


def test_login_user_inconnu_et_mauvais_mot_de_passe_indistincts(client, db):
    db.users.find_one.return_value = None
    unknown = client.post("/users/login", json={"email": "nobody@college.edu", "password": "secret"})

    db.users.find_one.return_value = make_user()
    wrong = client.post("/users/login", json={"email": "anita@college.edu", "password": "wrong"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"error": "Invalid credentials"}


def test_list_users_tous(client, db):
    db.users.find.return_value.to_list.return_value = [
        make_user(role="counselor"),
        make_user(role="admin", email="admin@college.edu"),
    ]

    response = client.get("/users")

    assert response.status_code == 200
    assert len(response.json()) == 2
    assert all("password" not in u for u in response.json())
    assert db.users.find.call_args.args[0] == {}


def test_list_users_filtre_role(client, db):
    client.get("/users", params={"role": "counselor"})
    assert db.users.find.call_args.args[0] == {"role": "counselor"}


def test_list_users_erreur_store(client, db):
    db.users.find.return_value.to_list.side_effect = OperationFailure("not authorized on counseling")

    response = client.get("/users")

    assert response.status_code == 500
    assert response.json() == {"error": "Error fetching users", "details": "database_error"}


def test_register_user_mot_de_passe_long(client, db):
    """Mot de passe multi-octets de plus de 72 octets → 201 puis connexion réussie."""
    long_password = "é" * 50  # 100 octets en UTF-8
    db.users.insert_one.return_value = MagicMock(inserted_id=ObjectId())

    response = client.post("/users/register", json={**REGISTRATION, "password": long_password})

    assert response.status_code == 201
    stored = db.users.insert_one.call_args.args[0]
    assert bcrypt.checkpw(long_password.encode()[:72], stored["password"].encode())

    db.users.find_one.return_value = stored
    login = client.post("/users/login", json={"email": "anita@college.edu", "password": long_password})
    assert login.status_code == 200
    assert login.json()["role"] == "counselor"
