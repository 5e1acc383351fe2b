"""
Login, logout and session resolution over HTTP.
"""

import time
from datetime import timedelta

from jose import jwt

from app.core.security import create_access_token
from app.models import UserRole


def identity_token(sub: str = "oidc-42", **claims) -> str:
    now = int(time.time())
    payload = {
        "sub": sub,
        "aud": "portal-test",
        "iss": "https://id.example.test",
        "iat": now,
        "exp": now + 300,
        **claims,
    }
    return jwt.encode(payload, "test-identity-signing-key", algorithm="HS256")


async def test_login_creates_client_user_and_session(test_client, storage):
    token = identity_token(email="pat@example.com", given_name="Pat", family_name="Lee")

    response = await test_client.post("/api/auth/login", json={"idToken": token})

    assert response.status_code == 200
    data = response.json()
    assert data["tokenType"] == "bearer"
    assert data["expiresIn"] > 0
    assert data["user"]["id"] == "oidc-42"
    assert data["user"]["firstName"] == "Pat"
    assert data["user"]["lastName"] == "Lee"
    assert data["user"]["role"] == "client"

    me = await test_client.get(
        "/api/auth/user",
        headers={"Authorization": f"Bearer {data['accessToken']}"},
    )
    assert me.status_code == 200
    assert me.json()["email"] == "pat@example.com"


async def test_login_promotes_configured_admin_email(test_client, storage):
    token = identity_token(sub="boss", email="Owner@Example.com")

    response = await test_client.post("/api/auth/login", json={"idToken": token})

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "admin"
    assert (await storage.get_user("boss")).role == UserRole.ADMIN


async def test_login_again_refreshes_profile(test_client, storage):
    await test_client.post("/api/auth/login", json={"idToken": identity_token(email="old@example.com")})

    response = await test_client.post(
        "/api/auth/login",
        json={"idToken": identity_token(email="new@example.com")},
    )

    assert response.status_code == 200
    user = await storage.get_user("oidc-42")
    assert user.email == "new@example.com"


async def test_login_rejects_bad_signature(test_client, storage_calls):
    forged = jwt.encode({"sub": "x", "aud": "portal-test"}, "wrong-key", algorithm="HS256")

    response = await test_client.post("/api/auth/login", json={"idToken": forged})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid identity token"}
    assert "upsert_user" not in storage_calls


async def test_login_rejects_wrong_audience(test_client):
    token = identity_token(aud="someone-else")

    response = await test_client.post("/api/auth/login", json={"idToken": token})

    assert response.status_code == 401


async def test_login_requires_id_token(test_client):
    response = await test_client.post("/api/auth/login", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


async def test_logout_invalidates_token(test_client, client_headers):
    assert (await test_client.get("/api/auth/user", headers=client_headers)).status_code == 200

    response = await test_client.post("/api/auth/logout", headers=client_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out"}

    again = await test_client.get("/api/auth/user", headers=client_headers)
    assert again.status_code == 401
    assert again.json() == {"message": "Session expired"}


async def test_current_user_without_token(test_client):
    response = await test_client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


async def test_current_user_with_malformed_token(test_client):
    response = await test_client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid authentication token"}


async def test_expired_session_is_unauthorized(test_client, client_user, make_headers):
    headers = await make_headers(client_user.id, ttl=timedelta(minutes=-1))

    response = await test_client.get("/api/auth/user", headers=headers)

    assert response.status_code == 401


async def test_token_for_another_users_session_is_rejected(test_client, storage, client_user, admin_user, make_headers):
    headers = await make_headers(client_user.id)
    sid_token = headers["Authorization"].split(" ", 1)[1]
    sid = jwt.get_unverified_claims(sid_token)["sid"]
    forged = create_access_token({"sub": admin_user.id, "sid": sid})

    response = await test_client.get("/api/auth/user", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401


async def test_session_for_missing_user_is_not_found(test_client, make_headers):
    headers = await make_headers("ghost")

    response = await test_client.get("/api/auth/user", headers=headers)

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"
