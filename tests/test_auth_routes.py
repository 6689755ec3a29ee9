"""
HTTP-level tests for /api/v1/auth.
"""

import pytest

ALICE = {"username": "alice", "name": "Alice", "password": "secret123"}


async def _register(client, payload=ALICE):
    return await client.post("/api/v1/auth/register", json=payload)


async def _login(client, username="alice", password="secret123"):
    return await client.post(
        "/api/v1/auth/login", json={"username": username, "password": password}
    )


class TestRegisterRoute:
    @pytest.mark.asyncio
    async def test_register(self, client):
        resp = await _register(client)
        assert resp.status_code == 200
        assert resp.json() == {"username": "alice", "name": "Alice"}
        assert "X-Process-Time" in resp.headers

    @pytest.mark.asyncio
    async def test_register_twice(self, client):
        await _register(client)
        resp = await _register(client, {"username": "alice", "name": "Bob", "password": "x"})
        assert resp.status_code == 400
        assert resp.json()["code"] == "DuplicateUsername"

    @pytest.mark.asyncio
    async def test_register_invalid_body(self, client):
        resp = await _register(client, {"username": "", "name": "Alice"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "InvalidInput"
        assert {e["field"] for e in body["errors"]} == {"username", "password"}

    @pytest.mark.asyncio
    async def test_register_blank_username(self, client):
        resp = await _register(client, {"username": "   ", "name": "Alice", "password": "pw"})
        assert resp.status_code == 400
        assert [e["field"] for e in resp.json()["errors"]] == ["username"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["p" * 72, "é" * 36])
    async def test_register_password_at_bcrypt_limit(self, client, password):
        resp = await _register(client, {"username": "alice", "name": "Alice", "password": password})
        assert resp.status_code == 200
        assert (await _login(client, password=password)).status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["p" * 73, "p" * 80, "é" * 37])
    async def test_register_password_over_bcrypt_limit(self, client, password):
        resp = await _register(client, {"username": "alice", "name": "Alice", "password": password})
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "InvalidInput"
        assert [e["field"] for e in body["errors"]] == ["password"]

    @pytest.mark.asyncio
    async def test_login_password_over_bcrypt_limit(self, client):
        await _register(client)
        resp = await _login(client, password="p" * 73)
        assert resp.status_code == 400
        assert resp.json()["code"] == "InvalidInput"


class TestLoginRoute:
    @pytest.mark.asyncio
    async def test_roundtrip(self, client):
        await _register(client)
        resp = await _login(client)
        assert resp.status_code == 200
        body = resp.json()
        assert body["username"] == "alice"
        assert body["name"] == "Alice"
        assert body["token"]

    @pytest.mark.asyncio
    async def test_wrong_password_matches_unknown_user(self, client):
        await _register(client)
        wrong = await _login(client, password="nope")
        unknown = await _login(client, username="ghost")
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json()
        assert wrong.json()["code"] == "InvalidCredentials"

    @pytest.mark.asyncio
    async def test_login_rotates_token(self, client):
        await _register(client)
        first = (await _login(client)).json()["token"]
        second = (await _login(client)).json()["token"]
        assert first != second


class TestMeRoute:
    @pytest.mark.asyncio
    async def test_me_with_current_token(self, client):
        await _register(client)
        token = (await _login(client)).json()["token"]

        resp = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200
        assert resp.json() == {"username": "alice", "name": "Alice"}

    @pytest.mark.asyncio
    async def test_me_with_rotated_token(self, client):
        await _register(client)
        old = (await _login(client)).json()["token"]
        await _login(client)

        resp = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {old}"})
        assert resp.status_code == 401
        assert resp.json()["code"] == "Unauthorized"

    @pytest.mark.asyncio
    async def test_me_scheme_is_case_insensitive(self, client):
        await _register(client)
        token = (await _login(client)).json()["token"]

        resp = await client.get("/api/v1/auth/me", headers={"Authorization": f"bearer {token}"})
        assert resp.status_code == 200
        assert resp.json()["username"] == "alice"

    @pytest.mark.asyncio
    async def test_me_rejects_token_without_scheme(self, client):
        await _register(client)
        token = (await _login(client)).json()["token"]

        resp = await client.get("/api/v1/auth/me", headers={"Authorization": token})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_me_without_header(self, client):
        resp = await client.get("/api/v1/auth/me")
        assert resp.status_code == 401


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}
