import asyncio
import uuid

import pytest
from httpx import ASGITransport, AsyncClient

from notes_api.core.security import verify_password
from notes_api.main import app
from notes_api.models import User


pytestmark = pytest.mark.asyncio


async def _delete(client, payload):
    return await client.request("DELETE", "/users", json=payload)


async def test_healthz(client):
    resp = await client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


async def test_list_users_empty_is_bad_request(client):
    resp = await client.get("/users")
    assert resp.status_code == 400
    assert resp.json() == {"message": "No Users Found"}


async def test_create_and_list_user(client):
    resp = await client.post(
        "/users",
        json={"username": "alice", "password": "pw", "roles": ["editor"]},
    )
    assert resp.status_code == 201
    assert resp.json() == {"message": "New User alice Created"}

    stored = await User.get(username="alice")
    assert stored.password != "pw"
    assert verify_password("pw", stored.password)
    assert stored.roles == ["editor"]
    assert stored.active is True

    list_resp = await client.get("/users")
    assert list_resp.status_code == 200
    users = list_resp.json()
    assert users == [{"id": str(stored.id), "username": "alice", "roles": ["editor"], "active": True}]


async def test_list_never_exposes_password(client, create_user):
    await create_user()
    await create_user()
    resp = await client.get("/users")
    assert resp.status_code == 200
    assert len(resp.json()) == 2
    assert all("password" not in u for u in resp.json())


@pytest.mark.parametrize(
    "payload",
    [
        {"password": "pw", "roles": ["Employee"]},
        {"username": "alice", "roles": ["Employee"]},
        {"username": "alice", "password": "pw", "roles": []},
        {"username": "alice", "password": "pw"},
        {"username": "alice", "password": "pw", "roles": "Employee"},
    ],
)
async def test_create_rejects_incomplete_body(client, payload):
    resp = await client.post("/users", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "All Fields Are Required"}
    assert await User.all().count() == 0


async def test_create_duplicate_username_conflict(client, create_user):
    existing, _ = await create_user(username="alice")
    resp = await client.post(
        "/users",
        json={"username": "alice", "password": "other", "roles": ["Manager"]},
    )
    assert resp.status_code == 409
    assert resp.json() == {"message": "Duplicate Username"}
    assert await User.all().count() == 1
    reloaded = await User.get(id=existing.id)
    assert reloaded.password == existing.password
    assert reloaded.roles == ["Employee"]


async def test_update_user_fields(client, create_user):
    user, _ = await create_user(username="alice")
    resp = await client.patch(
        "/users",
        json={"id": str(user.id), "username": "alicia", "roles": ["Manager"], "active": False},
    )
    assert resp.status_code == 200
    assert resp.json() == {"message": "alicia Updated"}

    reloaded = await User.get(id=user.id)
    assert reloaded.username == "alicia"
    assert reloaded.roles == ["Manager"]
    assert reloaded.active is False


async def test_update_password_only_when_given(client, create_user):
    user, _ = await create_user(username="alice", password="old-pw")
    body = {"id": str(user.id), "username": "alice", "roles": ["Employee"], "active": True}

    resp = await client.patch("/users", json=body)
    assert resp.status_code == 200
    assert (await User.get(id=user.id)).password == user.password

    resp = await client.patch("/users", json={**body, "password": "new-pw"})
    assert resp.status_code == 200
    changed = (await User.get(id=user.id)).password
    assert changed != user.password
    assert verify_password("new-pw", changed)


async def test_update_duplicate_username_conflict(client, create_user):
    alice, _ = await create_user(username="alice")
    await create_user(username="bob")
    resp = await client.patch(
        "/users",
        json={"id": str(alice.id), "username": "bob", "roles": ["Employee"], "active": True},
    )
    assert resp.status_code == 409
    assert resp.json() == {"message": "Duplicate Username"}
    assert (await User.get(id=alice.id)).username == "alice"


@pytest.mark.parametrize("user_id", [str(uuid.uuid4()), "not-a-uuid"])
async def test_update_unknown_user(client, user_id):
    resp = await client.patch(
        "/users",
        json={"id": user_id, "username": "ghost", "roles": ["Employee"], "active": True},
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "User Not Found"}
    assert await User.all().count() == 0


async def test_update_requires_boolean_active(client, create_user):
    user, _ = await create_user(username="alice")
    resp = await client.patch(
        "/users",
        json={"id": str(user.id), "username": "alice", "roles": ["Employee"], "active": "yes"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "All Fields Are Required"}


async def test_delete_user_with_notes_is_refused(client, create_user, create_note):
    user, _ = await create_user(username="alice")
    await create_note(user)
    resp = await _delete(client, {"id": str(user.id)})
    assert resp.status_code == 400
    assert resp.json() == {"message": "User Has Assigned Notes"}
    assert await User.exists(id=user.id)


async def test_delete_user_then_repeat(client, create_user):
    user, _ = await create_user(username="alice")
    resp = await _delete(client, {"id": str(user.id)})
    assert resp.status_code == 200
    assert resp.json() == f"Username alice With ID {user.id} Deleted"
    assert not await User.exists(id=user.id)

    again = await _delete(client, {"id": str(user.id)})
    assert again.status_code == 400
    assert again.json() == {"message": "User Not Found"}


async def test_delete_requires_id(client):
    resp = await _delete(client, {})
    assert resp.status_code == 400
    assert resp.json() == {"message": "User ID Is Required"}


async def test_concurrent_duplicate_create_hits_unique_index(client):
    # Both requests pass the duplicate check; the unique index rejects the second write
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    payload = {"username": "dup", "password": "pw", "roles": ["Employee"]}
    async with AsyncClient(transport=transport, base_url="http://testserver") as raw_client:
        responses = await asyncio.gather(
            raw_client.post("/users", json=payload),
            raw_client.post("/users", json=payload),
        )

    statuses = sorted(r.status_code for r in responses)
    assert statuses == [201, 500]
    failed = next(r for r in responses if r.status_code == 500)
    assert failed.json() == {"message": "Internal Server Error", "isError": True}
    assert await User.filter(username="dup").count() == 1
