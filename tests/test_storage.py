"""
Data-access layer tests against in-memory SQLite.
"""

import random
from datetime import datetime, timedelta

import pytest
from sqlalchemy import select

from app.core.exceptions import NotFound
from app.models import (
    ClientStatus,
    ContactForm,
    ContactFormStatus,
    DocumentStatus,
    UserRole,
)


BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def shuffled_offsets(count: int) -> list:
    offsets = list(range(count))
    random.Random(7).shuffle(offsets)
    return offsets


def newest_first(rows) -> list:
    return [row.id for row in sorted(rows, key=lambda row: row.created_at, reverse=True)]


async def test_upsert_user_inserts_then_overwrites_supplied_fields(storage):
    created = await storage.upsert_user({"id": "u-1", "email": "a@example.com", "first_name": "Ann"})
    assert created.role == UserRole.CLIENT
    assert created.first_name == "Ann"

    await storage.upsert_user({"id": "u-1", "role": UserRole.ADMIN})
    updated = await storage.upsert_user({"id": "u-1", "email": "ann@example.com", "last_name": "Lee"})

    assert updated.id == "u-1"
    assert updated.email == "ann@example.com"
    assert updated.first_name == "Ann"
    assert updated.last_name == "Lee"
    # role was not supplied on the last login, so it is kept
    assert updated.role == UserRole.ADMIN
    assert updated.updated_at >= created.updated_at


async def test_get_user_missing_returns_none(storage):
    assert await storage.get_user("nobody") is None


async def test_get_clients_newest_first(storage):
    for offset in shuffled_offsets(5):
        await storage.create_client({
            "business_name": f"Biz {offset}",
            "contact_name": "Contact",
            "email": f"biz{offset}@example.com",
            "created_at": BASE_TIME + timedelta(minutes=offset),
        })

    clients = await storage.get_clients()

    assert [c.business_name for c in clients] == [f"Biz {i}" for i in range(4, -1, -1)]
    assert [c.id for c in clients] == newest_first(clients)


async def test_get_contact_forms_newest_first(storage):
    for offset in shuffled_offsets(4):
        await storage.create_contact_form({
            "name": f"Lead {offset}",
            "email": "lead@example.com",
            "message": "Hello",
            "created_at": BASE_TIME + timedelta(hours=offset),
        })

    forms = await storage.get_contact_forms()

    assert [f.name for f in forms] == ["Lead 3", "Lead 2", "Lead 1", "Lead 0"]


async def test_get_all_messages_newest_first(storage, client_user):
    for offset in shuffled_offsets(4):
        await storage.create_message({
            "sender_id": client_user.id,
            "content": f"msg {offset}",
            "created_at": BASE_TIME + timedelta(seconds=offset),
        })

    messages = await storage.get_all_messages()

    assert [m.content for m in messages] == ["msg 3", "msg 2", "msg 1", "msg 0"]


async def test_get_all_documents_newest_first(storage):
    client = await storage.create_client({
        "business_name": "Acme", "contact_name": "Wile", "email": "wile@acme.test",
    })
    for offset in shuffled_offsets(4):
        await storage.create_document({
            "client_id": client.id,
            "name": f"doc-{offset}.pdf",
            "type": "pdf",
            "file_path": f"/files/doc-{offset}.pdf",
            "created_at": BASE_TIME + timedelta(days=offset),
        })

    documents = await storage.get_all_documents()

    assert [d.name for d in documents] == ["doc-3.pdf", "doc-2.pdf", "doc-1.pdf", "doc-0.pdf"]
    assert all(d.status == DocumentStatus.PENDING for d in documents)
    assert all(d.requires_signature is False for d in documents)


async def test_messages_and_documents_filter_by_client(storage):
    mine = await storage.create_client({"business_name": "Mine", "contact_name": "M", "email": "m@x.test"})
    other = await storage.create_client({"business_name": "Other", "contact_name": "O", "email": "o@x.test"})
    await storage.create_message({"client_id": mine.id, "content": "for me"})
    await storage.create_message({"client_id": other.id, "content": "not for me"})
    await storage.create_message({"content": "no client"})
    await storage.create_document({"client_id": mine.id, "name": "a", "type": "pdf", "file_path": "/a"})
    await storage.create_document({"client_id": other.id, "name": "b", "type": "pdf", "file_path": "/b"})

    messages = await storage.get_messages_by_client_id(mine.id)
    documents = await storage.get_documents_by_client_id(mine.id)

    assert [m.content for m in messages] == ["for me"]
    assert [d.name for d in documents] == ["a"]


async def test_create_contact_form_forces_unread(storage):
    form = await storage.create_contact_form({
        "name": "Sam",
        "email": "sam@example.com",
        "message": "Call me",
        "status": ContactFormStatus.RESPONDED,
    })

    assert form.status == ContactFormStatus.UNREAD
    assert form.company is None


async def test_create_message_forces_unread(storage, client_user):
    message = await storage.create_message({
        "sender_id": client_user.id,
        "content": "Hi",
        "is_read": True,
    })

    assert message.is_read is False


async def test_find_or_create_client_is_idempotent(storage, client_user):
    assert await storage.get_client_by_user_id(client_user.id) is None

    first = await storage.find_or_create_client_for_user(client_user)
    second = await storage.find_or_create_client_for_user(client_user)

    assert first.id == second.id
    assert first.user_id == "u1"
    assert first.business_name == "Jane Doe's Business"
    assert first.contact_name == "Jane Doe"
    assert first.email == "jane@x.com"
    assert first.status == ClientStatus.PENDING
    assert (await storage.get_client_by_user_id(client_user.id)).id == first.id
    assert len(await storage.get_clients()) == 1


async def test_find_or_create_client_losing_race_keeps_user_loaded(storage, client_user, monkeypatch):
    winner = await storage.create_client({
        "user_id": client_user.id,
        "business_name": "Winner",
        "contact_name": "Jane Doe",
        "email": "jane@x.com",
    })
    original = storage.clients.get_by_user_id
    misses = []

    async def stale_then_real(user_id):
        # first lookup runs before the concurrent insert becomes visible
        if not misses:
            misses.append(user_id)
            return None
        return await original(user_id)

    monkeypatch.setattr(storage.clients, "get_by_user_id", stale_then_real)

    client = await storage.find_or_create_client_for_user(client_user)

    assert misses == ["u1"]
    assert client.id == winner.id
    assert client.business_name == "Winner"
    assert client_user.id == "u1"
    assert client_user.email == "jane@x.com"
    assert len(await storage.get_clients()) == 1


async def test_find_or_create_client_without_names_uses_email(storage):
    user = await storage.upsert_user({"id": "u-anon", "email": "anon@example.com"})

    client = await storage.find_or_create_client_for_user(user)

    assert client.contact_name == "anon@example.com"
    assert client.business_name == "anon@example.com's Business"


async def test_get_client_by_user_id_never_creates(storage, client_user):
    assert await storage.get_client_by_user_id(client_user.id) is None
    assert await storage.get_clients() == []


async def test_admin_stats_counts(storage):
    for status in (ClientStatus.ACTIVE, ClientStatus.ACTIVE, ClientStatus.PENDING):
        await storage.create_client({
            "business_name": "Biz", "contact_name": "C", "email": "c@x.test", "status": status,
        })
    doc_statuses = [
        DocumentStatus.PENDING,
        DocumentStatus.PENDING,
        DocumentStatus.SIGNED,
        DocumentStatus.REVIEWED,
        DocumentStatus.SIGNED,
    ]
    for status in doc_statuses:
        await storage.create_document({
            "name": "d", "type": "pdf", "file_path": "/d", "status": status,
        })
    forms = []
    for _ in range(4):
        forms.append(await storage.create_contact_form({
            "name": "Lead", "email": "lead@x.test", "message": "Hi",
        }))
    for form, status in zip(forms[1:], (ContactFormStatus.READ, ContactFormStatus.READ, ContactFormStatus.RESPONDED)):
        await storage.update_contact_form_status(form.id, status)

    stats = await storage.get_admin_stats()

    assert stats == {
        "total_clients": 3,
        "active_projects": 2,
        "pending_signatures": 2,
        "new_inquiries": 1,
    }


async def test_update_contact_form_status(storage):
    form = await storage.create_contact_form({"name": "Lead", "email": "l@x.test", "message": "Hi"})

    updated = await storage.update_contact_form_status(form.id, ContactFormStatus.READ)

    assert updated.id == form.id
    assert updated.status == ContactFormStatus.READ
    assert updated.message == "Hi"


async def test_update_contact_form_status_missing_id_raises_not_found(storage, test_db_session):
    form = await storage.create_contact_form({"name": "Lead", "email": "l@x.test", "message": "Hi"})

    with pytest.raises(NotFound):
        await storage.update_contact_form_status(form.id + 100, ContactFormStatus.READ)

    rows = (await test_db_session.execute(select(ContactForm))).scalars().all()
    assert [(row.id, row.status) for row in rows] == [(form.id, ContactFormStatus.UNREAD)]


async def test_expired_session_reads_as_absent(storage, client_user):
    await storage.create_session("live", {"user_id": client_user.id}, datetime.utcnow() + timedelta(minutes=5))
    await storage.create_session("stale", {"user_id": client_user.id}, datetime.utcnow() - timedelta(minutes=5))

    live = await storage.get_session("live")

    assert live is not None
    assert live.user_id == client_user.id
    assert await storage.get_session("stale") is None
    assert await storage.get_session("missing") is None


async def test_delete_session(storage, client_user):
    await storage.create_session("sid-1", {"user_id": client_user.id}, datetime.utcnow() + timedelta(minutes=5))

    assert await storage.delete_session("sid-1") is True
    assert await storage.get_session("sid-1") is None
    assert await storage.delete_session("sid-1") is False
