"""
Data-access facade.
Storage is the only path to persisted state. Each operation maps to one query
or one write, and every write is committed on its own: there is no
transaction spanning two Storage calls.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound
from app.core.logging import get_logger
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.contact_form_repository import ContactFormRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.message_repository import MessageRepository
from app.db.repositories.session_repository import SessionRepository
from app.db.repositories.user_repository import UserRepository
from app.models import (
    Client,
    ClientStatus,
    ContactForm,
    ContactFormStatus,
    Document,
    DocumentStatus,
    Message,
    User,
    UserSession,
)

logger = get_logger(__name__)


class Storage:
    """Typed CRUD and aggregate queries over one request-scoped session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.sessions = SessionRepository(session)
        self.clients = ClientRepository(session)
        self.contact_forms = ContactFormRepository(session)
        self.messages = MessageRepository(session)
        self.documents = DocumentRepository(session)

    # ---------------- USERS ----------------

    async def get_user(self, id: str) -> Optional[User]:
        return await self.users.get(id)

    async def upsert_user(self, user_data: Dict[str, Any]) -> User:
        user = await self.users.upsert(user_data)
        await self.session.commit()
        return user

    # ---------------- SESSIONS ----------------

    async def create_session(self, sid: str, sess: Dict[str, Any], expire: datetime) -> UserSession:
        record = await self.sessions.create(sid=sid, sess=sess, expire=expire)
        await self.session.commit()
        return record

    async def get_session(self, sid: str) -> Optional[UserSession]:
        """Get a live session; expired rows read as absent."""
        return await self.sessions.get_active(sid)

    async def delete_session(self, sid: str) -> bool:
        deleted = await self.sessions.delete(sid)
        await self.session.commit()
        return deleted

    # ---------------- CLIENTS ----------------

    async def get_clients(self) -> List[Client]:
        return await self.clients.list_recent()

    async def get_client(self, id: int) -> Optional[Client]:
        return await self.clients.get(id)

    async def get_client_by_user_id(self, user_id: str) -> Optional[Client]:
        """Pure lookup; never creates anything."""
        return await self.clients.get_by_user_id(user_id)

    async def create_client(self, data: Dict[str, Any]) -> Client:
        client = await self.clients.create(**data)
        await self.session.commit()
        return client

    async def find_or_create_client_for_user(self, user: User) -> Client:
        """
        Return the user's client record, creating a pending one if none exists.

        Side effect: inserts a Client row on first call for a user. Repeated
        calls return the same row; a concurrent creator losing the unique
        constraint on ``user_id`` re-reads the winner's row.
        """
        user_id = user.id
        client = await self.clients.get_by_user_id(user_id)
        if client is not None:
            return client

        contact_name = user.full_name or user.email or user_id
        try:
            # savepoint: losing the race must not expire the caller's loaded user
            async with self.session.begin_nested():
                client = await self.clients.create(
                    user_id=user_id,
                    business_name=f"{contact_name}'s Business",
                    contact_name=contact_name,
                    email=user.email or "",
                    status=ClientStatus.PENDING,
                )
        except IntegrityError:
            client = await self.clients.get_by_user_id(user_id)
            if client is None:
                raise
            return client
        await self.session.commit()

        logger.info(
            f"Created client record {client.id} for user {user_id}",
            extra={"client_id": client.id, "user_id": user_id},
        )
        return client

    # ---------------- CONTACT FORMS ----------------

    async def get_contact_forms(self) -> List[ContactForm]:
        return await self.contact_forms.list_recent()

    async def create_contact_form(self, data: Dict[str, Any]) -> ContactForm:
        """Insert an inquiry; status is always unread regardless of input."""
        values = {**data, "status": ContactFormStatus.UNREAD}
        contact_form = await self.contact_forms.create(**values)
        await self.session.commit()
        return contact_form

    async def update_contact_form_status(self, id: int, status: ContactFormStatus) -> ContactForm:
        contact_form = await self.contact_forms.update(id, status=status)
        if contact_form is None:
            raise NotFound("Contact form not found", details=[{"id": id}])
        await self.session.commit()
        return contact_form

    # ---------------- MESSAGES ----------------

    async def get_all_messages(self) -> List[Message]:
        return await self.messages.list_recent()

    async def get_messages_by_client_id(self, client_id: int) -> List[Message]:
        return await self.messages.list_recent(client_id=client_id)

    async def create_message(self, data: Dict[str, Any]) -> Message:
        """Insert a message; it always starts unread."""
        values = {**data, "is_read": False}
        message = await self.messages.create(**values)
        await self.session.commit()
        return message

    # ---------------- DOCUMENTS ----------------

    async def get_all_documents(self) -> List[Document]:
        return await self.documents.list_recent()

    async def get_documents_by_client_id(self, client_id: int) -> List[Document]:
        return await self.documents.list_recent(client_id=client_id)

    async def create_document(self, data: Dict[str, Any]) -> Document:
        document = await self.documents.create(**data)
        await self.session.commit()
        return document

    # ---------------- ADMIN STATS ----------------

    async def get_admin_stats(self) -> Dict[str, int]:
        """
        Four independent counts for the admin dashboard.
        They are separate queries, not one snapshot.
        """
        return {
            "total_clients": await self.clients.count(),
            "active_projects": await self.clients.count(status=ClientStatus.ACTIVE),
            "pending_signatures": await self.documents.count(status=DocumentStatus.PENDING),
            "new_inquiries": await self.contact_forms.count(status=ContactFormStatus.UNREAD),
        }
