"""Customer contact repository — the parent rows emails and phones hang off."""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contactdb.models import CustomerContact

logger = logging.getLogger(__name__)


async def get_by_id(session: AsyncSession, contact_id: UUID) -> Optional[CustomerContact]:
    """Return the CustomerContact with this id, or None."""
    return await session.get(CustomerContact, contact_id)


async def get_by_customer_id(session: AsyncSession, customer_id: UUID) -> list[CustomerContact]:
    """Return all contacts of a customer, primary contact first, then by name."""
    result = await session.execute(
        select(CustomerContact)
        .where(CustomerContact.customer_id == customer_id)
        .order_by(CustomerContact.is_primary.desc(), CustomerContact.full_name)
    )
    return list(result.scalars().all())


async def save(session: AsyncSession, contact: CustomerContact) -> CustomerContact:
    """Insert or update a contact by primary key and return the persistent row."""
    merged = await session.merge(contact)
    await session.flush()
    logger.debug("Saved customer contact %s", merged.id)
    return merged


async def delete_by_id(session: AsyncSession, contact_id: UUID) -> bool:
    """Delete a contact together with its emails and phones.

    Returns False when no contact has this id.
    """
    contact = await session.get(CustomerContact, contact_id)
    if contact is None:
        return False
    await session.delete(contact)
    await session.flush()
    logger.debug("Deleted customer contact %s", contact_id)
    return True
