"""Customer contact email repository — batch lookup by owning contact."""
import logging
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contactdb.models import CustomerContactEmail, CustomerContactEmailId, normalize_email

logger = logging.getLogger(__name__)


def _identity(key: CustomerContactEmailId) -> tuple:
    return (key.customer_contact_id, normalize_email(key.email_address))


async def get_by_customer_contact_ids(
    session: AsyncSession, customer_contact_ids: Iterable[UUID]
) -> list[CustomerContactEmail]:
    """Return every email whose owning contact id is in customer_contact_ids.

    An empty collection returns [] without querying. Rows are ordered by
    (customer_contact_id, email_address).
    """
    ids = list(customer_contact_ids)
    if not ids:
        return []
    result = await session.execute(
        select(CustomerContactEmail)
        .where(CustomerContactEmail.customer_contact_id.in_(ids))
        .order_by(
            CustomerContactEmail.customer_contact_id,
            CustomerContactEmail.email_address,
        )
    )
    emails = list(result.scalars().all())
    logger.debug("Found %d emails for %d customer contacts", len(emails), len(ids))
    return emails


async def count_by_customer_contact_ids(
    session: AsyncSession, customer_contact_ids: Iterable[UUID]
) -> int:
    """Return how many emails belong to the given customer contacts."""
    ids = list(customer_contact_ids)
    if not ids:
        return 0
    result = await session.execute(
        select(func.count())
        .select_from(CustomerContactEmail)
        .where(CustomerContactEmail.customer_contact_id.in_(ids))
    )
    return result.scalar_one()


async def get_by_id(
    session: AsyncSession, key: CustomerContactEmailId
) -> Optional[CustomerContactEmail]:
    """Return the email with this composite key, or None."""
    return await session.get(CustomerContactEmail, _identity(key))


async def exists_by_id(session: AsyncSession, key: CustomerContactEmailId) -> bool:
    return await get_by_id(session, key) is not None


async def save(session: AsyncSession, email: CustomerContactEmail) -> CustomerContactEmail:
    """Insert or update an email by composite key (address is normalised first)."""
    email.email_address = normalize_email(email.email_address)
    merged = await session.merge(email)
    await session.flush()
    logger.debug("Saved customer contact email %s", merged.id)
    return merged


async def delete_by_id(session: AsyncSession, key: CustomerContactEmailId) -> bool:
    """Delete the email with this key. Returns False when nothing matched."""
    email = await get_by_id(session, key)
    if email is None:
        return False
    await session.delete(email)
    await session.flush()
    logger.debug("Deleted customer contact email %s", key)
    return True
