"""Customer contact phone repository — batch lookup by owning contact."""
import logging
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contactdb.models import CustomerContactPhone, CustomerContactPhoneId, normalize_phone

logger = logging.getLogger(__name__)


def _identity(key: CustomerContactPhoneId) -> tuple:
    return (key.customer_contact_id, normalize_phone(key.phone_number))


async def get_by_customer_contact_ids(
    session: AsyncSession, customer_contact_ids: Iterable[UUID]
) -> list[CustomerContactPhone]:
    """Return every phone whose owning contact id is in customer_contact_ids.

    An empty collection returns [] without querying. Rows are ordered by
    (customer_contact_id, phone_number).
    """
    ids = list(customer_contact_ids)
    if not ids:
        return []
    result = await session.execute(
        select(CustomerContactPhone)
        .where(CustomerContactPhone.customer_contact_id.in_(ids))
        .order_by(
            CustomerContactPhone.customer_contact_id,
            CustomerContactPhone.phone_number,
        )
    )
    phones = list(result.scalars().all())
    logger.debug("Found %d phones for %d customer contacts", len(phones), len(ids))
    return phones


async def count_by_customer_contact_ids(
    session: AsyncSession, customer_contact_ids: Iterable[UUID]
) -> int:
    """Return how many phones belong to the given customer contacts."""
    ids = list(customer_contact_ids)
    if not ids:
        return 0
    result = await session.execute(
        select(func.count())
        .select_from(CustomerContactPhone)
        .where(CustomerContactPhone.customer_contact_id.in_(ids))
    )
    return result.scalar_one()


async def get_by_id(
    session: AsyncSession, key: CustomerContactPhoneId
) -> Optional[CustomerContactPhone]:
    """Return the phone with this composite key, or None."""
    return await session.get(CustomerContactPhone, _identity(key))


async def exists_by_id(session: AsyncSession, key: CustomerContactPhoneId) -> bool:
    return await get_by_id(session, key) is not None


async def save(session: AsyncSession, phone: CustomerContactPhone) -> CustomerContactPhone:
    """Insert or update a phone by composite key (number is normalised first)."""
    phone.phone_number = normalize_phone(phone.phone_number)
    merged = await session.merge(phone)
    await session.flush()
    logger.debug("Saved customer contact phone %s", merged.id)
    return merged


async def delete_by_id(session: AsyncSession, key: CustomerContactPhoneId) -> bool:
    """Delete the phone with this key. Returns False when nothing matched."""
    phone = await get_by_id(session, key)
    if phone is None:
        return False
    await session.delete(phone)
    await session.flush()
    logger.debug("Deleted customer contact phone %s", key)
    return True
