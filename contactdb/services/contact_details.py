"""Assemble a customer's contacts with all of their emails and phones.

Contacts are loaded first; emails and phones are then fetched with one
batch query each, keyed on the collected contact ids.
"""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from contactdb.repositories import customer_contact_emails as emails_repo
from contactdb.repositories import customer_contact_phones as phones_repo
from contactdb.repositories import customer_contacts as contacts_repo
from schemas.contact import (
    CustomerContactDetails,
    CustomerContactEmailOut,
    CustomerContactOut,
    CustomerContactPhoneOut,
)

logger = logging.getLogger(__name__)


async def get_contact_details(session: AsyncSession, customer_id: UUID) -> CustomerContactDetails:
    """Return the contacts, emails and phones belonging to one customer."""
    contacts = await contacts_repo.get_by_customer_id(session, customer_id)
    contact_ids = [c.id for c in contacts]

    emails = await emails_repo.get_by_customer_contact_ids(session, contact_ids)
    phones = await phones_repo.get_by_customer_contact_ids(session, contact_ids)

    logger.debug(
        "Customer %s: %d contacts, %d emails, %d phones",
        customer_id, len(contacts), len(emails), len(phones),
    )
    return CustomerContactDetails(
        customer_id=customer_id,
        customer_contacts=[CustomerContactOut.model_validate(c) for c in contacts],
        customer_contact_emails=[CustomerContactEmailOut.model_validate(e) for e in emails],
        customer_contact_phones=[CustomerContactPhoneOut.model_validate(p) for p in phones],
    )
