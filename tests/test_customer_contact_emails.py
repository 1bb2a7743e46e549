"""Repository tests for customer contact emails."""
import uuid

import pytest

from contactdb.models import CustomerContactEmail, CustomerContactEmailId
from contactdb.repositories import customer_contact_emails as emails_repo


async def _add_email(session, contact_id, address, **kwargs):
    return await emails_repo.save(
        session,
        CustomerContactEmail(customer_contact_id=contact_id, email_address=address, **kwargs),
    )


@pytest.fixture
def addresses(make_contact, session):
    """Seed {(C1,e1), (C1,e2), (C2,e3)} and return (c1, c2)."""

    async def _seed():
        c1 = await make_contact(full_name="Contact One")
        c2 = await make_contact(full_name="Contact Two")
        await _add_email(session, c1.id, "e1@example.com")
        await _add_email(session, c1.id, "e2@example.com")
        await _add_email(session, c2.id, "e3@example.com")
        return c1, c2

    return _seed


def _keys(emails):
    return {(e.customer_contact_id, e.email_address) for e in emails}


@pytest.mark.asyncio
async def test_find_by_single_contact_returns_all_its_emails(session, addresses):
    c1, _ = await addresses()
    emails = await emails_repo.get_by_customer_contact_ids(session, [c1.id])
    assert _keys(emails) == {(c1.id, "e1@example.com"), (c1.id, "e2@example.com")}


@pytest.mark.asyncio
async def test_find_by_several_contacts_returns_union(session, addresses):
    c1, c2 = await addresses()
    emails = await emails_repo.get_by_customer_contact_ids(session, [c1.id, c2.id])
    assert _keys(emails) == {
        (c1.id, "e1@example.com"),
        (c1.id, "e2@example.com"),
        (c2.id, "e3@example.com"),
    }


@pytest.mark.asyncio
async def test_find_by_unknown_contact_returns_empty(session, addresses):
    await addresses()
    assert await emails_repo.get_by_customer_contact_ids(session, [uuid.uuid4()]) == []


@pytest.mark.asyncio
async def test_find_by_empty_list_returns_empty(session, addresses):
    await addresses()
    assert await emails_repo.get_by_customer_contact_ids(session, []) == []


@pytest.mark.asyncio
async def test_find_accepts_duplicate_ids_and_generators(session, addresses):
    c1, _ = await addresses()
    emails = await emails_repo.get_by_customer_contact_ids(session, (i for i in [c1.id, c1.id]))
    assert len(emails) == 2


@pytest.mark.asyncio
async def test_find_rejects_none(session):
    with pytest.raises(TypeError):
        await emails_repo.get_by_customer_contact_ids(session, None)


@pytest.mark.asyncio
async def test_count_by_customer_contact_ids(session, addresses):
    c1, c2 = await addresses()
    assert await emails_repo.count_by_customer_contact_ids(session, [c1.id]) == 2
    assert await emails_repo.count_by_customer_contact_ids(session, [c1.id, c2.id]) == 3
    assert await emails_repo.count_by_customer_contact_ids(session, []) == 0


@pytest.mark.asyncio
async def test_save_normalises_address_and_get_by_id_finds_it(session, make_contact):
    contact = await make_contact()
    saved = await _add_email(session, contact.id, "  Jane.Doe@Example.COM ", email_type="work")

    assert saved.email_address == "jane.doe@example.com"
    found = await emails_repo.get_by_id(
        session, CustomerContactEmailId(contact.id, "JANE.DOE@example.com")
    )
    assert found is saved
    assert found.id == CustomerContactEmailId(contact.id, "jane.doe@example.com")


@pytest.mark.asyncio
async def test_save_same_key_updates_existing_row(session, make_contact):
    contact = await make_contact()
    await _add_email(session, contact.id, "jane@example.com", email_type="work")
    await _add_email(session, contact.id, "jane@example.com", email_type="personal", is_primary=True)

    emails = await emails_repo.get_by_customer_contact_ids(session, [contact.id])
    assert len(emails) == 1
    assert emails[0].email_type == "personal"
    assert emails[0].is_primary is True


@pytest.mark.asyncio
async def test_exists_and_delete_by_id(session, make_contact):
    contact = await make_contact()
    await _add_email(session, contact.id, "jane@example.com")
    key = CustomerContactEmailId(contact.id, "jane@example.com")

    assert await emails_repo.exists_by_id(session, key) is True
    assert await emails_repo.delete_by_id(session, key) is True
    assert await emails_repo.exists_by_id(session, key) is False
    assert await emails_repo.delete_by_id(session, key) is False


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(session):
    key = CustomerContactEmailId(uuid.uuid4(), "nobody@example.com")
    assert await emails_repo.get_by_id(session, key) is None
