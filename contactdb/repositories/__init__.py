"""Repository layer for customer contacts.

Provides lookup and persistence functions per entity:
- customer_contacts: get_by_id, get_by_customer_id, save, delete_by_id
- customer_contact_emails: get_by_customer_contact_ids, count_by_customer_contact_ids,
                           get_by_id, exists_by_id, save, delete_by_id
- customer_contact_phones: same surface as customer_contact_emails

Functions flush but never commit; the caller's session scope owns the
transaction.
"""
