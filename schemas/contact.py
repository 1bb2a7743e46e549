"""Read models for customer contacts and their emails and phones."""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CustomerContactOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    customer_id: UUID
    full_name: str
    job_title: Optional[str] = None
    is_primary: bool = False


class CustomerContactEmailOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_contact_id: UUID
    email_address: str
    email_type: Optional[str] = None
    is_primary: bool = False
    created_at: Optional[datetime] = None


class CustomerContactPhoneOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_contact_id: UUID
    phone_number: str
    phone_type: Optional[str] = None
    is_primary: bool = False
    created_at: Optional[datetime] = None


class CustomerContactDetails(BaseModel):
    """Everything a client needs to render a customer's contact card."""

    customer_id: UUID
    customer_contacts: List[CustomerContactOut] = Field(default_factory=list)
    customer_contact_emails: List[CustomerContactEmailOut] = Field(default_factory=list)
    customer_contact_phones: List[CustomerContactPhoneOut] = Field(default_factory=list)
