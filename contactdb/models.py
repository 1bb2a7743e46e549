"""SQLAlchemy 2.0 ORM models for customer contacts and their contact methods.

Covers 3 tables:
  - customer_contacts: people attached to a customer
  - customer_contact_emails: email addresses, keyed by (contact, address)
  - customer_contact_phones: phone numbers, keyed by (contact, number)
"""

import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Text,
    Uuid,
    false,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, composite, mapped_column, relationship
from sqlalchemy.sql import func


# ---------------------------------------------------------------------------
# Shared base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Allowed values used in CHECK constraints
# ---------------------------------------------------------------------------

EMAIL_TYPES = ("work", "personal", "other")
PHONE_TYPES = ("mobile", "work", "home", "fax", "other")


def _in_check(column: str, values: tuple) -> str:
    return (
        f"{column} IS NULL OR {column} IN ("
        + ", ".join(f"'{v}'" for v in values)
        + ")"
    )


_PHONE_SEPARATORS = re.compile(r"[\s\-.()]")


def normalize_email(address: str) -> str:
    """Lower-case and strip an email address (part of the primary key)."""
    return address.lower().strip()


def normalize_phone(number: str) -> str:
    """Drop whitespace and separators from a phone number, keeping a leading '+'."""
    return _PHONE_SEPARATORS.sub("", number)


# ---------------------------------------------------------------------------
# Composite identifiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CustomerContactEmailId:
    """Primary key of a CustomerContactEmail: owning contact + address."""

    customer_contact_id: uuid.UUID
    email_address: str


@dataclass(frozen=True)
class CustomerContactPhoneId:
    """Primary key of a CustomerContactPhone: owning contact + number."""

    customer_contact_id: uuid.UUID
    phone_number: str


# ===========================================================================
# Tables
# ===========================================================================


class CustomerContact(Base):
    """customer_contacts — a person at a customer who can be reached."""

    __tablename__ = "customer_contacts"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    job_title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_primary: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    emails: Mapped[list["CustomerContactEmail"]] = relationship(
        "CustomerContactEmail",
        back_populates="customer_contact",
        cascade="all, delete-orphan",
    )
    phones: Mapped[list["CustomerContactPhone"]] = relationship(
        "CustomerContactPhone",
        back_populates="customer_contact",
        cascade="all, delete-orphan",
    )


class CustomerContactEmail(Base):
    """customer_contact_emails — one email address of a customer contact."""

    __tablename__ = "customer_contact_emails"
    __table_args__ = (
        CheckConstraint(
            _in_check("email_type", EMAIL_TYPES),
            name="ck_customer_contact_email_type",
        ),
    )
    __mapper_args__ = {"eager_defaults": True}

    customer_contact_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("customer_contacts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    email_address: Mapped[str] = mapped_column(Text, primary_key=True)
    email_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_primary: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    id: Mapped[CustomerContactEmailId] = composite(
        CustomerContactEmailId, "customer_contact_id", "email_address"
    )

    customer_contact: Mapped["CustomerContact"] = relationship(
        "CustomerContact", back_populates="emails"
    )


class CustomerContactPhone(Base):
    """customer_contact_phones — one phone number of a customer contact."""

    __tablename__ = "customer_contact_phones"
    __table_args__ = (
        CheckConstraint(
            _in_check("phone_type", PHONE_TYPES),
            name="ck_customer_contact_phone_type",
        ),
    )
    __mapper_args__ = {"eager_defaults": True}

    customer_contact_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("customer_contacts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    phone_number: Mapped[str] = mapped_column(Text, primary_key=True)
    phone_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_primary: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    id: Mapped[CustomerContactPhoneId] = composite(
        CustomerContactPhoneId, "customer_contact_id", "phone_number"
    )

    customer_contact: Mapped["CustomerContact"] = relationship(
        "CustomerContact", back_populates="phones"
    )
