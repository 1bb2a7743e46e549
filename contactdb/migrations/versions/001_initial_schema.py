"""Initial schema: customer contacts, emails, phones.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "customer_contacts",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("customer_id", sa.Uuid, nullable=False),
        sa.Column("full_name", sa.Text, nullable=False),
        sa.Column("job_title", sa.Text, nullable=True),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_customer_contacts_customer_id", "customer_contacts", ["customer_id"]
    )

    op.create_table(
        "customer_contact_emails",
        sa.Column("customer_contact_id", sa.Uuid, nullable=False),
        sa.Column("email_address", sa.Text, nullable=False),
        sa.Column("email_type", sa.Text, nullable=True),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("customer_contact_id", "email_address", name="pk_customer_contact_emails"),
        sa.ForeignKeyConstraint(
            ["customer_contact_id"], ["customer_contacts.id"],
            name="fk_customer_contact_email_contact", ondelete="CASCADE",
        ),
        sa.CheckConstraint(
            "email_type IS NULL OR email_type IN ('work', 'personal', 'other')",
            name="ck_customer_contact_email_type",
        ),
    )

    op.create_table(
        "customer_contact_phones",
        sa.Column("customer_contact_id", sa.Uuid, nullable=False),
        sa.Column("phone_number", sa.Text, nullable=False),
        sa.Column("phone_type", sa.Text, nullable=True),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("customer_contact_id", "phone_number", name="pk_customer_contact_phones"),
        sa.ForeignKeyConstraint(
            ["customer_contact_id"], ["customer_contacts.id"],
            name="fk_customer_contact_phone_contact", ondelete="CASCADE",
        ),
        sa.CheckConstraint(
            "phone_type IS NULL OR phone_type IN ('mobile', 'work', 'home', 'fax', 'other')",
            name="ck_customer_contact_phone_type",
        ),
    )


def downgrade() -> None:
    op.drop_table("customer_contact_phones")
    op.drop_table("customer_contact_emails")
    op.drop_index("ix_customer_contacts_customer_id", table_name="customer_contacts")
    op.drop_table("customer_contacts")
