"""Add contact_inquiries

Revision ID: 8b52e0c4a913
Revises: 3f1c9a7b2d40
Create Date: 2026-10-19 15:40:07.552190

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8b52e0c4a913"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7b2d40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "contact_inquiries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("property_id", sa.Integer(), nullable=True),
        sa.Column("inquiry_type", sa.String(length=50), nullable=True),
        sa.Column("subject", sa.String(length=255), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("preferred_contact_method", sa.String(length=20), nullable=True),
        sa.Column("preferred_contact_time", sa.String(length=100), nullable=True),
        sa.Column("source", sa.String(length=50), nullable=True),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("referrer", sa.String(length=500), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("priority", sa.String(length=20), nullable=False),
        sa.Column("assigned_to", sa.String(length=200), nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=True,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("contacted_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["property_id"], ["properties.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_contact_inquiries_id"), "contact_inquiries", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_contact_inquiries_email"), "contact_inquiries", ["email"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_contact_inquiries_email"), table_name="contact_inquiries")
    op.drop_index(op.f("ix_contact_inquiries_id"), table_name="contact_inquiries")
    op.drop_table("contact_inquiries")
