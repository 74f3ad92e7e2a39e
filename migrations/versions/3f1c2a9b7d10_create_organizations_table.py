"""Create organizations table

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-12 09:15:04.118203

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c2a9b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "organizations",
        sa.Column("organization_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("organization_name", sa.String(length=200), nullable=False),
        sa.Column("industry", sa.String(length=100), nullable=True),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("subscription_tier", sa.String(length=50), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("organization_id"),
    )
    op.create_index(
        "ix_organizations_organization_name",
        "organizations",
        ["organization_name"],
        unique=False,
    )


def downgrade():
    op.drop_index("ix_organizations_organization_name", table_name="organizations")
    op.drop_table("organizations")
