"""add_user_password_hash

Store a password hash for accounts created through registration. Accounts
provisioned without a password keep it NULL and cannot log in.

Revision ID: 8b2e4d61c0f3
Revises: 3f1c2a9d7b64
Create Date: 2026-10-19 15:40:02.118734

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8b2e4d61c0f3"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b64"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("users", sa.Column("password_hash", sa.Text(), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "password_hash")
