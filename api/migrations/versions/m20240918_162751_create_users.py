"""create users

Revision ID: m20240918_162751
Revises:
Create Date: 2024-09-18 16:27:51

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240918_162751"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ADMIN_EMAIL = "admin@localhost.com"
ADMIN_USERNAME = "admin"


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS "user" (
          "id" serial PRIMARY KEY,
          "email" varchar NOT NULL,
          "username" varchar NOT NULL,
          "created_at" timestamptz NOT NULL
        )
        """
    )
    op.execute(
        f"""
        INSERT INTO "user" ("email", "username", "created_at")
        VALUES ('{ADMIN_EMAIL}', '{ADMIN_USERNAME}', now())
        """
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE "user"')
