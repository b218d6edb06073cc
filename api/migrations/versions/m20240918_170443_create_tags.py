"""create tags

Revision ID: m20240918_170443
Revises: m20240918_164352
Create Date: 2024-09-18 17:04:43

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240918_170443"
down_revision: Union[str, Sequence[str], None] = "m20240918_164352"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS "tag" (
          "id" serial PRIMARY KEY,
          "name" varchar NOT NULL
        )
        """
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE "tag"')
