"""create brewers

Revision ID: m20240918_164352
Revises: m20240918_164031
Create Date: 2024-09-18 16:43:52

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240918_164352"
down_revision: Union[str, Sequence[str], None] = "m20240918_164031"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BREWER_TYPES = ("Omni Dripper v2", "xPod", "Aeropress", "Omni Dripper v1", "Other")


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS "brewer" (
          "id" serial PRIMARY KEY,
          "type" varchar NOT NULL
        )
        """
    )
    values = ", ".join(f"('{brewer}')" for brewer in BREWER_TYPES)
    op.execute(f'INSERT INTO "brewer" ("type") VALUES {values}')


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE "brewer"')
