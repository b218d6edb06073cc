"""create roasts

Revision ID: m20240918_164031
Revises: m20240918_162751
Create Date: 2024-09-18 16:40:31

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240918_164031"
down_revision: Union[str, Sequence[str], None] = "m20240918_162751"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROAST_LEVELS = ("Light", "Dark", "Medium", "Medium-Dark", "Extra-Dark", "Extra-light")


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS "roast" (
          "id" serial PRIMARY KEY,
          "level" varchar NOT NULL
        )
        """
    )
    values = ", ".join(f"('{level}')" for level in ROAST_LEVELS)
    op.execute(f'INSERT INTO "roast" ("level") VALUES {values}')


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE "roast"')
