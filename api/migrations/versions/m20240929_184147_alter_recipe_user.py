"""alter recipe user

Revision ID: m20240929_184147
Revises: m20240918_182205
Create Date: 2024-09-29 18:41:47

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240929_184147"
down_revision: Union[str, Sequence[str], None] = "m20240918_182205"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('ALTER TABLE "recipe" ADD COLUMN IF NOT EXISTS "oauth_user" varchar')


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('ALTER TABLE "recipe" DROP COLUMN "oauth_user"')
