"""create tags_recipes

Revision ID: m20240918_182205
Revises: m20240918_170716
Create Date: 2024-09-18 18:22:05

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240918_182205"
down_revision: Union[str, Sequence[str], None] = "m20240918_170716"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS "tag_recipe" (
          "id" serial PRIMARY KEY,
          "tag_id" integer NOT NULL,
          "recipe_id" integer NOT NULL,
          CONSTRAINT "FK_tagrecipe_tag_id" FOREIGN KEY ("tag_id") REFERENCES "tag" ("id"),
          CONSTRAINT "FK_tagrecipe_recipe_id" FOREIGN KEY ("recipe_id") REFERENCES "recipe" ("id")
        )
        """
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE "tag_recipe"')
