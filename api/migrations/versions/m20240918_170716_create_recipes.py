"""create recipes

Seeds one recipe owned by the admin user, using the first roast and brewer.

Revision ID: m20240918_170716
Revises: m20240918_170443
Create Date: 2024-09-18 17:07:16

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "m20240918_170716"
down_revision: Union[str, Sequence[str], None] = "m20240918_170443"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS "recipe" (
          "id" serial PRIMARY KEY,
          "title" varchar NOT NULL,
          "slug" varchar NOT NULL,
          "roaster" varchar NOT NULL,
          "temp" varchar NOT NULL,
          "link" varchar NOT NULL,
          "shop_link" varchar NOT NULL,
          "machine" varchar NOT NULL,
          "type" varchar NOT NULL,
          "user_id" integer NOT NULL,
          "brewer_id" integer NOT NULL,
          "roast_id" integer NOT NULL,
          "created_at" timestamptz NOT NULL,
          CONSTRAINT "FK_recipe_user_id" FOREIGN KEY ("user_id") REFERENCES "user" ("id"),
          CONSTRAINT "FK_recipe_roast_id" FOREIGN KEY ("roast_id") REFERENCES "roast" ("id"),
          CONSTRAINT "FK_recipe_brewer_id" FOREIGN KEY ("brewer_id") REFERENCES "brewer" ("id")
        )
        """
    )
    op.execute(
        """
        INSERT INTO "recipe" (
          "title", "slug", "roaster", "temp", "link", "shop_link",
          "roast_id", "machine", "brewer_id", "type", "user_id", "created_at"
        )
        VALUES (
          'The Future',
          'the-future',
          'Black and White',
          'hot',
          'https://share-h5.xbloom.com/?id=8yAUAWJktyHNIpo3vjZ6pA==',
          'https://xbloom.com/products/the-future-xbloom-exclusive',
          1,
          'Studio',
          1,
          'xbloom',
          1,
          now()
        )
        """
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP TABLE "recipe"')
