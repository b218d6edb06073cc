"""
Schema migrations (Alembic): DDL + seed data as raw SQL revisions in `versions/`.

From the repo root: `alembic upgrade head`, `alembic downgrade -1`,
`alembic current`. The app runs `upgrade head` on startup when
`RUN_MIGRATIONS` is on (see `migrations.runner`).
"""
