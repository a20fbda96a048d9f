"""seed_tags

Revision ID: 9d4b2e6c1f08
Revises: 3c9e1f4a7b21
Create Date: 2026-10-12 14:31:47.118205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d4b2e6c1f08"
down_revision: Union[str, Sequence[str], None] = "3c9e1f4a7b21"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TAGS = [
    ("javascript", "Questions about JavaScript programming"),
    ("react", "Questions about React library"),
    ("nextjs", "Questions about Next.js framework"),
    ("typescript", "Questions about TypeScript"),
    ("nodejs", "Questions about Node.js runtime"),
    ("css", "Questions about CSS styling"),
    ("html", "Questions about HTML markup"),
    ("database", "Questions about databases"),
    ("mongodb", "Questions about MongoDB"),
    ("api", "Questions about APIs"),
]


def upgrade() -> None:
    """Seed initial tags."""
    tags_table = sa.table(
        "tags",
        sa.column("name", sa.String),
        sa.column("description", sa.String),
    )

    op.bulk_insert(
        tags_table,
        [{"name": name, "description": description} for name, description in TAGS],
    )


def downgrade() -> None:
    """Remove seeded tags."""
    names = ", ".join(f"'{name}'" for name, _ in TAGS)
    op.execute(f"DELETE FROM tags WHERE name IN ({names})")
