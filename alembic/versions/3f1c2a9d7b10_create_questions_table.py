"""create_questions_table

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "questions",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("theme", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("statement", sa.Text(), nullable=True),
        sa.Column("record", sa.JSON(), nullable=False),
        sa.Column("pvt", sa.Boolean(), nullable=False),
        sa.Column("estimated_time", sa.Integer(), nullable=True),
        sa.Column(
            "difficulty",
            sa.Enum("easy", "medium", "hard", name="difficulty"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_questions_theme", "questions", ["theme"])
    op.create_index("ix_questions_pvt", "questions", ["pvt"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_questions_pvt", table_name="questions")
    op.drop_index("ix_questions_theme", table_name="questions")
    op.drop_table("questions")
    sa.Enum(name="difficulty").drop(op.get_bind(), checkfirst=True)
