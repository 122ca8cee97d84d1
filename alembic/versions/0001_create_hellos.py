"""create_hellos

Revision ID: 0001
Revises:
Create Date: 2023-10-30 18:20:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'hellos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column(
            'createdAt',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint(
            'name IS NULL OR length(name) <= 100',
            name='ck_hellos_name_length',
        ),
        sa.CheckConstraint('length(message) > 0', name='ck_hellos_message_not_empty'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('hellos')
