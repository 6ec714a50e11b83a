"""add auto_approve and progress_cursor to quiz

Revision ID: 8c4f0a61e2d3
Revises: 5b1e2c7d9a40
Create Date: 2026-10-05 18:40:27.905116

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8c4f0a61e2d3'
down_revision = '5b1e2c7d9a40'
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("quiz") as batch_op:
        batch_op.add_column(
            sa.Column("auto_approve", sa.Boolean(), nullable=False, server_default=sa.false())
        )
        batch_op.add_column(
            sa.Column("progress_cursor", sa.Integer(), nullable=False, server_default="0")
        )


def downgrade():
    with op.batch_alter_table("quiz") as batch_op:
        batch_op.drop_column("progress_cursor")
        batch_op.drop_column("auto_approve")
