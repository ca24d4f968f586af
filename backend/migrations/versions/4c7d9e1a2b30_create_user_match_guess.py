"""create user, match and guess tables

Revision ID: 4c7d9e1a2b30
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7d9e1a2b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)

    if 'match' not in existing_tables:
        op.create_table(
            'match',
            sa.Column('id', sa.String(length=32), primary_key=True),
            sa.Column('host_id', sa.String(length=64), nullable=False),
            sa.Column('status', sa.String(length=16), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('current_word', sa.String(length=64), nullable=False),
            sa.Column('time_left', sa.Integer(), nullable=False),
            sa.Column('winner_id', sa.String(length=64), nullable=True),
        )

    # No FK to match: guesses are child records keyed by the parent id only
    if 'guess' not in existing_tables:
        op.create_table(
            'guess',
            sa.Column('id', sa.String(length=32), primary_key=True),
            sa.Column('match_id', sa.String(length=32), nullable=False),
            sa.Column('guess', sa.String(length=256), nullable=False),
            sa.Column('player_id', sa.String(length=64), nullable=False),
        )
        op.create_index('ix_guess_match_id', 'guess', ['match_id'])


def downgrade():
    op.drop_index('ix_guess_match_id', table_name='guess')
    op.drop_table('guess')
    op.drop_table('match')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
