"""tee slots and booked players

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'tee_slots',
        sa.Column('id', sa.Text(), primary_key=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.Text(), nullable=False),
        sa.Column('start_minute', sa.Integer(), nullable=False),
        sa.Column('course', sa.Text(), nullable=False, server_default=sa.text("'Packanack Golf Course'")),
        sa.Column('holes', sa.Integer(), nullable=False, server_default=sa.text('18')),
        sa.Column('max_players', sa.Integer(), nullable=False, server_default=sa.text('4')),
        sa.Column('price', sa.Numeric(8, 2), nullable=False, server_default=sa.text('85.00')),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.UniqueConstraint('date', 'time', name='uq_tee_slots_date_time'),
    )
    op.create_index('ix_tee_slots_date', 'tee_slots', ['date'])

    op.create_table(
        'booked_players',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('slot_id', sa.Text(), sa.ForeignKey('tee_slots.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('player_type', sa.Text(), nullable=False, server_default=sa.text("'member'")),
        sa.Column('transport_mode', sa.Text(), nullable=False, server_default=sa.text("'riding'")),
        sa.Column('holes_playing', sa.Text(), nullable=False, server_default=sa.text("'18'")),
    )
    op.create_index('ix_booked_players_slot_id', 'booked_players', ['slot_id'])
    op.create_index('ix_booked_players_user_id', 'booked_players', ['user_id'])


def downgrade():
    op.drop_index('ix_booked_players_user_id', table_name='booked_players')
    op.drop_index('ix_booked_players_slot_id', table_name='booked_players')
    op.drop_table('booked_players')
    op.drop_index('ix_tee_slots_date', table_name='tee_slots')
    op.drop_table('tee_slots')
