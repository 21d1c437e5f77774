"""create users and plate_watches tables

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2025-06-14 11:02:37.418210

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f9a2b7d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
                    sa.Column('id', sa.Integer(), primary_key=True),
                    sa.Column('created_at', sa.DateTime(), nullable=False),
                    sa.Column('email', sa.String(255), nullable=False, unique=True),
                    sa.Column('first_name', sa.String(255)),
                    sa.Column('last_name', sa.String(255)),
                    sa.Column('name', sa.String(255)),
                    sa.Column('password_hash', sa.String(255), nullable=False))
    op.create_index('index_users_created_at', 'users', ['created_at'])

    op.create_table('plate_watches',
                    sa.Column('id', sa.Integer(), primary_key=True),
                    sa.Column('borough', sa.String(32)),
                    sa.Column('created_at', sa.DateTime(), nullable=False),
                    sa.Column('is_active', sa.Boolean(), nullable=False,
                              server_default=sa.true()),
                    sa.Column('nickname', sa.String(255)),
                    sa.Column('plate_number', sa.String(16), nullable=False),
                    sa.Column('state', sa.String(8), nullable=False),
                    sa.Column('updated_at', sa.DateTime(), nullable=False),
                    sa.Column('user_id', sa.Integer(),
                              sa.ForeignKey('users.id', ondelete='CASCADE'),
                              nullable=False),
                    sa.UniqueConstraint('user_id', 'plate_number', 'state',
                                        name='unique_user_plate_state'))
    op.create_index('index_plate_watches_user_id', 'plate_watches', ['user_id'])
    op.create_index('index_plate_watches_plate_state', 'plate_watches',
                    ['plate_number', 'state'])


def downgrade():
    op.drop_index('index_plate_watches_plate_state', 'plate_watches')
    op.drop_index('index_plate_watches_user_id', 'plate_watches')
    op.drop_table('plate_watches')
    op.drop_index('index_users_created_at', 'users')
    op.drop_table('users')
