"""
Word cache schema

This migration creates:
1. notebook_word - Looked-up words with cached provider payloads
   (word is UNIQUE so concurrent misses cannot store a word twice)
2. english_to_english_dictionary - Reference glosses joined by word

Revision ID: 20261019_create_word_tables
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_create_word_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'notebook_word',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('word', sa.String(length=255), nullable=False),
        sa.Column('translations', sa.Text(), nullable=False),
        sa.Column('created_on', sa.DateTime(), nullable=False),
        sa.Column('appear_time', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('last_appear', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_notebook_word_word', 'notebook_word', ['word'], unique=True)

    op.create_table(
        'english_to_english_dictionary',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('word', sa.String(length=255), nullable=False),
        sa.Column('translation', sa.Text(), nullable=False),
    )
    op.create_index(
        'ix_english_to_english_dictionary_word', 'english_to_english_dictionary', ['word']
    )


def downgrade():
    op.drop_index('ix_english_to_english_dictionary_word', table_name='english_to_english_dictionary')
    op.drop_table('english_to_english_dictionary')
    op.drop_index('ix_notebook_word_word', table_name='notebook_word')
    op.drop_table('notebook_word')
