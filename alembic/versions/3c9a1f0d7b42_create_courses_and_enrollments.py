"""create_courses_and_enrollments

Revision ID: 3c9a1f0d7b42
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '3c9a1f0d7b42'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'courses',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('course_id', sa.String(36), nullable=False),
        sa.Column('course_number', sa.String(50), nullable=False),
        sa.Column('course_name', sa.String(200), nullable=False),
        sa.Column('num_hours', sa.Integer(), nullable=False),
        sa.Column('num_credits', sa.Float(), nullable=False),
        sa.Column('department', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_courses_course_id'), 'courses', ['course_id'], unique=True)

    semester = sa.Enum('FALL', 'WINTER', 'SUMMER', name='semester')
    op.create_table(
        'enrollments',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('enrollment_id', sa.String(36), nullable=False),
        sa.Column('enrollment_year', sa.Integer(), nullable=False),
        sa.Column('semester', semester, nullable=False),
        sa.Column('student_id', sa.String(36), nullable=False),
        sa.Column('student_first_name', sa.String(100), nullable=False),
        sa.Column('student_last_name', sa.String(100), nullable=False),
        sa.Column('course_id', sa.String(36), nullable=False),
        sa.Column('course_number', sa.String(50), nullable=False),
        sa.Column('course_name', sa.String(200), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_enrollments_enrollment_id'), 'enrollments', ['enrollment_id'], unique=True)
    op.create_index(op.f('ix_enrollments_student_id'), 'enrollments', ['student_id'], unique=False)
    op.create_index(op.f('ix_enrollments_course_id'), 'enrollments', ['course_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_enrollments_course_id'), table_name='enrollments')
    op.drop_index(op.f('ix_enrollments_student_id'), table_name='enrollments')
    op.drop_index(op.f('ix_enrollments_enrollment_id'), table_name='enrollments')
    op.drop_table('enrollments')
    sa.Enum(name='semester').drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f('ix_courses_course_id'), table_name='courses')
    op.drop_table('courses')
