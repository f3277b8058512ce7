"""create_live_quiz_tables

Revision ID: 3a1c9e5d7b20
Revises: 
Create Date: 2026-10-18 10:12:04.518392

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1c9e5d7b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """students, quiz_sessions, answers, active_session_slot 테이블 생성"""
    op.create_table(
        'students',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_students_name'), 'students', ['name'], unique=True)
    op.create_index(op.f('ix_students_is_active'), 'students', ['is_active'], unique=False)

    op.create_table(
        'quiz_sessions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('current_question_number', sa.Integer(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_by', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_quiz_sessions_is_active'), 'quiz_sessions', ['is_active'], unique=False)

    op.create_table(
        'answers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('student_id', sa.String(length=36), nullable=False),
        sa.Column('quiz_session_id', sa.String(length=36), nullable=False),
        sa.Column('question_number', sa.Integer(), nullable=False),
        sa.Column('selected_option', sa.String(length=1), nullable=False),
        sa.Column('answered_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['student_id'], ['students.id'], ),
        sa.ForeignKeyConstraint(['quiz_session_id'], ['quiz_sessions.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'student_id', 'quiz_session_id', 'question_number',
            name='uq_answers_student_session_question',
        ),
    )
    op.create_index(op.f('ix_answers_student_id'), 'answers', ['student_id'], unique=False)
    op.create_index(op.f('ix_answers_quiz_session_id'), 'answers', ['quiz_session_id'], unique=False)

    op.create_table(
        'active_session_slot',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('quiz_session_id', sa.String(length=36), nullable=True),
        sa.ForeignKeyConstraint(['quiz_session_id'], ['quiz_sessions.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    # 행 잠금 대상이 항상 존재하도록 슬롯 행을 미리 생성
    op.execute("INSERT INTO active_session_slot (id, quiz_session_id) VALUES (1, NULL)")


def downgrade() -> None:
    """테이블 제거"""
    op.drop_table('active_session_slot')
    op.drop_index(op.f('ix_answers_quiz_session_id'), table_name='answers')
    op.drop_index(op.f('ix_answers_student_id'), table_name='answers')
    op.drop_table('answers')
    op.drop_index(op.f('ix_quiz_sessions_is_active'), table_name='quiz_sessions')
    op.drop_table('quiz_sessions')
    op.drop_index(op.f('ix_students_is_active'), table_name='students')
    op.drop_index(op.f('ix_students_name'), table_name='students')
    op.drop_table('students')
