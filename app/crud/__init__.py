from app.crud.answer import (
    get_answers_by_session,
    get_answers_for_question,
    get_student_answer,
    upsert_answer,
)
from app.crud.quiz_session import (
    create_quiz_session,
    get_current_quiz_session,
    get_quiz_session_by_id,
    get_quiz_session_for_update,
    start_quiz_session,
    stop_quiz_session,
    update_quiz_session,
)
from app.crud.student import (
    get_active_students,
    get_student_by_id,
    get_student_by_name,
    update_student_status,
    upsert_student_by_name,
)

__all__ = [
    "get_student_by_id",
    "get_student_by_name",
    "upsert_student_by_name",
    "get_active_students",
    "update_student_status",
    "create_quiz_session",
    "get_quiz_session_by_id",
    "get_quiz_session_for_update",
    "get_current_quiz_session",
    "start_quiz_session",
    "stop_quiz_session",
    "update_quiz_session",
    "upsert_answer",
    "get_answers_for_question",
    "get_student_answer",
    "get_answers_by_session",
]
