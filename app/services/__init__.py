from app.services.answer_service import (
    get_answers_for_question,
    get_student_answer,
    submit_answer,
)
from app.services.session_service import (
    advance_question,
    create_session,
    get_current_session,
    get_session,
    start_session,
    stop_session,
    update_session,
)
from app.services.stats_service import (
    aggregate_answers,
    compute_stats,
    get_session_history,
)
from app.services.student_service import (
    get_student,
    list_active_students,
    register_student,
    set_student_active,
)

__all__ = [
    "register_student",
    "get_student",
    "list_active_students",
    "set_student_active",
    "create_session",
    "get_current_session",
    "get_session",
    "start_session",
    "stop_session",
    "update_session",
    "advance_question",
    "submit_answer",
    "get_answers_for_question",
    "get_student_answer",
    "aggregate_answers",
    "compute_stats",
    "get_session_history",
]
