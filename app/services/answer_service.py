import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import answer as answer_crud
from app.exceptions import ConstraintError, ValidationError
from app.models.answer import ANSWER_OPTIONS
from app.models.quiz_session import MAX_QUESTION_NUMBER
from app.schemas import answer as answer_schema
from app.services import broadcaster

logger = logging.getLogger(__name__)


async def submit_answer(
    session: AsyncSession,
    request: answer_schema.AnswerSubmitRequest,
) -> answer_schema.AnswerResponse:
    """답안 제출 - 같은 (학생, 세션, 문항)이면 덮어쓰기

    세션 진행 여부는 확인하지 않는다 (필요하면 호출 측에서 확인).
    """
    if request.selected_option not in ANSWER_OPTIONS:
        raise ValidationError(f"선택지는 A, B, C, D 중 하나여야 합니다: {request.selected_option}")
    if request.question_number < 1:
        raise ValidationError("문항 번호는 1 이상이어야 합니다")
    if request.question_number > MAX_QUESTION_NUMBER:
        raise ValidationError(f"문항 번호는 {MAX_QUESTION_NUMBER} 이하여야 합니다")

    try:
        answer = await answer_crud.upsert_answer(
            session,
            student_id=request.student_id,
            quiz_session_id=request.quiz_session_id,
            question_number=request.question_number,
            selected_option=request.selected_option,
        )
    except IntegrityError as e:
        await session.rollback()
        logger.warning(
            f"답안 저장 제약 위반: student_id={request.student_id}, "
            f"quiz_session_id={request.quiz_session_id}, error={e.orig}"
        )
        raise ConstraintError("존재하지 않는 학생 또는 퀴즈 세션입니다") from e

    logger.info(
        f"답안 제출: student_id={answer.student_id}, quiz_session_id={answer.quiz_session_id}, "
        f"question_number={answer.question_number}, selected_option={answer.selected_option}"
    )
    await broadcaster.manager.broadcast(
        broadcaster.build_event(
            broadcaster.ANSWER_SUBMITTED,
            quiz_session_id=answer.quiz_session_id,
            question_number=answer.question_number,
            student_id=answer.student_id,
        )
    )
    return answer_schema.AnswerResponse.model_validate(answer)


async def get_answers_for_question(
    session: AsyncSession,
    quiz_session_id: str,
    question_number: int,
) -> answer_schema.AnswerListResponse:
    """세션/문항별 답안 목록"""
    answers = await answer_crud.get_answers_for_question(session, quiz_session_id, question_number)
    responses = [answer_schema.AnswerResponse.model_validate(a) for a in answers]
    return answer_schema.AnswerListResponse(answers=responses, total=len(responses))


async def get_student_answer(
    session: AsyncSession,
    student_id: str,
    quiz_session_id: str,
    question_number: int,
) -> answer_schema.AnswerResponse | None:
    """학생의 특정 문항 답안 (없으면 None)"""
    answer = await answer_crud.get_student_answer(session, student_id, quiz_session_id, question_number)
    if not answer:
        return None
    return answer_schema.AnswerResponse.model_validate(answer)
