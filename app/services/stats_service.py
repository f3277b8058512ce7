import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import answer as answer_crud, quiz_session as quiz_session_crud
from app.exceptions import QuizSessionNotFoundError
from app.models.answer import ANSWER_OPTIONS, Answer
from app.schemas import answer as answer_schema

logger = logging.getLogger(__name__)


def aggregate_answers(answers: Iterable[Answer]) -> answer_schema.AnswerStatsResponse:
    """선택지별 개수 집계

    total은 답안 행 수이며, A-D 이외의 값은 total에만 포함된다.
    """
    counts = {option: 0 for option in ANSWER_OPTIONS}
    total = 0
    for answer in answers:
        total += 1
        if answer.selected_option in counts:
            counts[answer.selected_option] += 1
    return answer_schema.AnswerStatsResponse(**counts, total=total)


async def compute_stats(
    session: AsyncSession,
    quiz_session_id: str,
    question_number: int,
) -> answer_schema.AnswerStatsResponse:
    """세션/문항별 실시간 집계 (매 호출마다 재계산)"""
    answers = await answer_crud.get_answers_for_question(session, quiz_session_id, question_number)
    return aggregate_answers(answers)


async def get_session_history(
    session: AsyncSession,
    quiz_session_id: str,
) -> list[answer_schema.QuestionHistoryResponse]:
    """세션 이력 - 1번부터 (현재 문항, 답안이 있는 최대 문항) 중 큰 값까지 문항별 집계"""
    quiz_session = await quiz_session_crud.get_quiz_session_by_id(session, quiz_session_id)
    if not quiz_session:
        raise QuizSessionNotFoundError(quiz_session_id)

    answers = await answer_crud.get_answers_by_session(session, quiz_session_id)

    by_question: dict[int, list[Answer]] = {}
    for answer in answers:
        by_question.setdefault(answer.question_number, []).append(answer)

    last_question = max([quiz_session.current_question_number, *by_question.keys()])
    history = [
        answer_schema.QuestionHistoryResponse(
            question_number=question_number,
            stats=aggregate_answers(by_question.get(question_number, [])),
        )
        for question_number in range(1, last_question + 1)
    ]
    logger.debug(f"세션 이력 조회: quiz_session_id={quiz_session_id}, questions={len(history)}")
    return history
