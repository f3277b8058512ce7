"""답안/집계 API 테스트"""
import pytest
import pytest_asyncio


@pytest_asyncio.fixture
async def running_quiz(client, admin_headers):
    """학생 Lan과 시작된 "Quiz" 세션"""
    student = (await client.post("/api/v1/students", json={"name": "Lan"})).json()
    quiz_session = (
        await client.post(
            "/api/v1/quiz-sessions",
            json={"title": "Quiz", "duration": 5},
            headers=admin_headers,
        )
    ).json()
    await client.post(f"/api/v1/quiz-sessions/{quiz_session['id']}/start", headers=admin_headers)
    return student, quiz_session


def _answer(student, quiz_session, option, question_number=1):
    return {
        "student_id": student["id"],
        "quiz_session_id": quiz_session["id"],
        "question_number": question_number,
        "selected_option": option,
    }


@pytest.mark.asyncio
async def test_resubmit_overwrites_and_stats_follow(client, running_quiz):
    """B 제출 후 C로 재제출하면 집계는 C 1건"""
    student, quiz_session = running_quiz

    first = await client.post("/api/v1/answers", json=_answer(student, quiz_session, "B"))
    assert first.status_code == 200
    second = await client.post("/api/v1/answers", json=_answer(student, quiz_session, "C"))
    assert second.json()["id"] == first.json()["id"]

    stats = (await client.get(f"/api/v1/quiz-sessions/{quiz_session['id']}/questions/1/stats")).json()
    assert stats == {"A": 0, "B": 0, "C": 1, "D": 0, "total": 1}

    answers = (await client.get(f"/api/v1/quiz-sessions/{quiz_session['id']}/questions/1/answers")).json()
    assert answers["total"] == 1
    assert answers["answers"][0]["selected_option"] == "C"


@pytest.mark.asyncio
async def test_submit_invalid_option(client, running_quiz):
    """A-D 이외 선택지는 422"""
    student, quiz_session = running_quiz

    response = await client.post("/api/v1/answers", json=_answer(student, quiz_session, "E"))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_submit_unknown_student(client, running_quiz):
    """존재하지 않는 학생의 답안은 409"""
    _, quiz_session = running_quiz

    response = await client.post("/api/v1/answers", json=_answer({"id": "ghost"}, quiz_session, "A"))

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_get_student_answer(client, running_quiz):
    """학생 답안 조회, 없으면 null"""
    student, quiz_session = running_quiz
    params = {"student_id": student["id"], "quiz_session_id": quiz_session["id"], "question_number": 1}

    assert (await client.get("/api/v1/answers", params=params)).json() is None

    await client.post("/api/v1/answers", json=_answer(student, quiz_session, "D"))
    response = await client.get("/api/v1/answers", params=params)

    assert response.status_code == 200
    assert response.json()["selected_option"] == "D"


@pytest.mark.asyncio
async def test_stats_for_question_without_answers(client, running_quiz):
    """답안이 없는 문항은 모두 0"""
    _, quiz_session = running_quiz

    stats = (await client.get(f"/api/v1/quiz-sessions/{quiz_session['id']}/questions/4/stats")).json()

    assert stats == {"A": 0, "B": 0, "C": 0, "D": 0, "total": 0}


@pytest.mark.asyncio
async def test_history_after_advancing(client, admin_headers, running_quiz):
    """2번 문항으로 넘어가도 1번 문항 집계 유지"""
    student, quiz_session = running_quiz
    await client.post("/api/v1/answers", json=_answer(student, quiz_session, "A", question_number=1))
    await client.put(
        f"/api/v1/quiz-sessions/{quiz_session['id']}/question",
        json={"question_number": 2},
        headers=admin_headers,
    )
    await client.post("/api/v1/answers", json=_answer(student, quiz_session, "B", question_number=2))

    history = (await client.get(f"/api/v1/quiz-sessions/{quiz_session['id']}/history")).json()

    assert [entry["question_number"] for entry in history] == [1, 2]
    assert history[0]["stats"]["A"] == 1
    assert history[1]["stats"]["B"] == 1
    assert history[0]["stats"]["total"] == 1
