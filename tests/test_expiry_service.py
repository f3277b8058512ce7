"""세션 만료 스윕 테스트"""
import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from unittest.mock import patch
from sqlalchemy import update

from app import main
from app.core.config import settings
from app.models.quiz_session import QuizSession
from app.schemas import quiz_session as quiz_session_schema
from app.services import expiry_service, session_service


async def _start_session(session, duration=5):
    created = await session_service.create_session(
        session,
        quiz_session_schema.QuizSessionCreateRequest(title="Quiz", duration=duration),
        admin_id="admin-1",
    )
    return await session_service.start_session(session, created.id)


def test_session_deadline_not_started():
    """시작 전 세션은 종료 예정 시각 없음"""
    assert expiry_service.session_deadline(QuizSession(duration=5)) is None


def test_session_deadline_treats_naive_time_as_utc():
    """tz 정보가 없는 시작 시각은 UTC로 간주"""
    quiz_session = QuizSession(duration=5, start_time=datetime(2026, 10, 18, 9, 0))

    assert expiry_service.session_deadline(quiz_session) == datetime(2026, 10, 18, 9, 5, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_running_session_is_not_stopped_before_deadline(test_db_session):
    """제한 시간 전에는 세션 유지"""
    started = await _start_session(test_db_session)

    result = await expiry_service.stop_expired_session(test_db_session)

    assert result is None
    current = await session_service.get_current_session(test_db_session)
    assert current.id == started.id


@pytest.mark.asyncio
async def test_expired_session_is_stopped(test_db_session):
    """제한 시간이 지나면 스윕이 세션 종료"""
    started = await _start_session(test_db_session, duration=5)
    later = datetime.now(timezone.utc) + timedelta(minutes=6)

    result = await expiry_service.stop_expired_session(test_db_session, now=later)

    assert result == started.id
    assert await session_service.get_current_session(test_db_session) is None
    stopped = await session_service.get_session(test_db_session, started.id)
    assert stopped.is_active is False
    assert stopped.end_time is not None


@pytest.mark.asyncio
async def test_sweep_without_current_session(test_db_session):
    """진행 중인 세션이 없으면 아무것도 하지 않음"""
    assert await expiry_service.stop_expired_session(test_db_session) is None


@pytest.mark.asyncio
async def test_session_restarted_after_snapshot_is_not_stopped(test_db_session):
    """조회 이후 재시작된 세션은 이전 시작 시각 기준으로 종료하지 않음"""
    started = await _start_session(test_db_session, duration=5)
    restarted_at = datetime.now(timezone.utc) + timedelta(minutes=10)
    # 세션 객체는 갱신하지 않고 DB 값만 변경 (다른 요청의 재시작)
    await test_db_session.execute(
        update(QuizSession)
        .where(QuizSession.id == started.id)
        .values(start_time=restarted_at)
        .execution_options(synchronize_session=False)
    )
    await test_db_session.commit()

    result = await expiry_service.stop_expired_session(
        test_db_session, now=datetime.now(timezone.utc) + timedelta(minutes=6)
    )

    assert result is None
    current = await session_service.get_current_session(test_db_session)
    assert current.id == started.id
    assert current.is_active is True


@pytest.mark.asyncio
async def test_expiry_sweeper_keeps_running_after_error(test_session_maker):
    """스윕 중 오류가 나도 다음 주기에 계속 실행되고, 취소 시 종료"""
    calls = []

    async def fake_stop_expired_session(session):
        calls.append(session)
        if len(calls) == 1:
            raise RuntimeError("db unavailable")
        return None

    with patch.object(expiry_service, "stop_expired_session", fake_stop_expired_session):
        task = asyncio.create_task(expiry_service.run_expiry_sweeper(test_session_maker, 0))
        for _ in range(100):
            if len(calls) >= 2:
                break
            await asyncio.sleep(0.01)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    assert len(calls) >= 2


@pytest.mark.asyncio
async def test_lifespan_runs_sweeper_only_when_enabled(monkeypatch):
    """설정이 켜진 경우에만 lifespan에서 스윕 작업 실행 후 종료 시 취소"""
    started = asyncio.Event()
    cancelled = asyncio.Event()

    async def fake_sweeper(session_maker, interval_seconds):
        started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            cancelled.set()
            raise

    monkeypatch.setattr(main, "run_expiry_sweeper", fake_sweeper)

    monkeypatch.setattr(settings, "session_expiry_sweep_enabled", False)
    async with main.lifespan(main.app):
        await asyncio.sleep(0)
    assert not started.is_set()

    monkeypatch.setattr(settings, "session_expiry_sweep_enabled", True)
    async with main.lifespan(main.app):
        await asyncio.wait_for(started.wait(), timeout=1)
    assert cancelled.is_set()
