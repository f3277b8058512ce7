"""실시간 이벤트 팬아웃

연결된 모든 옵저버(WebSocket)에게 이벤트를 전달한다.
전달은 best-effort, 옵저버당 최대 1회이며 재시도/보관이 없다.
늦게 연결된 옵저버는 지난 이벤트를 받지 못하므로 스냅샷 조회 API로 상태를 다시 가져와야 한다.
"""
import asyncio
import json
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)

QUIZ_STARTED = "quiz_started"
QUIZ_STOPPED = "quiz_stopped"
QUESTION_CHANGED = "question_changed"
ANSWER_SUBMITTED = "answer_submitted"
STUDENT_JOINED = "student_joined"
STUDENT_LEFT = "student_left"

EVENT_TYPES = frozenset({
    QUIZ_STARTED,
    QUIZ_STOPPED,
    QUESTION_CHANGED,
    ANSWER_SUBMITTED,
    STUDENT_JOINED,
    STUDENT_LEFT,
})


def build_event(event_type: str, **data: Any) -> dict[str, Any]:
    """서버 발행 이벤트 페이로드 생성"""
    return {"type": event_type, "data": data}


class ConnectionManager:
    """연결된 옵저버 집합 관리 및 브로드캐스트"""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)
        logger.info(f"옵저버 연결: 현재 {self.connection_count}개")

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._connections.discard(websocket)
        logger.info(f"옵저버 연결 해제: 현재 {self.connection_count}개")

    async def broadcast(self, event: dict[str, Any]) -> int:
        """모든 옵저버에게 이벤트 전송, 전달 성공 수 반환

        이벤트 형태는 검증하지 않는다. 전송 실패한 옵저버는 연결이 끊긴 것으로 보고 제거한다.
        """
        message = json.dumps(event, default=str, ensure_ascii=False)
        async with self._lock:
            targets = list(self._connections)

        delivered = 0
        stale: list[WebSocket] = []
        for websocket in targets:
            try:
                await websocket.send_text(message)
                delivered += 1
            except Exception as e:
                logger.info(f"옵저버 전송 실패, 연결 제거: {e.__class__.__name__}")
                stale.append(websocket)

        if stale:
            async with self._lock:
                for websocket in stale:
                    self._connections.discard(websocket)

        logger.debug(f"이벤트 브로드캐스트: type={event.get('type')}, delivered={delivered}")
        return delivered


manager = ConnectionManager()
