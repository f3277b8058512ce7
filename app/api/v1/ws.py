import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.services import broadcaster

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ws"])


@router.websocket("/ws")
async def observer_channel(websocket: WebSocket):
    """실시간 이벤트 채널

    서버 발행 이벤트를 수신하며, 클라이언트가 보낸 메시지 중
    인식 가능한 이벤트 종류는 그대로 모든 옵저버에게 중계한다.
    """
    manager = broadcaster.manager
    await manager.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            text = message.get("text")
            if text is None:
                logger.warning("WebSocket 메시지 무시: 텍스트 프레임이 아님")
                continue

            try:
                event = json.loads(text)
            except json.JSONDecodeError:
                logger.warning("WebSocket 메시지 파싱 실패: JSON이 아님")
                continue

            if isinstance(event, dict) and event.get("type") in broadcaster.EVENT_TYPES:
                await manager.broadcast(event)
            else:
                logger.debug(f"인식할 수 없는 WebSocket 메시지 무시: {text[:100]}")
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)
