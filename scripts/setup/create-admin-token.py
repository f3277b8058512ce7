#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""관리자용 JWT 액세스 토큰 발급

사용법:
    python scripts/setup/create-admin-token.py <admin_id> [--minutes 720]
"""
import argparse
import sys
from datetime import timedelta
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

# 환경변수 로드 (실행 위치와 무관하게 프로젝트 루트의 .env 사용)
from dotenv import load_dotenv
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)

from app.core.config import settings
from app.core.security import create_access_token


def main():
    parser = argparse.ArgumentParser(description="관리자 JWT 토큰 발급")
    parser.add_argument("admin_id", help="관리자 식별자 (세션 created_by로 기록)")
    parser.add_argument(
        "--minutes",
        type=int,
        default=settings.access_token_expire_minutes,
        help="토큰 유효 시간(분)",
    )
    args = parser.parse_args()

    if settings.secret_key == "change-me":
        print("[WARN] SECRET_KEY가 기본값입니다. .env를 먼저 설정하세요.", file=sys.stderr)

    token = create_access_token(args.admin_id, expires_delta=timedelta(minutes=args.minutes))
    print(token)


if __name__ == "__main__":
    main()
