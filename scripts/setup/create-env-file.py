#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""로컬 개발용 .env 파일 생성"""
import os
import secrets
from pathlib import Path

# 프로젝트 루트
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"

# 주의: 운영 DB 계정 정보는 서버 담당자로부터 별도로 받아서 수동으로 입력해야 함
env_template = """# Database
DATABASE_URL=postgresql+asyncpg://<DB_USER>:<DB_PASSWORD>@localhost:5432/live_quiz_db

# Security (관리자 JWT 서명 키)
SECRET_KEY={secret_key}
ALGORITHM=HS256
ACCESS_TOKEN_EXPIRE_MINUTES=720

# CORS
ALLOWED_ORIGINS=http://localhost:5173

# Environment
# 로컬 개발 시 development로 두면 상세 에러 메시지 확인 가능
ENVIRONMENT=development

# 세션 만료 스윕 (기본 꺼짐: 제한 시간은 클라이언트 타이머용)
SESSION_EXPIRY_SWEEP_ENABLED=false
SESSION_EXPIRY_SWEEP_INTERVAL_SECONDS=30
"""


def create_env_file():
    """.env 파일 생성 (UTF-8, BOM 없음)"""
    print(f"[INFO] .env 파일 생성 중: {env_file}")
    
    # 기존 파일이 있으면 백업
    if env_file.exists():
        backup_file = project_root / ".env.backup"
        print(f"[INFO] 기존 .env 파일 백업: {backup_file}")
        backup_file.write_text(env_file.read_text(encoding="utf-8"), encoding="utf-8")
    
    env_content = env_template.format(secret_key=secrets.token_urlsafe(32))
    with open(env_file, 'w', encoding='utf-8', newline='\n') as f:
        f.write(env_content)
    
    print(f"[OK] .env 파일 생성 완료")
    print(f"[INFO] 파일 위치: {env_file}")
    
    # 파일 권한 (Windows에서는 스킵)
    if os.name != 'nt':
        os.chmod(env_file, 0o600)
        print(f"[INFO] 파일 권한 설정: 600")


if __name__ == "__main__":
    try:
        create_env_file()
        print("\n[OK] 작업 완료")
    except Exception as e:
        print(f"\n[ERROR] 에러 발생: {e.__class__.__name__}: {str(e)}")
        import traceback
        traceback.print_exc()
        exit(1)
