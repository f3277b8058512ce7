from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


def dialect_insert(session: AsyncSession):
    """세션에 바인딩된 DB에 맞는 ON CONFLICT 지원 insert 생성자 반환

    운영은 PostgreSQL, 테스트는 SQLite를 사용하며 두 방언 모두
    on_conflict_do_update()를 동일한 형태로 제공한다.
    """
    dialect_name = session.get_bind().dialect.name
    if dialect_name == "postgresql":
        return postgresql.insert
    if dialect_name == "sqlite":
        return sqlite.insert
    raise NotImplementedError(f"지원하지 않는 DB 방언입니다: {dialect_name}")
