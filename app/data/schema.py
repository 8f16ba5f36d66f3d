# app/data/schema.py
"""
Schemat bazy jako DDL (CREATE TYPE / TABLE / INDEX) dla PostgreSQL.

Renderowany z metadanych modeli przez mock engine, bez polaczenia z baza:

    python -m app.data.schema > migrations/0001_initial_schema.sql
"""
from sqlalchemy import create_mock_engine

from app.data.database import Base
import app.data.models  # noqa: F401


def render_ddl(url: str = "postgresql://") -> str:
    statements: list[str] = []

    def executor(sql, *multiparams, **params):
        statements.append(f"{str(sql.compile(dialect=mock.dialect)).strip()};")

    mock = create_mock_engine(url, executor)
    Base.metadata.create_all(mock, checkfirst=False)

    return "\n\n".join(statements) + "\n"


if __name__ == "__main__":
    print(render_ddl(), end="")
