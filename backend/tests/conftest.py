# tests/conftest.py

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Добавляем корень backend в PYTHONPATH, чтобы импортировался пакет collabmate
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import collabmate.models  # noqa: E402,F401
from collabmate.core.rate_limit import limiter  # noqa: E402
from collabmate.db import Base, SessionLocal, engine  # noqa: E402
from collabmate.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def clean_db():
    """
    Перед каждым тестом пересоздаём структуру БД,
    чтобы тесты не влияли друг на друга.
    Также сбрасываем rate limiter, чтобы лимиты не накапливались между тестами.
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    limiter.reset()
    yield


@pytest.fixture()
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db():
    """Сессия для тестов, которые вызывают сервисы напрямую."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
