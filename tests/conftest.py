"""
Configuração global para testes

Este arquivo é carregado automaticamente pelo pytest antes de qualquer teste.
Ele configura as variáveis de ambiente necessárias para os testes.
"""
import atexit
import os
import tempfile

import pytest

# Banco em arquivo temporário: o app e os testes de API compartilham o mesmo engine
temp_db = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
temp_db.close()


def cleanup_temp_db():
    try:
        os.unlink(temp_db.name)
    except OSError:
        pass


atexit.register(cleanup_temp_db)

# Configurações padrão para testes - definidas ANTES de qualquer import
TEST_ENV_VARS = {
    "SECRET_KEY": "test_secret_key_for_testing_only",
    "DATABASE_URL": f"sqlite:///{temp_db.name}",
    "ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_MINUTES": "30",
    "BCRYPT_ROUNDS": "4",
    "ADMIN_NAME": "Admin",
    "ADMIN_EMAIL": "admin@admin.com",
    "ADMIN_PASSWORD": "admin",
    "ENVIRONMENT": "testing",
    "ENFORCE_ADMIN_AUTH": "false",
    "RATE_LIMIT_ENABLED": "false",
    "LOGIN_RATE_LIMIT": "3/minute",
    "SCHEDULE_START_TIME": "06:00",
    "SCHEDULE_END_TIME": "18:00",
}

# Configura variáveis de ambiente imediatamente quando o módulo é importado
# Isso garante que estejam disponíveis antes de qualquer import que use Settings
for key, value in TEST_ENV_VARS.items():
    os.environ[key] = value


@pytest.fixture(scope="function")
def db_session():
    """Sessão em SQLite em memória, recriada a cada teste"""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool

    from gaj.core.database import Base
    from gaj.models import schedule_model, user_model  # noqa: F401

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
