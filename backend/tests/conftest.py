"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL,
et neutralise la vérification de connexion du démarrage.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch

from app.database import get_db
from app.main import app


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with patch("app.main.check_database_connection"):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()
