"""
Shared pytest fixtures for storefront tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from .factories import DEFAULT_ADDRESS


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_storefront_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "DEFAULT_ADDRESS": DEFAULT_ADDRESS,
        "MONGO_ENSURE_INDEXES": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars

@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_ensure_indexes = False
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.default_address = DEFAULT_ADDRESS
    mock.default_wallet_money = 500.0
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("storefront.core.config.get_settings", return_value=mock), patch(
        "storefront.core.security.get_settings", return_value=mock
    ):
        yield mock

