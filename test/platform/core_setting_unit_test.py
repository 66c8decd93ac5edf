from pathlib import Path

import pytest

from src.platform.config.core_setting import DataAccessMode, PaymentMode, Settings


ENV_EXAMPLE = Path(__file__).resolve().parents[2] / '.env.example'


@pytest.mark.unit
class TestSettings:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch):
        for name in ('BACKEND_CORS_ORIGINS', 'DATA_ACCESS_MODE', 'PAYMENT_MODE'):
            monkeypatch.delenv(name, raising=False)

    def test_loads_shipped_env_example(self):
        # Act
        loaded = Settings(_env_file=ENV_EXAMPLE)  # type: ignore[call-arg]

        # Assert
        assert loaded.BACKEND_CORS_ORIGINS == ['http://localhost:3000', 'http://localhost:8000']
        assert loaded.DATA_ACCESS_MODE == DataAccessMode.IN_MEMORY
        assert loaded.PAYMENT_MODE == PaymentMode.SIMULATED
        assert loaded.PAYMENT_API_BASE_URL is None

    def test_cors_origins_accepts_json_array(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["https://tickets.example.com"]')

        loaded = Settings(_env_file=None)  # type: ignore[call-arg]

        assert loaded.BACKEND_CORS_ORIGINS == ['https://tickets.example.com']

    def test_cors_origins_comma_list_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'https://a.example.com, https://b.example.com,')

        loaded = Settings(_env_file=None)  # type: ignore[call-arg]

        assert loaded.BACKEND_CORS_ORIGINS == ['https://a.example.com', 'https://b.example.com']
