from pathlib import Path

import pytest

from src.platform.config.core_setting import Settings


ENV_EXAMPLE = Path(__file__).resolve().parents[2] / '.env.example'


@pytest.mark.unit
class TestSettings:
    @pytest.fixture(autouse=True)
    def no_cors_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

    def test_env_example_loads(self) -> None:
        settings = Settings(_env_file=ENV_EXAMPLE)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']
        assert settings.LOCK_ACQUIRE_TIMEOUT_SECONDS == 5.0

    def test_comma_separated_origins(self, tmp_path: Path) -> None:
        env_file = tmp_path / '.env'
        env_file.write_text('BACKEND_CORS_ORIGINS=http://a.test, http://b.test\n')

        settings = Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']

    def test_json_list_origins(self, tmp_path: Path) -> None:
        env_file = tmp_path / '.env'
        env_file.write_text('BACKEND_CORS_ORIGINS=["http://a.test"]\n')

        settings = Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test']
