import pytest
from pydantic import ValidationError

from lapordesa.config.settings import Settings
from lapordesa.core import context

from conftest import FakeMediaStorage, make_settings


def test_cors_origins_from_comma_separated_string():
    settings = make_settings(CORS_ORIGINS="https://desa.id, https://admin.desa.id")
    assert settings.CORS_ORIGINS == ["https://desa.id", "https://admin.desa.id"]


def test_cors_origins_from_json_string():
    settings = make_settings(CORS_ORIGINS='["https://desa.id"]')
    assert settings.CORS_ORIGINS == ["https://desa.id"]


def test_log_level_is_normalized():
    assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_invalid_log_settings_are_rejected():
    with pytest.raises(ValidationError):
        make_settings(LOG_LEVEL="LOUD")
    with pytest.raises(ValidationError):
        make_settings(LOG_FORMAT="xml")


def test_legacy_project_name_alias():
    assert make_settings(PROJECT_NAME="Desa Lama").APP_NAME == "Desa Lama"


def test_defaults():
    settings = make_settings()
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.LAPORAN_MAX_FILES == 5
    assert settings.PENGUMUMAN_MAX_FILES == 3
    assert settings.PORT == 3001
    assert settings.is_sqlite()
    assert not settings.is_production()
    assert settings.media_configured()
    assert not make_settings(CLOUDINARY_API_SECRET=None).media_configured()


def test_configured_jwt_secret_is_not_generated():
    assert not make_settings().jwt_secret_generated()


def test_missing_jwt_secret_is_generated_with_warning(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    settings = Settings(DATABASE_URL="sqlite://", _env_file=None)
    warnings = []

    class RecordingLogger:
        def warning(self, message, *args, **kwargs):
            warnings.append(message)

    monkeypatch.setattr(context, "logger", RecordingLogger())

    built = context.build_context(settings, media_storage=FakeMediaStorage())
    built.engine.dispose()

    assert settings.jwt_secret_generated()
    assert len(settings.JWT_SECRET_KEY) == 32
    assert any("JWT_SECRET_KEY" in message for message in warnings)
