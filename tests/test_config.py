"""Tests para la configuración del paquete."""

import logging

from graphql_matchers import HaveAField
from graphql_matchers.core.config import Settings, configure_logging, get_settings
from tests.conftest import FakeField, FakeObjectType


def test_defaults():
    settings = Settings()
    assert settings.CAMELIZE_FIELD_NAMES is True
    assert settings.RENDER_METHOD == "to_graphql"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("GRAPHQL_MATCHERS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GRAPHQL_MATCHERS_CAMELIZE_FIELD_NAMES", "false")

    settings = Settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.CAMELIZE_FIELD_NAMES is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_camelize_can_be_disabled():
    host = FakeObjectType("Query", {"first_name": FakeField("first_name")})
    settings = Settings(CAMELIZE_FIELD_NAMES=False)

    matcher = HaveAField("first_name", settings=settings)
    assert matcher.expected_field_name == "first_name"
    assert matcher.matches(host) is True
    assert HaveAField("first_name").matches(host) is False


def test_render_method_can_be_overridden():
    class SdlType:
        def sdl(self):
            return "[String!]"

    host = FakeObjectType("Query", {"tags": FakeField("tags", type=SdlType())})
    settings = Settings(RENDER_METHOD="sdl")

    assert HaveAField("tags", settings=settings).of_type("[String!]").matches(host) is True


def test_configure_logging():
    logger = configure_logging("debug")
    assert logger.name == "graphql_matchers"
    assert logger.level == logging.DEBUG
    configure_logging("warning")
