"""Tests for formkeeper.errors — exception hierarchy."""

from formkeeper.errors import ConfigurationError, FormkeeperError


class TestHierarchy:
    def test_configuration_error_is_formkeeper_error(self) -> None:
        assert issubclass(ConfigurationError, FormkeeperError)

    def test_base_is_exception(self) -> None:
        assert issubclass(FormkeeperError, Exception)

    def test_message_preserved(self) -> None:
        assert str(ConfigurationError("bad wiring")) == "bad wiring"
