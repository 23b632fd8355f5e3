"""Unit tests for the translation error taxonomy."""

from catalog_translator.core import (
    BackendTransportError,
    NoTranslationReturnedError,
    TranslationError,
    UnknownTranslationError,
)


def test_all_errors_share_base_class():
    assert issubclass(NoTranslationReturnedError, TranslationError)
    assert issubclass(BackendTransportError, TranslationError)
    assert issubclass(UnknownTranslationError, TranslationError)


def test_transport_error_chains_cause():
    cause = ConnectionError("connection reset")
    error = BackendTransportError(cause, backend="openai")

    assert error.cause is cause
    assert error.__cause__ is cause
    assert error.backend == "openai"
    assert "openai request failed" in str(error)
    assert "connection reset" in str(error)


def test_transport_error_without_backend_name():
    error = BackendTransportError(TimeoutError("timed out"))
    assert str(error).startswith("Backend request failed")


def test_default_messages():
    assert str(NoTranslationReturnedError()) == "No translation returned"
    assert str(UnknownTranslationError()) == "Unknown translation failure"
