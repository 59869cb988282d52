"""Error hierarchy — codes, messages, and plain-text responses.

Tests:
    - Every error answers HTTP 500
    - MethodNotImplementedError message is exactly "method not implemented"
    - Storage errors keep the underlying message unchanged
    - to_response() is the bare message (no envelope)
"""

import pytest

from app.core.errors import (
    SiteListError, DecodeError, MethodNotImplementedError,
    StorageError, StorageWriteError, StorageQueryError,
    ErrorCategory, ErrorContext, ErrorSeverity,
)


@pytest.mark.parametrize("exc", [
    DecodeError("bad json"),
    MethodNotImplementedError("PUT"),
    StorageError("boom", "commit"),
    StorageWriteError("disk full"),
    StorageQueryError("no index"),
])
def test_every_error_is_http_500(exc):
    assert isinstance(exc, SiteListError)
    assert exc.http_status == 500


def test_method_not_implemented_message():
    exc = MethodNotImplementedError("PUT")
    assert exc.message == "method not implemented"
    assert str(exc) == "method not implemented"
    assert exc.code == "METHOD_NOT_IMPLEMENTED"
    assert exc.category == ErrorCategory.ROUTING
    assert exc.context.method == "PUT"


def test_storage_errors_keep_driver_message():
    assert StorageWriteError("UNIQUE constraint failed: sites.id").message == (
        "UNIQUE constraint failed: sites.id"
    )
    assert StorageQueryError("no such table: sites").message == (
        "no such table: sites"
    )


def test_storage_error_names_operation():
    exc = StorageError("connection refused", "execute")
    assert exc.message == "datastore execute failed: connection refused"
    assert exc.operation == "execute"
    assert exc.severity == ErrorSeverity.CRITICAL


def test_to_response_is_plain_message():
    assert DecodeError("unexpected end of JSON input").to_response() == (
        "unexpected end of JSON input"
    )


def test_log_extra_carries_code_and_site():
    exc = StorageWriteError("fail", ErrorContext(site_id=9))
    assert exc.log_extra() == {
        "error_code": "STORAGE_WRITE_ERROR",
        "category": "database",
        "site_id": 9,
    }
