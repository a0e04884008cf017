from __future__ import annotations

import pytest

from census_api_client.core.errors import (
    CensusCancelledError,
    CensusClientClosedError,
    CensusConfigError,
    CensusConnectionError,
    CensusError,
    CensusProtocolError,
    CensusResultFieldError,
    CensusServerError,
    CensusServiceUnavailableError,
)


@pytest.mark.parametrize(
    "error_type",
    [
        CensusConnectionError,
        CensusProtocolError,
        CensusServerError,
        CensusServiceUnavailableError,
        CensusClientClosedError,
        CensusConfigError,
        CensusCancelledError,
    ],
)
def test_domain_errors_share_base(error_type):
    assert issubclass(error_type, CensusError)


def test_service_unavailable_is_not_a_server_error():
    assert not issubclass(CensusServiceUnavailableError, CensusServerError)


def test_service_unavailable_has_default_message():
    assert str(CensusServiceUnavailableError()) == "Census service is unavailable"


def test_connection_error_keeps_status_and_uri():
    err = CensusConnectionError("Census returned status code 500", uri="u", status_code=500)
    assert err.status_code == 500
    assert err.uri == "u"


def test_result_field_error_is_lookup_error():
    err = CensusResultFieldError("character_list")
    assert isinstance(err, LookupError)
    assert not isinstance(err, CensusError)
    assert str(err) == "response has no 'character_list' collection"
