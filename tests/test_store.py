"""Unit tests for record store clients."""

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from jobboard.config.environment import EnvironmentConfig
from jobboard.config.models import StoreConfig
from jobboard.store import (
    AirtableClient,
    StoreConfigurationError,
    StoreError,
    StoreHTTPError,
    StoreResponseError,
    StoreTimeoutError,
    get_store_client,
)
from jobboard.store.base import BaseStoreClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# Fixtures
# ============================================================================


def _response(data=None, status_code=200, reason="OK", json_error=None):
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = data
    return response


def _load_page(name):
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def client():
    """Create an Airtable client with test credentials."""
    return AirtableClient(
        access_token="patTestToken",
        base_id="appTestBase",
        table_name="Job Postings",
        page_size=2,
        timeout=10,
    )


# ============================================================================
# Base Client Tests
# ============================================================================


class TestBaseStoreClient:
    """Tests for BaseStoreClient."""

    def test_cannot_instantiate_abstract_class(self):
        """Test that BaseStoreClient cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseStoreClient()

    @pytest.mark.parametrize("timeout", [4, 301])
    def test_init_with_invalid_timeout(self, timeout):
        """Test that out-of-range timeouts are rejected."""
        with pytest.raises(StoreConfigurationError, match="Timeout must be between"):
            AirtableClient(access_token="t", base_id="b", timeout=timeout)

    def test_init_with_empty_user_agent(self):
        """Test that a blank user agent is rejected."""
        with pytest.raises(StoreConfigurationError, match="user_agent"):
            AirtableClient(access_token="t", base_id="b", user_agent="   ")

    def test_timeout_raises_store_timeout_error(self, client):
        """Test that requests timeouts surface as StoreTimeoutError."""
        with patch.object(client._session, "request", side_effect=requests.exceptions.Timeout()):
            with pytest.raises(StoreTimeoutError) as exc_info:
                client.ping()

        assert exc_info.value.url == client.table_url

    def test_connection_error_raises_http_error_with_status_zero(self, client):
        """Test that connection failures surface as StoreHTTPError(0)."""
        error = requests.exceptions.ConnectionError("connection refused")
        with patch.object(client._session, "request", side_effect=error):
            with pytest.raises(StoreHTTPError) as exc_info:
                client.ping()

        assert exc_info.value.status_code == 0

    @pytest.mark.parametrize("status_code", [401, 422, 429, 500, 503])
    def test_error_status_raises_http_error(self, client, status_code):
        """Test that any 4xx/5xx status raises StoreHTTPError."""
        response = _response(status_code=status_code, reason="Error")
        with patch.object(client._session, "request", return_value=response):
            with pytest.raises(StoreHTTPError) as exc_info:
                client.list_active_records()

        assert exc_info.value.status_code == status_code
        assert not exc_info.value.is_not_found

    def test_invalid_json_raises_response_error(self, client):
        """Test that a non-JSON body raises StoreResponseError."""
        response = _response(json_error=ValueError("Expecting value"))
        with patch.object(client._session, "request", return_value=response):
            with pytest.raises(StoreResponseError, match="Failed to parse JSON"):
                client.list_active_records()

    def test_non_object_json_raises_response_error(self, client):
        """Test that a JSON array body raises StoreResponseError."""
        with patch.object(client._session, "request", return_value=_response([1, 2])):
            with pytest.raises(StoreResponseError, match="Expected JSON object"):
                client.list_active_records()


# ============================================================================
# Airtable Client Tests
# ============================================================================


class TestAirtableClient:
    """Tests for AirtableClient."""

    def test_requires_credentials(self):
        """Test that missing token or base id is a configuration error."""
        with pytest.raises(StoreConfigurationError):
            AirtableClient(access_token="", base_id="appTestBase")
        with pytest.raises(StoreConfigurationError):
            AirtableClient(access_token="patTestToken", base_id="")

    def test_session_headers(self, client):
        """Test bearer auth and user agent headers."""
        assert client._session.headers["Authorization"] == "Bearer patTestToken"
        assert client._session.headers["User-Agent"] == "JobBoard/1.0"

    def test_table_url_quotes_table_name(self, client):
        """Test that spaces in the table name are percent-encoded."""
        assert client.table_url == "https://api.airtable.com/v0/appTestBase/Job%20Postings"

    def test_list_active_records_follows_offset(self, client):
        """Test pagination across two pages."""
        pages = [
            _response(_load_page("airtable_page_1.json")),
            _response(_load_page("airtable_page_2.json")),
        ]

        with patch.object(client._session, "request", side_effect=pages) as mock_request:
            records = client.list_active_records()

        # The record without an id on page two is skipped
        assert [record.id for record in records] == [
            "recPageOne0001",
            "recPageOne0002",
            "recPageTwo0003",
        ]
        assert records[0].fields["title"] == "Platform Engineer"
        assert records[0].created_time is not None

        assert mock_request.call_count == 2
        first_params = mock_request.call_args_list[0].kwargs["params"]
        second_params = mock_request.call_args_list[1].kwargs["params"]
        assert ("filterByFormula", "{status}='active'") in first_params
        assert ("sort[0][field]", "posted_date") in first_params
        assert ("sort[0][direction]", "desc") in first_params
        assert ("pageSize", "2") in first_params
        assert not any(name == "offset" for name, _ in first_params)
        assert ("offset", "itrNextPage/recPageOne0002") in second_params

    def test_list_active_records_empty(self, client):
        """Test a table with no active records."""
        with patch.object(client._session, "request", return_value=_response({"records": []})):
            assert client.list_active_records() == []

    @pytest.mark.parametrize("bad_id", ["", "   ", None])
    def test_list_active_records_skips_blank_ids(self, client, bad_id):
        """Test that blank ids are dropped as malformed instead of failing the fetch."""
        body = {
            "records": [
                {"id": bad_id, "fields": {"title": "Ghost"}},
                {"id": "recValid0001", "fields": {"title": "Real"}},
            ]
        }
        with patch.object(client._session, "request", return_value=_response(body)):
            records = client.list_active_records()

        assert [record.id for record in records] == ["recValid0001"]

    def test_list_active_records_rejects_non_array(self, client):
        """Test that a non-array records field is a response error."""
        with patch.object(client._session, "request", return_value=_response({"records": {}})):
            with pytest.raises(StoreResponseError, match="array"):
                client.list_active_records()

    def test_get_record(self, client):
        """Test fetching a single record by id."""
        data = {
            "id": "recSingle0001",
            "createdTime": "2025-11-01T10:00:00.000Z",
            "fields": {"title": "Engineer", "status": "active"},
        }

        with patch.object(client._session, "request", return_value=_response(data)) as mock_request:
            record = client.get_record("recSingle0001")

        assert record.id == "recSingle0001"
        assert record.fields == {"title": "Engineer", "status": "active"}
        assert mock_request.call_args.kwargs["url"].endswith("/Job%20Postings/recSingle0001")

    def test_get_record_not_found_returns_none(self, client):
        """Test that a 404 from Airtable means no such record."""
        response = _response(status_code=404, reason="Not Found")
        with patch.object(client._session, "request", return_value=response):
            assert client.get_record("recMissing") is None

    def test_get_record_other_errors_raise(self, client):
        """Test that non-404 failures propagate."""
        response = _response(status_code=500, reason="Server Error")
        with patch.object(client._session, "request", return_value=response):
            with pytest.raises(StoreHTTPError):
                client.get_record("recAny")

    def test_get_record_without_id_raises(self, client):
        """Test that a single-record body without an id is malformed."""
        with patch.object(client._session, "request", return_value=_response({"fields": {}})):
            with pytest.raises(StoreResponseError):
                client.get_record("recAny")

    def test_ping_requests_one_record(self, client):
        """Test that ping issues a single-record read."""
        with patch.object(client._session, "request", return_value=_response({"records": []})) as mock_request:
            client.ping()

        params = mock_request.call_args.kwargs["params"]
        assert params["maxRecords"] == "1"


# ============================================================================
# Factory Tests
# ============================================================================


class TestStoreFactory:
    """Tests for get_store_client."""

    def test_returns_none_without_credentials(self):
        """Test that missing credentials yield no client."""
        assert get_store_client(EnvironmentConfig(), StoreConfig()) is None
        assert get_store_client(EnvironmentConfig(airtable_access_token="t"), StoreConfig()) is None

    def test_builds_airtable_client(self):
        """Test that store settings are passed through."""
        env_config = EnvironmentConfig(airtable_access_token="patX", airtable_base_id="appY")
        store_config = StoreConfig(
            table_name="Postings",
            http_request_timeout=60,
            user_agent="CustomAgent/2.0",
            page_size=25,
        )

        client = get_store_client(env_config, store_config)

        assert isinstance(client, AirtableClient)
        assert client.base_id == "appY"
        assert client.table_name == "Postings"
        assert client.timeout == 60
        assert client.user_agent == "CustomAgent/2.0"
        assert client.page_size == 25


# ============================================================================
# Exception Tests
# ============================================================================


class TestStoreExceptions:
    """Tests for store exception handling."""

    def test_http_error_attributes(self):
        """Test StoreHTTPError stores status and URL."""
        error = StoreHTTPError("Test error", status_code=404, url="https://example.com")

        assert error.status_code == 404
        assert error.url == "https://example.com"
        assert error.is_not_found

    def test_exception_inheritance(self):
        """Test exception hierarchy."""
        assert issubclass(StoreHTTPError, StoreError)
        assert issubclass(StoreTimeoutError, StoreError)
        assert issubclass(StoreResponseError, StoreError)
        assert issubclass(StoreConfigurationError, StoreError)
