import pytest
import requests
from unittest import mock

import src.ingest.thesportsdb_client as client
from src.config.settings import Settings

SETTINGS = Settings(base_url="https://example.test/api/v1/json/", api_key="3", timeout=5)


class DummyResp:
    def __init__(self, status_code=200, body=None, bad_json=False):
        self.status_code = status_code
        self._body = body if body is not None else {"events": []}
        self._bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._bad_json:
            raise ValueError("No JSON object could be decoded")
        return self._body


@mock.patch("src.ingest.thesportsdb_client.requests.get")
def test_get_events_day_success(mock_get):
    mock_get.return_value = DummyResp(body={"events": [{"idEvent": "1"}]})
    res = client.get_events_day(SETTINGS, "2025-10-19")
    assert res == {"events": [{"idEvent": "1"}]}
    args, kwargs = mock_get.call_args
    assert args[0] == "https://example.test/api/v1/json/3/eventsday.php"
    assert kwargs["params"] == {"d": "2025-10-19"}
    assert kwargs["timeout"] == 5


@mock.patch("src.ingest.thesportsdb_client.requests.get")
def test_get_events_day_league_param(mock_get):
    mock_get.return_value = DummyResp()
    client.get_events_day(SETTINGS, "2025-10-19", league="Italian Serie A")
    assert mock_get.call_args[1]["params"] == {"d": "2025-10-19", "l": "Italian Serie A"}


@mock.patch("src.ingest.thesportsdb_client.requests.get")
def test_http_error_raises_client_error(mock_get):
    mock_get.return_value = DummyResp(status_code=503)
    with pytest.raises(client.APIClientError):
        client.get_events_day(SETTINGS, "2025-10-19")


@mock.patch("src.ingest.thesportsdb_client.requests.get")
def test_connection_error_raises_client_error(mock_get):
    mock_get.side_effect = requests.exceptions.ConnectionError("boom")
    with pytest.raises(client.APIClientError):
        client.get_events_day(SETTINGS, "2025-10-19")
    assert mock_get.call_count == 1


@mock.patch("src.ingest.thesportsdb_client.requests.get")
def test_non_json_body_raises_client_error(mock_get):
    mock_get.return_value = DummyResp(bad_json=True)
    with pytest.raises(client.APIClientError):
        client.get_events_day(SETTINGS, "2025-10-19")


@pytest.mark.parametrize("error", [
    requests.exceptions.ChunkedEncodingError("truncated body"),
    requests.exceptions.ContentDecodingError("bad gzip"),
    requests.exceptions.TooManyRedirects("loop"),
])
@mock.patch("src.ingest.thesportsdb_client.requests.get")
def test_other_request_errors_raise_client_error(mock_get, error):
    mock_get.side_effect = error
    with pytest.raises(client.APIClientError):
        client.get_events_day(SETTINGS, "2025-10-19")
