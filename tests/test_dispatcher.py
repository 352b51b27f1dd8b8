"""Tests for toolbelt.llm.dispatcher module."""

import json

import httpx
import pytest
from openai import APIConnectionError, APIStatusError, APITimeoutError

from toolbelt.llm.dispatcher import create_client, raise_for_error_body, send_request
from toolbelt.llm.exceptions import ApiError, NetworkError

URL = "https://api.example.test/v1/chat/completions"
PAYLOAD = {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "hi"}]}


def connection_error():
    return APIConnectionError(request=httpx.Request("POST", URL))


def timeout_error():
    return APITimeoutError(request=httpx.Request("POST", URL))


def status_error(status_code, body):
    response = httpx.Response(status_code, request=httpx.Request("POST", URL), json=body)
    return APIStatusError("Error code: %d" % status_code, response=response, body=body.get("error", body))


@pytest.fixture
def mock_sleep(mocker):
    """Skip the backoff sleeps."""
    return mocker.patch("toolbelt.llm.dispatcher.time.sleep")


class TestSendRequest:
    """Tests for send_request function."""

    def test_success_on_first_attempt(self, helper_config, mock_client, mock_sleep, make_raw_response, commit_response_body):
        """Test a successful request returns the raw body."""
        create = mock_client.chat.completions.with_raw_response.create
        create.return_value = make_raw_response(commit_response_body)

        result = send_request(helper_config, PAYLOAD, client=mock_client)

        assert result.body == commit_response_body
        assert result.attempts == 1
        assert result.elapsed >= 0
        create.assert_called_once_with(**PAYLOAD)
        mock_sleep.assert_not_called()

    def test_retries_transport_failure_then_succeeds(self, helper_config, mock_client, mock_sleep, make_raw_response, commit_response_body):
        """Test that one connection failure is retried."""
        create = mock_client.chat.completions.with_raw_response.create
        create.side_effect = [connection_error(), make_raw_response(commit_response_body)]

        result = send_request(helper_config, PAYLOAD, client=mock_client)

        assert result.body == commit_response_body
        assert result.attempts == 2
        assert create.call_count == 2
        assert mock_sleep.call_count == 1

    def test_gives_up_after_max_attempts(self, helper_config, mock_client, mock_sleep, make_raw_response):
        """Test that exactly N attempts are made before NetworkError."""
        create = mock_client.chat.completions.with_raw_response.create
        create.side_effect = [timeout_error(), connection_error(), timeout_error(), connection_error()]

        with pytest.raises(NetworkError) as exc_info:
            send_request(helper_config, PAYLOAD, client=mock_client)

        assert create.call_count == 3
        assert exc_info.value.attempts == 3
        assert isinstance(exc_info.value.__cause__, APITimeoutError)
        # No sleep after the final failure
        assert mock_sleep.call_count == 2

    def test_backoff_within_range(self, helper_config, mock_client, mock_sleep, make_raw_response, commit_response_body):
        """Test that the sleep is drawn from the backoff range."""
        create = mock_client.chat.completions.with_raw_response.create
        create.side_effect = [connection_error(), connection_error(), make_raw_response(commit_response_body)]

        send_request(helper_config, PAYLOAD, client=mock_client)

        for call in mock_sleep.call_args_list:
            assert 1 <= call.args[0] <= 5

    def test_status_error_is_not_retried(self, helper_config, mock_client, mock_sleep, make_raw_response):
        """Test that a non-2xx status raises ApiError immediately."""
        create = mock_client.chat.completions.with_raw_response.create
        create.side_effect = status_error(401, {"error": {"message": "Incorrect API key provided"}})

        with pytest.raises(ApiError) as exc_info:
            send_request(helper_config, PAYLOAD, client=mock_client)

        assert create.call_count == 1
        assert exc_info.value.status_code == 401
        assert "Incorrect API key provided" in str(exc_info.value)
        mock_sleep.assert_not_called()

    def test_error_body_is_not_retried(self, helper_config, mock_client, mock_sleep, make_raw_response):
        """Test that a 2xx body with an error object raises ApiError."""
        create = mock_client.chat.completions.with_raw_response.create
        create.return_value = make_raw_response(json.dumps({"error": {"message": "model overloaded"}}))

        with pytest.raises(ApiError) as exc_info:
            send_request(helper_config, PAYLOAD, client=mock_client)

        assert create.call_count == 1
        assert "model overloaded" in str(exc_info.value)

    def test_reports_failed_attempts(self, helper_config, mock_client, mock_sleep, make_raw_response, commit_response_body, capsys):
        """Test that each retried failure is reported on stderr."""
        create = mock_client.chat.completions.with_raw_response.create
        create.side_effect = [connection_error(), make_raw_response(commit_response_body)]

        send_request(helper_config, PAYLOAD, client=mock_client)

        assert "Attempt 1 of 3 failed" in capsys.readouterr().err


class TestRaiseForErrorBody:
    """Tests for raise_for_error_body function."""

    def test_ignores_non_json(self):
        """Test that a non-JSON body is left to the extractor."""
        raise_for_error_body("<html>bad gateway</html>")

    def test_ignores_normal_body(self, commit_response_body):
        """Test that a normal completion passes."""
        raise_for_error_body(commit_response_body)

    def test_error_without_message(self):
        """Test that an error object without a message is still reported."""
        with pytest.raises(ApiError) as exc_info:
            raise_for_error_body(json.dumps({"error": {"code": "rate_limited"}}))

        assert "rate_limited" in str(exc_info.value)


class TestCreateClient:
    """Tests for create_client function."""

    def test_disables_sdk_retries(self, helper_config):
        """Test that the SDK does not retry on its own."""
        client = create_client(helper_config)

        assert client.max_retries == 0
        assert client.api_key == "sk-test-key"
        assert str(client.base_url).startswith("https://api.example.test/v1")
