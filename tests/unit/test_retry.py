# Assumptions:
# - Using pytest for testing framework
# - Send attempts and pauses are mocked, nothing touches the network

from unittest.mock import AsyncMock, Mock, call

import httpx
import pytest

from user_api_client.http.retry import (
    MAX_SEND_ATTEMPTS,
    RETRY_DELAY_SECONDS,
    async_send_with_retry,
    send_with_retry,
)


def connect_error() -> httpx.ConnectError:
    return httpx.ConnectError("Connection refused", request=httpx.Request("GET", "http://users.test/users/1"))


class TestSendWithRetry:
    """Test cases for the synchronous retry helper"""

    def test_defaults(self):
        """Test the fixed attempt count and pause"""
        assert MAX_SEND_ATTEMPTS == 3
        assert RETRY_DELAY_SECONDS == 0.1

    def test_first_attempt_succeeds(self):
        """Test that a successful send is not repeated"""
        response = httpx.Response(200)
        send = Mock(return_value=response)
        sleep = Mock()

        result = send_with_retry(send, sleep=sleep)

        assert result is response
        send.assert_called_once_with()
        sleep.assert_not_called()

    def test_recovers_after_transport_errors(self):
        """Test that transport errors are retried until a send succeeds"""
        response = httpx.Response(201)
        send = Mock(side_effect=[connect_error(), connect_error(), response])
        sleep = Mock()

        result = send_with_retry(send, sleep=sleep)

        assert result is response
        assert send.call_count == 3
        assert sleep.call_args_list == [call(0.1), call(0.1)]

    def test_raises_last_error_without_trailing_pause(self):
        """Test that the last transport error propagates after three attempts"""
        last = httpx.ConnectTimeout("timed out")
        send = Mock(side_effect=[connect_error(), connect_error(), last])
        sleep = Mock()

        with pytest.raises(httpx.ConnectTimeout) as exc_info:
            send_with_retry(send, sleep=sleep)

        assert exc_info.value is last
        assert send.call_count == 3
        assert sleep.call_count == 2

    def test_error_status_is_not_retried(self):
        """Test that a received response is returned even when it is an error status"""
        response = httpx.Response(503)
        send = Mock(return_value=response)
        sleep = Mock()

        result = send_with_retry(send, sleep=sleep)

        assert result.status_code == 503
        send.assert_called_once_with()
        sleep.assert_not_called()

    def test_non_transport_errors_propagate_immediately(self):
        """Test that errors other than transport failures are not retried"""
        send = Mock(side_effect=RuntimeError("boom"))
        sleep = Mock()

        with pytest.raises(RuntimeError, match="boom"):
            send_with_retry(send, sleep=sleep)

        send.assert_called_once_with()
        sleep.assert_not_called()

    def test_custom_attempts_and_delay(self):
        """Test that attempts and delay are parameters of the helper"""
        send = Mock(side_effect=connect_error())
        sleep = Mock()

        with pytest.raises(httpx.ConnectError):
            send_with_retry(send, attempts=5, delay=0.25, sleep=sleep)

        assert send.call_count == 5
        assert sleep.call_args_list == [call(0.25)] * 4

    def test_rejects_zero_attempts(self):
        """Test that at least one attempt is required"""
        with pytest.raises(ValueError, match="attempts must be at least 1"):
            send_with_retry(Mock(), attempts=0)


class TestAsyncSendWithRetry:
    """Test cases for the async retry helper"""

    @pytest.mark.asyncio
    async def test_recovers_after_transport_errors(self):
        """Test that transport errors are retried until a send succeeds"""
        response = httpx.Response(200)
        send = AsyncMock(side_effect=[connect_error(), response])
        sleep = AsyncMock()

        result = await async_send_with_retry(send, sleep=sleep)

        assert result is response
        assert send.await_count == 2
        sleep.assert_awaited_once_with(0.1)

    @pytest.mark.asyncio
    async def test_raises_after_all_attempts(self):
        """Test that the last transport error propagates after three attempts"""
        send = AsyncMock(side_effect=connect_error())
        sleep = AsyncMock()

        with pytest.raises(httpx.ConnectError, match="Connection refused"):
            await async_send_with_retry(send, sleep=sleep)

        assert send.await_count == 3
        assert sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_rejects_zero_attempts(self):
        """Test that at least one attempt is required"""
        with pytest.raises(ValueError):
            await async_send_with_retry(AsyncMock(), attempts=0)
