"""
Wallet RPC Client
HTTP JSON-RPC client for connecting to monero-wallet-rpc.
"""

import asyncio
import logging
import random
from typing import Any, Dict, Optional

import aiohttp
import requests
from requests.auth import HTTPDigestAuth

from .config import JSONRPC_VERSION, Config
from .errors import ErrorCode, TransportError, WalletError
from .methods import Decoder, WalletMethods
from .models import Record, encode_value

logger = logging.getLogger(__name__)


def new_request_id() -> int:
    """Random request id; unique enough within one process's call stream."""
    return random.getrandbits(63)


def encode_params(params: Any) -> Any:
    """Convert a params value (record or dict) to its JSON form."""
    if isinstance(params, Record):
        return params.to_dict()
    if isinstance(params, dict):
        return {key: encode_value(value) for key, value in params.items()}
    return encode_value(params)


def encode_request(method: str, params: Any, request_id: int) -> Dict[str, Any]:
    """
    Build a JSON-RPC 2.0 request envelope.

    Args:
        method: Remote method name, sent as is
        params: Params record or dict; None for calls without arguments
        request_id: Correlation id

    Returns:
        Request envelope
    """
    request = {
        'jsonrpc': JSONRPC_VERSION,
        'method': method,
        'id': request_id,
    }
    if params is not None:
        request['params'] = encode_params(params)
    return request


def request_headers(config: Config) -> Dict[str, str]:
    """HTTP headers for a call; custom headers are set verbatim over the defaults."""
    headers = {'Content-Type': 'application/json'}
    if config.custom_headers:
        headers.update(config.custom_headers)
    return headers


def decode_response(response: Any, request_id: int,
                    status_code: Optional[int] = None) -> Dict[str, Any]:
    """
    Unwrap a JSON-RPC 2.0 response envelope.

    Args:
        response: Parsed response body
        request_id: Id the request was sent with
        status_code: HTTP status, attached to transport errors

    Returns:
        The result object

    Raises:
        WalletError: The envelope carries an error object
        TransportError: The envelope is malformed, has a null result or
            answers a different request
    """
    if not isinstance(response, dict):
        raise TransportError("Invalid JSON-RPC response", status_code)

    error = response.get('error')
    if error is not None:
        if not isinstance(error, dict):
            raise WalletError(int(ErrorCode.UNKNOWN), str(error))
        code = error.get('code')
        if not isinstance(code, int) or isinstance(code, bool):
            code = int(ErrorCode.UNKNOWN)
        raise WalletError(int(code), str(error.get('message') or ''))

    response_id = response.get('id')
    if response_id is not None and response_id != request_id:
        raise TransportError(
            f"Response id {response_id} does not match request id {request_id}",
            status_code,
        )

    result = response.get('result')
    if result is None:
        raise TransportError("Result is null", status_code)
    if not isinstance(result, dict):
        raise TransportError(f"Unexpected result: {result!r}", status_code)

    return result


def _finish(method: str, response: Any, request_id: int, status_code: int,
            decode: Optional[Decoder]) -> Any:
    try:
        result = decode_response(response, request_id, status_code)
    except WalletError as e:
        logger.debug(f"{method} (id={request_id}) failed: {e}")
        raise

    # Void calls stop here, after the envelope was fully checked.
    if decode is None:
        return None
    try:
        return decode(result)
    except (TypeError, ValueError, AttributeError) as e:
        raise TransportError(f"Malformed {method} result: {e}", status_code) from e


class WalletClient(WalletMethods):
    """
    monero-wallet-rpc client.

    Holds no per-call state of its own, but calls go through one
    requests.Session, which requests does not promise is thread-safe.
    Threads should each use their own client, or pass a session per
    thread through Config.session.
    """

    def __init__(self, config: Config = None):
        """
        Initialize wallet RPC client.

        Args:
            config: Client configuration (defaults to a local wallet-rpc)
        """
        self.config = config or Config()
        self.session = self.config.session or requests.Session()

        self.auth = None
        if self.config.username is not None and self.config.password is not None:
            self.auth = HTTPDigestAuth(self.config.username, self.config.password)

    @classmethod
    def from_config(cls, config_file: str = None) -> 'WalletClient':
        """Create client from config file."""
        return cls(Config.from_file(config_file))

    def _invoke(self, method: str, params: Any = None,
                decode: Optional[Decoder] = None) -> Any:
        request_id = new_request_id()
        request = encode_request(method, params, request_id)

        logger.debug(f"Calling {method} (id={request_id})")

        try:
            response = self.session.post(
                self.config.address,
                json=request,
                headers=request_headers(self.config),
                auth=self.auth,
                timeout=self.config.timeout,
            )
        except requests.Timeout as e:
            raise TransportError(f"Request timed out: {e}") from e
        except requests.RequestException as e:
            raise TransportError(
                f"Cannot connect to wallet RPC at {self.config.address}: {e}"
            ) from e

        if response.status_code != 200:
            logger.warning(f"{method} (id={request_id}): HTTP {response.status_code}")
            raise TransportError(
                f"HTTP error: {response.status_code}", response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON response: {e}", response.status_code
            ) from e

        return _finish(method, body, request_id, response.status_code, decode)


class AsyncWalletClient(WalletMethods):
    """
    Async monero-wallet-rpc client.

    Same methods as WalletClient; each returns an awaitable. Uses the given
    aiohttp session, or a short-lived one per call. Digest auth is not
    built in: pass a session configured for it instead of credentials.
    """

    def __init__(self, config: Config = None,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize async wallet RPC client.

        Args:
            config: Client configuration (its requests session is ignored)
            session: Caller-owned aiohttp session
        """
        self.config = config or Config()
        self.session = session

        if self.config.username is not None:
            raise ValueError(
                "AsyncWalletClient does not do digest auth; "
                "pass an aiohttp session configured for it"
            )

    async def _invoke(self, method: str, params: Any = None,
                      decode: Optional[Decoder] = None) -> Any:
        request_id = new_request_id()
        request = encode_request(method, params, request_id)

        headers = request_headers(self.config)

        logger.debug(f"Calling {method} (id={request_id})")

        try:
            if self.session is not None:
                status, body = await self._post(self.session, request, headers)
            else:
                async with aiohttp.ClientSession() as session:
                    status, body = await self._post(session, request, headers)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out: {e}") from e
        except aiohttp.ClientError as e:
            raise TransportError(
                f"Cannot connect to wallet RPC at {self.config.address}: {e}"
            ) from e

        return _finish(method, body, request_id, status, decode)

    async def _post(self, session: aiohttp.ClientSession, request: Dict[str, Any],
                    headers: Dict[str, str]):
        async with session.post(
            self.config.address,
            json=request,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self.config.timeout),
        ) as response:
            if response.status != 200:
                logger.warning(f"{request['method']} (id={request['id']}): HTTP {response.status}")
                raise TransportError(f"HTTP error: {response.status}", response.status)

            try:
                body = await response.json(content_type=None)
            except ValueError as e:
                raise TransportError(
                    f"Invalid JSON response: {e}", response.status
                ) from e

            return response.status, body
