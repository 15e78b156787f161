"""JSON-RPC chain client - reads the chain tip and blocks from an Ethereum-style node."""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from policy_watcher.errors import ConstructionError, TransportError
from policy_watcher.models.blocks import BLOCK_HASH_SIZE, Block

log = logging.getLogger(__name__)


def _parse_quantity(value: Any, field: str) -> int:
    """Decode a JSON-RPC hex quantity ("0x1a") into an int."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError(f"{field}: expected hex quantity, got {value!r}")
    return int(value, 16)


def _parse_hash(value: Any) -> bytes:
    """Decode a 0x-prefixed 32-byte hash."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError(f"hash: expected hex string, got {value!r}")
    raw = bytes.fromhex(value[2:])
    if len(raw) != BLOCK_HASH_SIZE:
        raise ValueError(f"hash: expected {BLOCK_HASH_SIZE} bytes, got {len(raw)}")
    return raw


def _tx_id(tx: Any) -> str:
    # Non-full blocks list hashes; full blocks list transaction objects.
    if isinstance(tx, dict):
        return str(tx["hash"])
    return str(tx)


def _parse_block(raw: dict[str, Any]) -> Block:
    transactions = raw["transactions"]
    if not isinstance(transactions, list):
        raise TypeError(f"transactions: expected list, got {type(transactions).__name__}")
    return Block(
        number=_parse_quantity(raw["number"], "number"),
        hash=_parse_hash(raw["hash"]),
        timestamp=_parse_quantity(raw["timestamp"], "timestamp"),
        transactions=tuple(_tx_id(tx) for tx in transactions),
    )


class JsonRpcChainClient:
    """Reads block data over JSON-RPC 2.0 via httpx.

    Every call is a fresh round trip; nothing is cached. Transport and
    decode failures are raised as TransportError.
    """

    def __init__(self, rpc_url: str, timeout: float = 30.0) -> None:
        try:
            url = httpx.URL(rpc_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ConstructionError(f"invalid RPC URL {rpc_url!r}: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConstructionError(
                f"invalid RPC URL {rpc_url!r}: expected http(s)://host[:port]"
            )

        self._rpc_url = str(url)
        self._timeout = timeout
        self._ids = itertools.count(1)
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, params: list[Any] | None = None) -> Any:
        """Make a single JSON-RPC call and return its ``result`` member."""
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": next(self._ids),
        }

        try:
            response = await self._client.post(self._rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{method}: HTTP {exc.response.status_code}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(f"{method}: timed out after {self._timeout}s") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{method}: {exc}") from exc
        except ValueError as exc:
            raise TransportError(f"{method}: response is not valid JSON") from exc

        if not isinstance(body, dict):
            raise TransportError(f"{method}: unexpected response {body!r}")
        if body.get("error") is not None:
            raise TransportError(f"{method}: RPC error: {body['error']}")

        log.debug("%s %s -> ok", method, params)
        return body.get("result")

    async def current_height(self) -> int:
        result = await self._call("eth_blockNumber")
        try:
            return _parse_quantity(result, "eth_blockNumber")
        except ValueError as exc:
            raise TransportError(str(exc)) from exc

    async def fetch_block(self, number: int) -> Block | None:
        result = await self._call("eth_getBlockByNumber", [hex(number), False])
        if result is None:
            return None
        try:
            return _parse_block(result)
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportError(f"block {number}: malformed block data: {exc}") from exc
