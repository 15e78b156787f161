"""Tier 2 fixtures: real JsonRpcChainClient against a local fake JSON-RPC node."""

from __future__ import annotations

import pytest
from aiohttp import web

from policy_watcher.chain.client import JsonRpcChainClient
from tests.conftest import make_test_config

NODE_HOST = "127.0.0.1"
NODE_PORT = 9545


class FakeNode:
    """Minimal eth_blockNumber / eth_getBlockByNumber responder.

    ``blocks`` maps block number to the raw JSON block object. ``override``
    replaces the next response wholesale (raw aiohttp Response).
    """

    def __init__(self) -> None:
        self.height = 0
        self.blocks: dict[int, dict] = {}
        self.requests: list[dict] = []
        self.override: web.Response | None = None

    async def handle(self, request: web.Request) -> web.Response:
        payload = await request.json()
        self.requests.append(payload)

        if self.override is not None:
            resp, self.override = self.override, None
            return resp

        method = payload["method"]
        if method == "eth_blockNumber":
            result = hex(self.height)
        elif method == "eth_getBlockByNumber":
            result = self.blocks.get(int(payload["params"][0], 16))
        else:
            return web.json_response({
                "jsonrpc": "2.0",
                "id": payload["id"],
                "error": {"code": -32601, "message": "Method not found"},
            })
        return web.json_response({"jsonrpc": "2.0", "id": payload["id"], "result": result})


@pytest.fixture
async def fake_node():
    """Local HTTP server speaking JSON-RPC. Returns (url, node)."""
    node = FakeNode()
    app = web.Application()
    app.router.add_post("/", node.handle)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, NODE_HOST, NODE_PORT)
    await site.start()
    yield f"http://{NODE_HOST}:{NODE_PORT}", node
    await runner.cleanup()


@pytest.fixture
async def rpc_client(fake_node):
    url, _ = fake_node
    cfg = make_test_config(rpc_url=url)
    client = JsonRpcChainClient(cfg.rpc_url, timeout=cfg.rpc_timeout)
    yield client
    await client.aclose()
