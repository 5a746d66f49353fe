"""Tests for pricing commands."""

import json
from typing import Any

from spot_mcp.domains.pricing.client import (
    MARKET_PRICE_CAPACITY_ENDPOINT,
    PERCENTILE_ENDPOINT,
    PricingClient,
)
from spot_mcp.server import SpotServer


class TestPricingClient:
    """Tests for PricingClient."""

    async def test_price_history_path(self, spot_client: Any, spot_api: Any) -> None:
        path = (
            "/apis/ngpc.rxt.io/v1/serverclasses/gp.vs1.small-dfw"
            "/regions/us-central-dfw-1/price-history"
        )
        spot_api.route("GET", path, payload={"history": []})

        result = await PricingClient(spot_client).get_price_history(
            "gp.vs1.small-dfw", "us-central-dfw-1"
        )

        assert result == {"history": []}
        assert spot_api.api_requests[0].headers["Authorization"] == "Bearer id-1"

    def test_endpoints(self) -> None:
        assert MARKET_PRICE_CAPACITY_ENDPOINT == (
            "/apis/pricing.ngpc.rxt.io/v1/market-price-capacity"
        )
        assert PERCENTILE_ENDPOINT == "/apis/pricing.ngpc.rxt.io/v1/percentile"


class TestPricingTools:
    """Tests for pricing commands via the executor."""

    async def test_get_market_pricing(self, server: SpotServer, spot_api: Any) -> None:
        spot_api.route("GET", MARKET_PRICE_CAPACITY_ENDPOINT, payload={"serverClasses": {}})

        result = await server.executor.invoke("get_market_pricing", {})

        assert json.loads(result.text) == {"serverClasses": {}}
        assert spot_api.api_requests[0].headers["Authorization"] == "Bearer id-1"

    async def test_get_percentile_pricing(self, server: SpotServer, spot_api: Any) -> None:
        spot_api.route("GET", PERCENTILE_ENDPOINT, payload={"p50": "0.01"})

        result = await server.executor.invoke("get_percentile_pricing", {})

        assert json.loads(result.text) == {"p50": "0.01"}

    async def test_get_price_history_requires_region(
        self, server: SpotServer, spot_api: Any
    ) -> None:
        result = await server.executor.invoke("get_price_history", {"server_class": "x"})

        assert result.is_error is True
        assert "region" in result.text

    async def test_pricing_calls_share_one_session(
        self, server: SpotServer, spot_api: Any
    ) -> None:
        spot_api.route("GET", MARKET_PRICE_CAPACITY_ENDPOINT, payload={})
        spot_api.route("GET", PERCENTILE_ENDPOINT, payload={})

        await server.executor.invoke("get_market_pricing", {})
        await server.executor.invoke("get_percentile_pricing", {})

        assert len(spot_api.token_requests) == 1
