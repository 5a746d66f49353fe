"""Tests for Spot API resource definitions."""

import pytest

from spot_mcp.clients.resources import ResourceDefinition, SpotResources, cloudspace_selector


class TestResourceDefinition:
    """Tests for ResourceDefinition paths."""

    def test_cluster_scoped_collection(self) -> None:
        assert SpotResources.REGION.path() == "/apis/ngpc.rxt.io/v1/regions"

    def test_cluster_scoped_item(self) -> None:
        assert (
            SpotResources.SERVER_CLASS.path(name="gp.vs1.small-dfw")
            == "/apis/ngpc.rxt.io/v1/serverclasses/gp.vs1.small-dfw"
        )

    def test_namespaced_collection(self) -> None:
        assert (
            SpotResources.CLOUDSPACE.path("org-abc")
            == "/apis/ngpc.rxt.io/v1/namespaces/org-abc/cloudspaces"
        )

    def test_namespaced_item(self) -> None:
        assert (
            SpotResources.ONDEMAND_NODE_POOL.path("org-abc", "pool-1")
            == "/apis/ngpc.rxt.io/v1/namespaces/org-abc/ondemandnodepools/pool-1"
        )

    def test_segments_are_escaped(self) -> None:
        """Names cannot break out of their path segment."""
        path = SpotResources.CLOUDSPACE.path("org/x", "a b")
        assert path == "/apis/ngpc.rxt.io/v1/namespaces/org%2Fx/cloudspaces/a%20b"

    def test_namespaced_requires_namespace(self) -> None:
        with pytest.raises(ValueError, match="namespace is required"):
            SpotResources.SPOT_NODE_POOL.path()

    def test_api_version(self) -> None:
        resource = ResourceDefinition(
            group="example.io", version="v2", plural="things", kind="Thing"
        )
        assert resource.api_version == "example.io/v2"

    def test_all_resources(self) -> None:
        kinds = {r.kind for r in SpotResources.all_resources()}
        assert kinds == {
            "Region",
            "ServerClass",
            "Organization",
            "CloudSpace",
            "SpotNodePool",
            "OnDemandNodePool",
        }

    def test_organizations_use_auth_group(self) -> None:
        assert SpotResources.ORGANIZATION.path() == "/apis/auth.ngpc.rxt.io/v1/organizations"


def test_cloudspace_selector() -> None:
    assert cloudspace_selector("cs1") == "ngpc.rxt.io/cloudspace=cs1"
