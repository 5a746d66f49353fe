"""Resource definitions for the Rackspace Spot API."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

SPOT_GROUP = "ngpc.rxt.io"
AUTH_GROUP = "auth.ngpc.rxt.io"
PRICING_GROUP = "pricing.ngpc.rxt.io"

CLOUDSPACE_LABEL = "ngpc.rxt.io/cloudspace"


@dataclass(frozen=True)
class ResourceDefinition:
    """Definition of a Spot API resource type."""

    group: str
    version: str
    plural: str
    kind: str
    namespaced: bool = True

    @property
    def api_version(self) -> str:
        """Full API version (group/version)."""
        return f"{self.group}/{self.version}"

    def path(self, namespace: str | None = None, name: str | None = None) -> str:
        """Build the REST path for a collection or a single resource.

        Args:
            namespace: Organization namespace; required for namespaced resources.
            name: Resource name; omit for the collection path.

        Raises:
            ValueError: If a namespaced resource is addressed without a namespace.
        """
        if self.namespaced and not namespace:
            raise ValueError(f"{self.kind} is namespaced; a namespace is required")

        parts = ["/apis", self.group, self.version]
        if self.namespaced:
            parts += ["namespaces", quote(namespace or "", safe="")]
        parts.append(self.plural)
        if name:
            parts.append(quote(name, safe=""))
        return "/".join(parts)


def cloudspace_selector(cloudspace: str) -> str:
    """Label selector matching resources owned by a cloudspace."""
    return f"{CLOUDSPACE_LABEL}={cloudspace}"


class SpotResources:
    """Resource definitions exposed by the Spot API."""

    REGION = ResourceDefinition(
        group=SPOT_GROUP,
        version="v1",
        plural="regions",
        kind="Region",
        namespaced=False,
    )

    SERVER_CLASS = ResourceDefinition(
        group=SPOT_GROUP,
        version="v1",
        plural="serverclasses",
        kind="ServerClass",
        namespaced=False,
    )

    ORGANIZATION = ResourceDefinition(
        group=AUTH_GROUP,
        version="v1",
        plural="organizations",
        kind="Organization",
        namespaced=False,
    )

    CLOUDSPACE = ResourceDefinition(
        group=SPOT_GROUP,
        version="v1",
        plural="cloudspaces",
        kind="CloudSpace",
    )

    SPOT_NODE_POOL = ResourceDefinition(
        group=SPOT_GROUP,
        version="v1",
        plural="spotnodepools",
        kind="SpotNodePool",
    )

    ONDEMAND_NODE_POOL = ResourceDefinition(
        group=SPOT_GROUP,
        version="v1",
        plural="ondemandnodepools",
        kind="OnDemandNodePool",
    )

    @classmethod
    def all_resources(cls) -> list[ResourceDefinition]:
        """Return all resource definitions."""
        return [
            cls.REGION,
            cls.SERVER_CLASS,
            cls.ORGANIZATION,
            cls.CLOUDSPACE,
            cls.SPOT_NODE_POOL,
            cls.ONDEMAND_NODE_POOL,
        ]
