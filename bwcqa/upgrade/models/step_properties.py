from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bwcqa.upgrade.cluster import ClusterControl
    from .upgrade_step import UpgradeStep


@dataclass(slots=True, frozen=True)
class StepProperties:
    test_step: str
    is_old_cluster: bool
    old_cluster_version: str
    rest_cluster: str
    cluster_name: str

    @classmethod
    def resolve(cls, step: UpgradeStep, cluster: ClusterControl) -> StepProperties:
        """Read the cluster's current endpoints and name. Call only once the
        transition preceding the step has completed."""
        return cls(
            test_step=step.stage.test_step,
            is_old_cluster=step.stage.is_old_cluster,
            old_cluster_version=str(step.version.without_qualifier()),
            rest_cluster=",".join(cluster.http_socket_uris()),
            cluster_name=cluster.name,
        )

    def to_system_properties(self) -> dict[str, str]:
        return {
            'tests.test_step': self.test_step,
            'tests.is_old_cluster': 'true' if self.is_old_cluster else 'false',
            'tests.old_cluster_version': self.old_cluster_version,
            'tests.rest.cluster': self.rest_cluster,
            'tests.clustername': self.cluster_name,
        }
