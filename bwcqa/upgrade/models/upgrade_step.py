from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from bwcqa.upgrade.version import Version

from .step_properties import StepProperties
from .upgrade_cluster_spec import UpgradeClusterSpec
from .upgrade_stage import Transition, UpgradeStage

if TYPE_CHECKING:
    from bwcqa.upgrade.cluster import ClusterControl


def base_name(version: Version) -> str:
    return f"v{version}"


@dataclass(slots=True, frozen=True)
class UpgradeStep:
    version: Version
    stage: UpgradeStage
    depends_on: str | None = None

    @property
    def task_name(self) -> str:
        return f"{base_name(self.version)}#{self.stage.suffix}"

    @property
    def transition(self) -> Transition:
        return self.stage.transition

    def properties(self, cluster: ClusterControl) -> Callable[[], StepProperties]:
        return functools.partial(StepProperties.resolve, self, cluster)


@dataclass(slots=True, frozen=True)
class CompletionMarker:
    version: Version
    depends_on: str

    @property
    def task_name(self) -> str:
        return f"{base_name(self.version)}#bwcTest"


@dataclass(slots=True, frozen=True)
class UpgradeChain:
    version: Version
    cluster_spec: UpgradeClusterSpec
    steps: tuple[UpgradeStep, UpgradeStep, UpgradeStep, UpgradeStep]
    marker: CompletionMarker

    @classmethod
    def create(cls, cluster_spec: UpgradeClusterSpec) -> UpgradeChain:
        version = cluster_spec.old_version

        steps: list[UpgradeStep] = []
        depends_on: str | None = None

        for stage in UpgradeStage:
            step = UpgradeStep(
                version=version,
                stage=stage,
                depends_on=depends_on,
            )

            steps.append(step)
            depends_on = step.task_name

        return cls(
            version=version,
            cluster_spec=cluster_spec,
            steps=tuple(steps),
            marker=CompletionMarker(
                version=version,
                depends_on=depends_on,
            ),
        )

    @property
    def name(self) -> str:
        return self.cluster_spec.name

    @property
    def task_names(self) -> list[str]:
        return [step.task_name for step in self.steps] + [self.marker.task_name]
