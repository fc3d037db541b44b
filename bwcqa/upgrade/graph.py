from __future__ import annotations

from typing import Dict, Iterable, List

import networkx

from bwcqa.env import Env, load_env

from .errors import UpgradeGraphError
from .models import (
    CompletionMarker,
    UpgradeChain,
    UpgradeClusterSpec,
    UpgradeSpec,
    UpgradeStep,
)
from .models.upgrade_step import base_name
from .version import Version


class UpgradeGraph:
    """
    Dependency graph of rolling upgrade tasks.

    Each tracked version gets a chain of four gated steps plus a
    completion marker. Chains share no edges, so they can be scheduled
    in any order relative to each other.
    """

    def __init__(
        self,
        chains: List[UpgradeChain],
        skipped_versions: List[Version] | None = None,
    ) -> None:
        self.graph = networkx.DiGraph()
        self.skipped_versions = skipped_versions or []

        self._chains: Dict[Version, UpgradeChain] = {}

        for chain in chains:
            if chain.version in self._chains:
                raise UpgradeGraphError(
                    f"Version {chain.version} is tracked more than once"
                )

            self._chains[chain.version] = chain

            for step in chain.steps:
                self.graph.add_node(step.task_name, task=step)

                if step.depends_on:
                    self.graph.add_edge(step.depends_on, step.task_name)

            self.graph.add_node(chain.marker.task_name, task=chain.marker)
            self.graph.add_edge(chain.marker.depends_on, chain.marker.task_name)

        if not networkx.is_directed_acyclic_graph(self.graph):
            raise UpgradeGraphError("Upgrade task graph contains a cycle")

    @classmethod
    def build(
        cls,
        versions: Iterable[str | Version],
        current_version: str | Version,
        minimum_version: str | Version | None = None,
        number_of_nodes: int | None = None,
        settings: dict[str, str] | None = None,
    ) -> UpgradeGraph:
        env: Env | None = None
        if minimum_version is None or number_of_nodes is None or settings is None:
            env = load_env(Env)

        if minimum_version is None:
            minimum_version = env.BWCQA_MINIMUM_UPGRADE_VERSION

        if number_of_nodes is None:
            number_of_nodes = env.BWCQA_CLUSTER_NODES

        if settings is None:
            settings = env.get_cluster_settings()

        floor = Version.parse(minimum_version)
        new_version = Version.parse(current_version)

        chains: List[UpgradeChain] = []
        skipped_versions: List[Version] = []

        for version in versions:
            old_version = Version.parse(version)

            # Restarting in place is not reliable below the floor when
            # plugins are installed.
            if old_version.before(floor):
                skipped_versions.append(old_version)
                continue

            chains.append(
                UpgradeChain.create(
                    UpgradeClusterSpec(
                        name=base_name(old_version),
                        old_version=old_version,
                        new_version=new_version,
                        number_of_nodes=number_of_nodes,
                        settings=dict(settings),
                    )
                )
            )

        return cls(
            chains,
            skipped_versions=skipped_versions,
        )

    @classmethod
    def from_spec(cls, spec: UpgradeSpec) -> UpgradeGraph:
        return cls.build(
            spec.versions,
            spec.current_version,
            minimum_version=spec.minimum_version,
            number_of_nodes=spec.number_of_nodes,
            settings=spec.settings,
        )

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def chains(self) -> List[UpgradeChain]:
        return list(self._chains.values())

    @property
    def task_names(self) -> List[str]:
        return list(networkx.topological_sort(self.graph))

    def has_chain(self, version: str | Version) -> bool:
        return Version.parse(version) in self._chains

    def chain(self, version: str | Version) -> UpgradeChain:
        parsed = Version.parse(version)
        if parsed not in self._chains:
            raise KeyError(f"Version {parsed} has no upgrade chain")

        return self._chains[parsed]

    def steps_for(self, version: str | Version) -> tuple[UpgradeStep, ...]:
        if not self.has_chain(version):
            return ()

        return self.chain(version).steps

    def task(self, task_name: str) -> UpgradeStep | CompletionMarker:
        if task_name not in self.graph:
            raise KeyError(f"Unknown upgrade task '{task_name}'")

        return self.graph.nodes[task_name]["task"]

    def dependencies(self, task_name: str) -> List[str]:
        if task_name not in self.graph:
            raise KeyError(f"Unknown upgrade task '{task_name}'")

        return list(self.graph.predecessors(task_name))

    def traversal_order(self) -> List[List[str]]:
        sources = [
            task_name
            for task_name, in_degree in self.graph.in_degree()
            if in_degree == 0
        ]

        if not sources:
            return []

        return [
            list(traversal_layer)
            for traversal_layer in networkx.bfs_layers(self.graph, sources)
        ]
