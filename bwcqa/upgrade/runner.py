import asyncio
import time
from typing import Awaitable, Callable, List

from bwcqa.logging import Logger

from .cluster import ClusterControl, ClusterFactory
from .graph import UpgradeGraph
from .logging_models import (
    UpgradeDebug,
    UpgradeError,
    UpgradeInfo,
    UpgradeWarning,
)
from .models import (
    ChainOutcome,
    StepOutcome,
    StepProperties,
    StepResult,
    Transition,
    UpgradeChain,
    UpgradeOutcome,
    UpgradeStep,
)

StepExecutor = Callable[[UpgradeStep, StepProperties], Awaitable[None]]


class UpgradeRunner:
    """
    Runs every chain of an UpgradeGraph against its own cluster.

    Chains run concurrently. Within a chain a step only starts once every
    dependency the graph records for it has passed. The first failure
    skips the rest of that chain without affecting the others.
    """

    def __init__(
        self,
        cluster_factory: ClusterFactory,
        executor: StepExecutor,
        logger: Logger | None = None,
        logger_name: str = "bwcqa.upgrade",
    ) -> None:
        self._cluster_factory = cluster_factory
        self._executor = executor
        self._owns_logger = logger is None
        self._logger = logger or Logger()
        self._logger_name = logger_name

    async def run(self, graph: UpgradeGraph) -> UpgradeOutcome:
        start = time.monotonic()

        try:
            for version in graph.skipped_versions:
                await self._logger.log(
                    UpgradeDebug(
                        message=f"Skipping {version}: below the minimum upgrade version",
                        version=str(version),
                        task_name="",
                    ),
                    name=self._logger_name,
                )

            chain_outcomes: List[ChainOutcome] = await asyncio.gather(
                *[self._run_chain(graph, chain) for chain in graph.chains]
            )

        finally:
            if self._owns_logger:
                await self._logger.close()

        return UpgradeOutcome(
            duration_seconds=time.monotonic() - start,
            chains=list(chain_outcomes),
            skipped_versions=[str(version) for version in graph.skipped_versions],
        )

    async def _run_chain(
        self,
        graph: UpgradeGraph,
        chain: UpgradeChain,
    ) -> ChainOutcome:
        version = str(chain.version)
        start = time.monotonic()

        outcome = ChainOutcome(
            name=chain.name,
            version=version,
            result=StepResult.PASSED,
            duration_seconds=0.0,
        )

        cluster: ClusterControl | None = None

        try:
            cluster_started = time.monotonic()

            try:
                cluster = self._cluster_factory(chain.cluster_spec)
                await cluster.start()

            except Exception as error:
                # Nothing ran yet, so the first step owns the failure.
                first_step = chain.steps[0]
                outcome.steps.append(
                    self._to_outcome(
                        first_step,
                        StepResult.FAILED,
                        time.monotonic() - cluster_started,
                        error=error,
                    )
                )

                await self._log_failure(first_step, error)

            else:
                passed: set[str] = set()

                for step in chain.steps:
                    if not all(
                        dependency in passed
                        for dependency in graph.dependencies(step.task_name)
                    ):
                        break

                    step_outcome = await self._run_step(cluster, step)
                    outcome.steps.append(step_outcome)

                    if step_outcome.result != StepResult.PASSED:
                        break

                    passed.add(step.task_name)

            for step in chain.steps[len(outcome.steps):]:
                outcome.steps.append(
                    self._to_outcome(step, StepResult.SKIPPED, 0.0)
                )

            if all(step.result == StepResult.PASSED for step in outcome.steps):
                completion_result = StepResult.PASSED

            else:
                completion_result = StepResult.SKIPPED
                outcome.result = StepResult.FAILED

            outcome.completion = StepOutcome(
                task_name=chain.marker.task_name,
                version=version,
                result=completion_result,
                duration_seconds=0.0,
            )

            if completion_result == StepResult.PASSED:
                await self._logger.log(
                    UpgradeInfo(
                        message=f"Rolling upgrade from {version} passed",
                        version=version,
                        task_name=chain.marker.task_name,
                    ),
                    name=self._logger_name,
                )

        finally:
            if cluster is not None:
                await self._stop_cluster(chain, cluster)

            outcome.duration_seconds = time.monotonic() - start

        return outcome

    async def _run_step(
        self,
        cluster: ClusterControl,
        step: UpgradeStep,
    ) -> StepOutcome:
        version = str(step.version)
        step_started = time.monotonic()

        await self._logger.log(
            UpgradeDebug(
                message=f"Running {step.task_name}",
                version=version,
                task_name=step.task_name,
            ),
            name=self._logger_name,
        )

        try:
            await self._transition(cluster, step.transition)

            # Endpoints change across restarts, so read them only now.
            resolve_properties = step.properties(cluster)
            properties = resolve_properties()

            await self._executor(step, properties)

        except Exception as error:
            await self._log_failure(step, error)

            return self._to_outcome(
                step,
                StepResult.FAILED,
                time.monotonic() - step_started,
                error=error,
            )

        await self._logger.log(
            UpgradeInfo(
                message=f"Step {step.stage.test_step} against {version} passed",
                version=version,
                task_name=step.task_name,
            ),
            name=self._logger_name,
        )

        return self._to_outcome(
            step,
            StepResult.PASSED,
            time.monotonic() - step_started,
        )

    async def _transition(self, cluster: ClusterControl, transition: Transition):
        match transition:
            case Transition.FULL_RESTART:
                await cluster.full_restart()

            case Transition.NEXT_VERSION:
                await cluster.go_to_next_version()

            case _:
                pass

    async def _stop_cluster(self, chain: UpgradeChain, cluster: ClusterControl):
        try:
            await cluster.stop()

        except Exception as error:
            await self._logger.log(
                UpgradeWarning(
                    message=f"Failed to stop cluster {chain.name}",
                    version=str(chain.version),
                    task_name=chain.marker.task_name,
                ),
                name=self._logger_name,
                error=error,
            )

    async def _log_failure(self, step: UpgradeStep, error: Exception):
        await self._logger.log(
            UpgradeError(
                message=f"Step {step.task_name} failed",
                version=str(step.version),
                task_name=step.task_name,
            ),
            name=self._logger_name,
            error=error,
        )

    def _to_outcome(
        self,
        step: UpgradeStep,
        result: StepResult,
        duration_seconds: float,
        error: Exception | None = None,
    ) -> StepOutcome:
        return StepOutcome(
            task_name=step.task_name,
            version=str(step.version),
            result=result,
            duration_seconds=duration_seconds,
            test_step=step.stage.test_step,
            error=str(error) if error is not None else None,
        )
