from dataclasses import dataclass, field

from bwcqa.upgrade.errors import StepFailure, UpgradeStepError

from .chain_outcome import ChainOutcome
from .step_result import StepResult


@dataclass(slots=True)
class UpgradeOutcome:
    duration_seconds: float
    chains: list[ChainOutcome] = field(default_factory=list)
    skipped_versions: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(chain.result == StepResult.PASSED for chain in self.chains)

    @property
    def failures(self) -> list[StepFailure]:
        failures: list[StepFailure] = []

        for chain in self.chains:
            for step in chain.steps:
                if step.result == StepResult.FAILED:
                    failures.append(
                        StepFailure(
                            version=chain.version,
                            task_name=step.task_name,
                            error=step.error or "unknown error",
                        )
                    )

        return failures

    def get_chain(self, version: str) -> ChainOutcome | None:
        for chain in self.chains:
            if chain.version == version:
                return chain

        return None

    def raise_for_failures(self):
        failures = self.failures
        if failures:
            raise UpgradeStepError(failures)
