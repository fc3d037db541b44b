from dataclasses import dataclass, field

from .step_outcome import StepOutcome
from .step_result import StepResult


@dataclass(slots=True)
class ChainOutcome:
    name: str
    version: str
    result: StepResult
    duration_seconds: float
    steps: list[StepOutcome] = field(default_factory=list)
    completion: StepOutcome | None = None

    @property
    def failed_step(self) -> StepOutcome | None:
        for step in self.steps:
            if step.result == StepResult.FAILED:
                return step

        return None

    def get_step(self, test_step: str) -> StepOutcome | None:
        for step in self.steps:
            if step.test_step == test_step:
                return step

        return None
