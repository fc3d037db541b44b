from dataclasses import dataclass

from .step_result import StepResult


@dataclass(slots=True)
class StepOutcome:
    task_name: str
    version: str
    result: StepResult
    duration_seconds: float
    test_step: str | None = None
    error: str | None = None
