from enum import Enum


class Transition(Enum):
    NONE = "NONE"
    FULL_RESTART = "FULL_RESTART"
    NEXT_VERSION = "NEXT_VERSION"


class UpgradeStage(Enum):
    STEP1 = "step1"
    STEP2 = "step2"
    STEP3 = "step3"
    STEP4 = "step4"

    @property
    def test_step(self) -> str:
        return self.value

    @property
    def is_old_cluster(self) -> bool:
        return self in (UpgradeStage.STEP1, UpgradeStage.STEP2)

    @property
    def transition(self) -> Transition:
        transitions = {
            UpgradeStage.STEP1: Transition.NONE,
            UpgradeStage.STEP2: Transition.FULL_RESTART,
            UpgradeStage.STEP3: Transition.NEXT_VERSION,
            UpgradeStage.STEP4: Transition.FULL_RESTART,
        }

        return transitions[self]

    @property
    def suffix(self) -> str:
        cluster = "OldCluster" if self.is_old_cluster else "NewCluster"
        return f"Step{self.value[-1]}{cluster}Test"
