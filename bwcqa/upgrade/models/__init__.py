from .chain_outcome import ChainOutcome
from .step_outcome import StepOutcome
from .step_properties import StepProperties
from .step_result import StepResult
from .upgrade_cluster_spec import UpgradeClusterSpec
from .upgrade_outcome import UpgradeOutcome
from .upgrade_spec import UpgradeSpec
from .upgrade_stage import Transition, UpgradeStage
from .upgrade_step import CompletionMarker, UpgradeChain, UpgradeStep

__all__ = [
    "ChainOutcome",
    "StepOutcome",
    "StepProperties",
    "StepResult",
    "UpgradeClusterSpec",
    "UpgradeOutcome",
    "UpgradeSpec",
    "Transition",
    "UpgradeStage",
    "CompletionMarker",
    "UpgradeChain",
    "UpgradeStep",
]
