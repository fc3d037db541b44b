"""
Rolling upgrade orchestration.

Each tracked version at or above the minimum upgrade version gets its
own cluster and a four step chain: run against the old cluster, run
again after a full restart, upgrade every node to the current version,
then run once more after another full restart.
"""

from .cluster import (
    ClusterControl as ClusterControl,
    ClusterFactory as ClusterFactory,
)
from .errors import (
    InvalidVersionError as InvalidVersionError,
    StepFailure as StepFailure,
    UpgradeGraphError as UpgradeGraphError,
    UpgradeStepError as UpgradeStepError,
)
from .graph import UpgradeGraph as UpgradeGraph
from .models import (
    ChainOutcome as ChainOutcome,
    CompletionMarker as CompletionMarker,
    StepOutcome as StepOutcome,
    StepProperties as StepProperties,
    StepResult as StepResult,
    Transition as Transition,
    UpgradeChain as UpgradeChain,
    UpgradeClusterSpec as UpgradeClusterSpec,
    UpgradeOutcome as UpgradeOutcome,
    UpgradeSpec as UpgradeSpec,
    UpgradeStage as UpgradeStage,
    UpgradeStep as UpgradeStep,
)
from .runner import (
    StepExecutor as StepExecutor,
    UpgradeRunner as UpgradeRunner,
)
from .version import Version as Version
