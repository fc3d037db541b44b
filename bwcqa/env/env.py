from __future__ import annotations
from pydantic import BaseModel, StrictBool, StrictStr, StrictInt
from typing import Callable, Dict, Literal, Union

PrimaryType = Union[str, int, float, bytes, bool]


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Env(BaseModel):
    BWCQA_LOG_LEVEL: StrictStr = "info"
    BWCQA_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    BWCQA_LOGS_DIRECTORY: StrictStr | None = None

    # Logger name qualification for expectations
    BWCQA_LOGGER_ROOT_PREFIX: StrictStr = "bwcqa."
    BWCQA_LOGGER_COMMON_PREFIX: StrictStr | None = None

    # Rolling upgrade settings
    BWCQA_MINIMUM_UPGRADE_VERSION: StrictStr = "6.3.0"
    BWCQA_CLUSTER_NODES: StrictInt = 2
    BWCQA_REQUIRE_CONTENT_TYPE: StrictBool = True

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "BWCQA_LOG_LEVEL": str,
            "BWCQA_LOG_OUTPUT": str,
            "BWCQA_LOGS_DIRECTORY": str,
            "BWCQA_LOGGER_ROOT_PREFIX": str,
            "BWCQA_LOGGER_COMMON_PREFIX": str,
            "BWCQA_MINIMUM_UPGRADE_VERSION": str,
            "BWCQA_CLUSTER_NODES": int,
            "BWCQA_REQUIRE_CONTENT_TYPE": _to_bool,
        }

    @property
    def logger_common_prefix(self) -> str:
        if self.BWCQA_LOGGER_COMMON_PREFIX is None:
            return self.BWCQA_LOGGER_ROOT_PREFIX

        return self.BWCQA_LOGGER_COMMON_PREFIX

    def get_logging_config(self) -> dict:
        """Get keyword arguments for LoggingConfig.update()."""
        return {
            'log_directory': self.BWCQA_LOGS_DIRECTORY,
            'log_level': self.BWCQA_LOG_LEVEL,
            'log_output': self.BWCQA_LOG_OUTPUT,
        }

    def get_cluster_settings(self) -> dict[str, str]:
        """Get the cluster-wide settings applied to every upgrade cluster."""
        return {
            'http.content_type.required': 'true' if self.BWCQA_REQUIRE_CONTENT_TYPE else 'false',
        }
