import json
from dataclasses import dataclass, field
from pathlib import Path

from bwcqa.env import Env, load_env
from bwcqa.upgrade.version import Version


@dataclass(slots=True)
class UpgradeSpec:
    versions: list[Version]
    current_version: Version
    minimum_version: Version
    number_of_nodes: int = 2
    settings: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict, env: Env | None = None) -> "UpgradeSpec":
        if env is None:
            env = load_env(Env)

        versions_data = data.get("versions")
        if not isinstance(versions_data, list):
            raise ValueError("Upgrade spec requires a list of versions")

        current_version = data.get("current_version")
        if not current_version:
            raise ValueError("Upgrade spec requires current_version")

        minimum_version = data.get(
            "minimum_version",
            env.BWCQA_MINIMUM_UPGRADE_VERSION,
        )

        number_of_nodes = int(
            data.get("number_of_nodes", env.BWCQA_CLUSTER_NODES)
        )
        if number_of_nodes < 1:
            raise ValueError("number_of_nodes must be at least 1")

        settings = env.get_cluster_settings()
        settings_data = data.get("settings")
        if settings_data is not None:
            if not isinstance(settings_data, dict):
                raise ValueError("settings must be a dict")

            settings.update(
                {str(key): str(value) for key, value in settings_data.items()}
            )

        return cls(
            versions=[Version.parse(version) for version in versions_data],
            current_version=Version.parse(current_version),
            minimum_version=Version.parse(minimum_version),
            number_of_nodes=number_of_nodes,
            settings=settings,
        )

    @classmethod
    def from_json(cls, path: str | Path, env: Env | None = None) -> "UpgradeSpec":
        spec_path = Path(path)
        payload = json.loads(spec_path.read_text())
        return cls.from_dict(payload, env=env)
