from dataclasses import dataclass, field

from bwcqa.upgrade.version import Version


@dataclass(slots=True, frozen=True)
class UpgradeClusterSpec:
    name: str
    old_version: Version
    new_version: Version
    number_of_nodes: int = 2
    settings: dict[str, str] = field(
        default_factory=lambda: {'http.content_type.required': 'true'},
    )

    @property
    def versions(self) -> tuple[Version, Version]:
        return (self.old_version, self.new_version)
