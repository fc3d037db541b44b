import pytest

from bwcqa.env import Env
from bwcqa.expectations import LogEvent, Thrown
from bwcqa.expectations.logger_names import reset_default_prefixes
from bwcqa.logging import Entry, LoggingConfig, LogLevel
from bwcqa.upgrade import UpgradeClusterSpec


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)

    # Keep a developer's .env out of the defaults.
    monkeypatch.chdir(tmp_path)
    reset_default_prefixes()
    yield
    reset_default_prefixes()


@pytest.fixture(autouse=True)
def configure_log_level():
    config = LoggingConfig()
    config.update(log_level="error")
    yield
    config.update(log_level="info")


@pytest.fixture
def temp_log_directory(tmp_path) -> str:
    return str(tmp_path)


@pytest.fixture
def sample_entry_factory():
    def create_entry(
        message: str = "Test log message",
        level: LogLevel = LogLevel.INFO,
    ) -> Entry:
        return Entry(message=message, level=level)

    return create_entry


@pytest.fixture
def event_factory():
    def create_event(
        logger_name: str = "bwcqa.cluster.coordination",
        level: LogLevel = LogLevel.INFO,
        message: str = "node joined",
        thrown: Thrown | None = None,
    ) -> LogEvent:
        return LogEvent(
            logger_name=logger_name,
            level=level,
            formatted_message=message,
            thrown=thrown,
        )

    return create_event


class FakeCluster:
    """Records every transition and hands out new ports on each restart."""

    def __init__(self, spec: UpgradeClusterSpec, fail_on: str | None = None) -> None:
        self.spec = spec
        self.fail_on = fail_on
        self.calls: list[str] = []
        self.generation = 0
        self.stopped = False

    @property
    def name(self) -> str:
        return self.spec.name

    def http_socket_uris(self) -> list[str]:
        base_port = 9200 + self.generation * 10
        return [
            f"127.0.0.1:{base_port + index}"
            for index in range(self.spec.number_of_nodes)
        ]

    async def _record(self, call: str):
        self.calls.append(call)
        if self.fail_on == call:
            raise RuntimeError(f"{call} failed for {self.spec.name}")

    async def start(self):
        await self._record("start")

    async def full_restart(self):
        await self._record("full_restart")
        self.generation += 1

    async def go_to_next_version(self):
        await self._record("go_to_next_version")
        self.generation += 1

    async def stop(self):
        self.stopped = True
        await self._record("stop")


@pytest.fixture
def cluster_factory():
    clusters: dict[str, FakeCluster] = {}
    failures: dict[str, str] = {}

    def create_cluster(spec: UpgradeClusterSpec) -> FakeCluster:
        cluster = FakeCluster(spec, fail_on=failures.get(spec.name))
        clusters[spec.name] = cluster
        return cluster

    create_cluster.clusters = clusters
    create_cluster.failures = failures
    return create_cluster
