import functools

from bwcqa.env import Env, load_env


@functools.lru_cache(maxsize=1)
def _default_prefixes() -> tuple[str, str]:
    env = load_env(Env)
    return (
        env.BWCQA_LOGGER_ROOT_PREFIX,
        env.logger_common_prefix,
    )


def reset_default_prefixes():
    _default_prefixes.cache_clear()


def qualify_logger_name(
    name: str,
    root_prefix: str | None = None,
    common_prefix: str | None = None,
) -> str:
    """
    Turn a short logger name into the fully-qualified name the system
    under test logs with: drop the root namespace if it is already there,
    then prepend the common prefix.
    """
    default_root_prefix, default_common_prefix = _default_prefixes()

    if root_prefix is None:
        root_prefix = default_root_prefix

    if common_prefix is None:
        common_prefix = default_common_prefix

    if root_prefix and name.startswith(root_prefix):
        name = name[len(root_prefix):]

    return common_prefix + name
