import functools
import re


def is_simple_match_pattern(pattern: str) -> bool:
    return "*" in pattern or "?" in pattern


@functools.lru_cache(maxsize=1024)
def _compile_simple_pattern(pattern: str) -> re.Pattern:
    parts: list[str] = []

    for char in pattern:
        if char == "*":
            parts.append(".*")

        elif char == "?":
            parts.append(".")

        else:
            parts.append(re.escape(char))

    return re.compile("".join(parts), re.DOTALL)


def simple_match(pattern: str, value: str) -> bool:
    """
    Match `value` in full against a wildcard pattern where `*` stands for
    any run of characters (including none) and `?` for exactly one.
    """
    return _compile_simple_pattern(pattern).fullmatch(value) is not None


def match_message(pattern: str, formatted_message: str) -> bool:
    if is_simple_match_pattern(pattern):
        return simple_match(pattern, formatted_message)

    return pattern in formatted_message
