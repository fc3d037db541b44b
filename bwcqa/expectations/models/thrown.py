from __future__ import annotations

import msgspec


class Thrown(msgspec.Struct, frozen=True):
    kind: str
    message: str

    @classmethod
    def from_exception(cls, error: BaseException) -> Thrown:
        return cls(
            kind=type(error).__name__,
            message=str(error),
        )
