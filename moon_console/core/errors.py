from __future__ import annotations

from typing import Sequence


class MoonConsoleError(RuntimeError):
    pass


class ConfigError(MoonConsoleError):
    def __init__(self, missing: Sequence[str]):
        keys = ", ".join(missing)
        super().__init__(
            f"Missing DB configuration. Provide {keys} as explicit settings or environment variables."
        )
        self.missing = tuple(missing)


class InvalidNumberError(MoonConsoleError):
    """Raised when an integer was required but the input line was not one."""

    def __init__(self, field: str, raw: str):
        super().__init__(f"{field}: expected an integer, got {raw!r}")
        self.field = field
        self.raw = raw
