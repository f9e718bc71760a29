import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from bloomkit.errors import InvalidParameters

ENV_PREFIX = "BLOOMKIT_"


@dataclass
class FilterSettings:
    default_capacity: int = 100000
    default_error_rate: float = 0.01
    salt: bytes = b""
    parallel_threshold: int = 10000
    max_workers: int = field(default_factory=lambda: os.cpu_count() or 1)
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.default_capacity < 1:
            raise InvalidParameters(
                f"default_capacity must be >= 1, got {self.default_capacity}"
            )
        if not 0 < self.default_error_rate < 1:
            raise InvalidParameters(
                f"default_error_rate must be in (0, 1), got {self.default_error_rate}"
            )
        if self.parallel_threshold < 1:
            raise InvalidParameters(
                f"parallel_threshold must be >= 1, got {self.parallel_threshold}"
            )
        if self.max_workers < 1:
            raise InvalidParameters(
                f"max_workers must be >= 1, got {self.max_workers}"
            )
        self.log_level = self.log_level.upper()


def _parse(environ: Mapping[str, str], name: str, convert):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError as exc:
        raise InvalidParameters(f"{ENV_PREFIX}{name}={raw!r}: {exc}") from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> FilterSettings:
    """Build settings from ``BLOOMKIT_*`` variables, falling back to defaults.

    Recognised variables: DEFAULT_CAPACITY, DEFAULT_ERROR_RATE, SALT (hex),
    PARALLEL_THRESHOLD, MAX_WORKERS, LOG_LEVEL.
    """
    env = os.environ if environ is None else environ
    values = {
        "default_capacity": _parse(env, "DEFAULT_CAPACITY", int),
        "default_error_rate": _parse(env, "DEFAULT_ERROR_RATE", float),
        "salt": _parse(env, "SALT", bytes.fromhex),
        "parallel_threshold": _parse(env, "PARALLEL_THRESHOLD", int),
        "max_workers": _parse(env, "MAX_WORKERS", int),
        "log_level": _parse(env, "LOG_LEVEL", str),
    }
    return FilterSettings(**{k: v for k, v in values.items() if v is not None})


SETTINGS = load_settings()
