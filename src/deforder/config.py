"""
Recorder configuration.

Two settings, both read from the environment:

    DEFORDER_ORDER_POLICY  -- "first" (default) or "last"
    DEFORDER_LOG_LEVEL     -- logging level name used by the demo scripts

Unknown values are logged and replaced by the default; configuration
never prevents a class from being created.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Mapping, Optional, Union

logger = logging.getLogger("deforder.config")

ORDER_POLICY_ENV = "DEFORDER_ORDER_POLICY"
LOG_LEVEL_ENV = "DEFORDER_LOG_LEVEL"


class OrderPolicy(Enum):
    """How a reassigned name is positioned in the record."""
    FIRST_INSERTION = "first"  # Reassignment keeps the original slot
    LAST_INSERTION = "last"    # Reassignment moves the name to the end


DEFAULT_POLICY = OrderPolicy.FIRST_INSERTION
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class RecorderConfig:
    order_policy: OrderPolicy = DEFAULT_POLICY
    log_level: str = DEFAULT_LOG_LEVEL


def coerce_policy(value: Union[OrderPolicy, str]) -> OrderPolicy:
    """
    Turn a policy or its name into an OrderPolicy.

    Accepts the enum itself, its value ("first"/"last") or its member name
    ("FIRST_INSERTION"), case-insensitively.

    Raises:
        ValueError: value names no policy
    """
    if isinstance(value, OrderPolicy):
        return value
    if isinstance(value, str):
        key = value.strip()
        for policy in OrderPolicy:
            if key.lower() == policy.value or key.upper() == policy.name:
                return policy
    raise ValueError(
        f"Unknown order policy {value!r}; expected one of "
        f"{', '.join(p.value for p in OrderPolicy)}"
    )


def load_config(environ: Optional[Mapping[str, str]] = None) -> RecorderConfig:
    """Read the recorder configuration from ``environ`` (default: os.environ)."""
    env = os.environ if environ is None else environ

    policy = DEFAULT_POLICY
    raw_policy = env.get(ORDER_POLICY_ENV, "")
    if raw_policy:
        try:
            policy = coerce_policy(raw_policy)
        except ValueError:
            logger.warning(
                f"Unknown {ORDER_POLICY_ENV}='{raw_policy}', "
                f"defaulting to {DEFAULT_POLICY.value}"
            )

    log_level = DEFAULT_LOG_LEVEL
    raw_level = env.get(LOG_LEVEL_ENV, "")
    if raw_level:
        if isinstance(logging.getLevelName(raw_level.upper()), int):
            log_level = raw_level.upper()
        else:
            logger.warning(
                f"Unknown {LOG_LEVEL_ENV}='{raw_level}', "
                f"defaulting to {DEFAULT_LOG_LEVEL}"
            )

    return RecorderConfig(order_policy=policy, log_level=log_level)


@lru_cache(maxsize=1)
def get_config() -> RecorderConfig:
    """Process-wide configuration, loaded once from the environment."""
    return load_config()


def reset_config() -> None:
    """Forget the cached configuration so the next read reloads it."""
    get_config.cache_clear()
