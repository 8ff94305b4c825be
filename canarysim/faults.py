from __future__ import annotations

import random
from dataclasses import dataclass

from .log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FaultProfile:
    error_rate: float = 0.0  # 0..1
    latency_ms: int = 50


DEFAULT_PROFILE = FaultProfile()

# version -> behaviour; anything not listed gets DEFAULT_PROFILE
FAULT_PROFILES: dict[str, FaultProfile] = {
    "v1.2.0": FaultProfile(error_rate=0.3, latency_ms=DEFAULT_PROFILE.latency_ms),
    "v1.3.0": FaultProfile(error_rate=DEFAULT_PROFILE.error_rate, latency_ms=2000),
}


def resolve_profile(version: str) -> FaultProfile:
    return FAULT_PROFILES.get(version, DEFAULT_PROFILE)


class FaultInjector:
    """Decides whether a request should fail.

    The random source is injectable so tests can force either branch.
    """

    def __init__(self, error_rate: float, rng: random.Random | None = None) -> None:
        self.error_rate = float(error_rate)
        self.rng = rng if rng is not None else random.Random()

    def should_fail(self, endpoint: str = "") -> bool:
        # No draw at all when the rate is zero.
        if self.error_rate > 0 and self.rng.random() < self.error_rate:
            logger.debug("injected fault on %s (error_rate=%s)", endpoint or "?", self.error_rate)
            return True
        return False
