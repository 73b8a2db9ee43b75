"""Randomized control request assembly."""

import random
from typing import Optional, Protocol, runtime_checkable

from death_shock.config import CONTROL_PATH
from death_shock.domain.models import ShockConfig, ShockRequest


@runtime_checkable
class RandomSource(Protocol):
    """Anything with random.Random's closed-interval randint."""

    def randint(self, a: int, b: int) -> int: ...


def build_url(endpoint_domain: str) -> str:
    return f"https://{endpoint_domain}{CONTROL_PATH}"


def build_headers(api_token: str) -> dict:
    return {
        "Content-Type": "application/json",
        "accept": "application/json",
        "OpenShockToken": api_token,
    }


def build_request(cfg: ShockConfig, rng: Optional[RandomSource] = None) -> ShockRequest:
    """Draw intensity and duration within cfg's bounds and assemble the request."""
    rng = rng or random.Random()
    intensity = rng.randint(cfg.min_intensity, cfg.max_intensity)
    duration_ms = rng.randint(cfg.min_duration, cfg.max_duration)
    return ShockRequest(
        url=build_url(cfg.endpoint_domain),
        headers=build_headers(cfg.api_token),
        shocker_id=cfg.shocker_id,
        custom_name=cfg.custom_name,
        intensity=intensity,
        duration_ms=duration_ms,
    )
