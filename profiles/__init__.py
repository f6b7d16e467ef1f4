"""Frame-time workload profiles available to the demo, keyed by CLI name."""

from __future__ import annotations

from typing import Callable

from core.profile import Profile
from profiles import profile_ramp, profile_steady, profile_stutter

PROFILES: dict[str, Callable[[], Profile]] = {
    "profile_ramp": profile_ramp.create_profile,
    "profile_steady": profile_steady.create_profile,
    "profile_stutter": profile_stutter.create_profile,
}


def list_available_profiles() -> list[str]:
    return sorted(PROFILES)


def create_profile(name: str) -> Profile:
    """Instantiate a profile by name; dashes and case are normalized."""
    key = name.strip().lower().replace("-", "_")
    factory = PROFILES.get(key)
    if factory is None:
        raise ValueError(f"Unknown profile {name!r}; choose from {', '.join(list_available_profiles())}")
    return factory()
