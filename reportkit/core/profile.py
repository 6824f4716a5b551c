"""Debug/release profile.

The profile decides how reports render: debug reports carry the file and
line that raised them, release reports carry the message only.

Python has no separate debug build, so the interpreter's ``__debug__`` flag
stands in for it: a plain ``python`` run is a debug run, ``python -O`` is a
release run. ``REPORTKIT_PROFILE`` overrides the flag. The profile is
resolved once per process and then frozen.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from functools import cache

__all__ = [
    "PROFILE_ENV",
    "Profile",
    "parse_profile",
    "detect_profile",
    "current_profile",
]

PROFILE_ENV = "REPORTKIT_PROFILE"


class Profile(Enum):
    """Rendering profile for reports."""

    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self) -> str:
        return self.value

    @property
    def is_debug(self) -> bool:
        return self is Profile.DEBUG


def parse_profile(value: str | None) -> Profile | None:
    """Parse a profile name, case-insensitively.

    Returns None for missing or unknown names.
    """
    if value is None:
        return None
    name = value.strip().lower()
    for profile in Profile:
        if profile.value == name:
            return profile
    return None


def detect_profile(environ: Mapping[str, str] | None = None) -> Profile:
    """Resolve the profile from the environment, then ``__debug__``."""
    env = os.environ if environ is None else environ
    override = parse_profile(env.get(PROFILE_ENV))
    if override is not None:
        return override
    return Profile.DEBUG if __debug__ else Profile.RELEASE


@cache
def current_profile() -> Profile:
    """Process-wide profile, resolved on first use."""
    return detect_profile()
