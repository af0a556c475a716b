"""Semantic version parsing and comparison.

Remote gate values are parsed strictly (1-3 numeric components, padded to
MAJOR.MINOR.PATCH). The installed app's own version may be a PEP 440 string
and goes through release_version() instead.
"""

import re
from dataclasses import dataclass
from enum import Enum

from packaging.version import Version, InvalidVersion

from versiongate.core.errors import InvalidVersionFormat

_COMPONENT = re.compile(r'[0-9]+')
MAX_COMPONENTS = 3


@dataclass(frozen=True, order=True)
class SemanticVersion:
    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self):
        for value in (self.major, self.minor, self.patch):
            # bool is an int subclass; True.0.0 is not a version
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise InvalidVersionFormat(
                    f"Version components must be non-negative integers: "
                    f"{self.major!r}.{self.minor!r}.{self.patch!r}"
                )

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def parse_version(text: str) -> SemanticVersion:
    """Parse "1.2.3", "1.2" or "2" into a SemanticVersion.

    Missing trailing components are padded with 0. Raises InvalidVersionFormat
    for empty input, non-numeric or signed components, empty components, and
    more than three components. Invalid input is never coerced to 0.0.0.
    """
    if not isinstance(text, str):
        raise InvalidVersionFormat(f"Version must be a string, got {type(text).__name__}")

    s = text.strip()
    if not s:
        raise InvalidVersionFormat("Version is empty")

    parts = s.split('.')
    if len(parts) > MAX_COMPONENTS:
        raise InvalidVersionFormat(
            f"Too many components in {text!r} (expected at most {MAX_COMPONENTS})"
        )

    for part in parts:
        if not _COMPONENT.fullmatch(part):
            raise InvalidVersionFormat(f"Non-numeric component {part!r} in {text!r}")

    parts += ['0'] * (MAX_COMPONENTS - len(parts))
    major, minor, patch = (int(p) for p in parts)
    return SemanticVersion(major, minor, patch)


def compare_versions(a: SemanticVersion, b: SemanticVersion) -> Ordering:
    """Three-way comparison, major first, then minor, then patch."""
    if a.to_tuple() < b.to_tuple():
        return Ordering.LESS
    if a.to_tuple() > b.to_tuple():
        return Ordering.GREATER
    return Ordering.EQUAL


def meets_minimum(current: SemanticVersion, minimum: SemanticVersion) -> bool:
    """True if current is at or above minimum."""
    return compare_versions(current, minimum) is not Ordering.LESS


def release_version(text: str) -> SemanticVersion:
    """Reduce a PEP 440 version of the installed app to its release triple.

    "1.4.0.dev3" -> 1.4.0, "2.0rc1" -> 2.0.0, "v1.2" -> 1.2.0. Pre-release and
    local segments are dropped: a 1.4.0 beta gates like 1.4.0.
    """
    try:
        release = Version(text.strip()).release
    except (InvalidVersion, AttributeError) as e:
        raise InvalidVersionFormat(f"Cannot parse installed version {text!r}: {e}") from e

    if len(release) > MAX_COMPONENTS:
        raise InvalidVersionFormat(
            f"Too many components in {text!r} (expected at most {MAX_COMPONENTS})"
        )

    padded = list(release) + [0] * (MAX_COMPONENTS - len(release))
    return SemanticVersion(*padded)
