from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SemverVersion:
    major: int
    minor: int
    build: int

    def __str__(self) -> str:
        return f"^{self.major}.{self.minor}.{self.build}"


@dataclass(frozen=True)
class OpaqueVersion:
    """A version string that is not semver-shaped (or no version at all)."""
    raw: Optional[str] = None

    def __str__(self) -> str:
        return self.raw if self.raw is not None else "<none>"


ConfigFileVersion = SemverVersion | OpaqueVersion
