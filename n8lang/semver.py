"""Semantic version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_INT_MAX = 2**31 - 1

_SEMVER = re.compile(
    r"([0-9]+)\.([0-9]+)\.([0-9]+)"
    r"(?:-([0-9A-Za-z\-.]+))?"
    r"(?:\+([0-9A-Za-z\-.]+))?"
)


def validate_semver(version: str) -> bool:
    """Return whether the text is a well-formed semantic version."""
    return _SEMVER.fullmatch(version) is not None


def _component(text: str) -> int:
    value = int(text)
    if value > _INT_MAX:
        raise OverflowError(f"Version component out of range: {text}")
    return value


@dataclass
class SemVer:
    """A version made of major, minor and patch numbers with optional tags."""

    major: int
    minor: int
    patch: int
    pre_release: Optional[str] = None
    build_metadata: Optional[str] = None

    @classmethod
    def parse(cls, version: str) -> Optional["SemVer"]:
        """Parse a version string, returning None if it is not valid."""
        match = _SEMVER.fullmatch(version)
        if match is None:
            return None
        major, minor, patch, pre_release, build_metadata = match.groups()
        return cls(
            _component(major),
            _component(minor),
            _component(patch),
            pre_release,
            build_metadata,
        )

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            text += f"-{self.pre_release}"
        if self.build_metadata is not None:
            text += f"+{self.build_metadata}"
        return text