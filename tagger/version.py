"""
version.py

Responsibility: the version model and the pure logic around it.

Release tags carry their version in the subject line, e.g. "Version 1.4.2 (7)",
where the parenthesised number is the build counter. This module parses such
subjects and computes the next version for a bump kind. It does not know about
git; callers hand it the subject string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum

DEFAULT_SNAPSHOT_SUFFIX = "SNAPSHOT"

_SUBJECT_RE = re.compile(r"^Version\s+(\d+)\.(\d+)\.(\d+)(.*)$")
_NON_DIGIT_RE = re.compile(r"\D")


class MalformedVersionTag(ValueError):
    pass


class BumpKind(Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    SNAPSHOT = "snapshot"

    @classmethod
    def parse(cls, text: str) -> BumpKind:
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown bump kind: {text!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class Version:
    """A release version: semantic version segments plus a build counter."""

    major: int
    minor: int
    patch: int
    build: int
    snapshot: bool = False
    snapshot_suffix: str = field(default=DEFAULT_SNAPSHOT_SUFFIX, compare=False)

    def __post_init__(self) -> None:
        for field_name in ("major", "minor", "patch", "build"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"Version {field_name} must be a non-negative integer, got {value!r}")

    @classmethod
    def zero(cls) -> Version:
        return cls(0, 0, 0, 0)

    @property
    def semver(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def name(self) -> str:
        """
        The version name used for tags: "X.Y.Z", or "X.Y.Z-B-SNAPSHOT" for snapshots.
        """
        if self.snapshot:
            return f"{self.semver}-{self.build}-{self.snapshot_suffix}"
        return self.semver

    @property
    def subject(self) -> str:
        return f"Version {self.semver} ({self.build})"

    def components(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.build)


def _segments(subject: str) -> list[str]:
    match = _SUBJECT_RE.match(subject)
    if match is None:
        raise MalformedVersionTag(f"Unexpected version format in tag subject: {subject!r}")
    major, minor, patch, rest = match.groups()
    return [major, minor, patch, *rest.split()]


def parse_version_subject(subject: str | None) -> Version:
    """
    Parse a release tag subject line into a `Version`.

    - Missing or empty subject: the zero version (no release yet).
    - "Version X.Y.Z": build defaults to 1.
    - "Version X.Y.Z (N)": build is N, with any non-digit characters stripped.
    - Anything else raises `MalformedVersionTag`.
    """
    text = (subject or "").strip()
    if not text:
        return Version.zero()

    segments = _segments(text)
    if len(segments) == 3:
        major, minor, patch = (int(s) for s in segments)
        return Version(major, minor, patch, 1)

    if len(segments) == 4:
        build_digits = _NON_DIGIT_RE.sub("", segments[3])
        if not build_digits:
            raise MalformedVersionTag(f"Unexpected build number in tag subject: {subject!r}")
        major, minor, patch = (int(s) for s in segments[:3])
        return Version(major, minor, patch, int(build_digits))

    raise MalformedVersionTag(f"Unexpected version format in tag subject: {subject!r}")


def next_version(current: Version, kind: BumpKind) -> Version:
    # Every bump advances the build counter; only snapshots keep the semver segments.
    build = current.build + 1
    if kind is BumpKind.MAJOR:
        return replace(current, major=current.major + 1, minor=0, patch=0, build=build, snapshot=False)
    if kind is BumpKind.MINOR:
        return replace(current, minor=current.minor + 1, patch=0, build=build, snapshot=False)
    if kind is BumpKind.PATCH:
        return replace(current, patch=current.patch + 1, build=build, snapshot=False)
    return replace(current, build=build, snapshot=True)
