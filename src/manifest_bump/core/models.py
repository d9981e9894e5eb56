"""Core domain models for manifest-bump."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import semver
from pydantic import BaseModel, Field, PrivateAttr, model_validator

from .constants import BUMP_KEYWORDS, VERSION_PATTERN
from .exceptions import InvalidVersionError, VersionNotFoundError


class BumpKind(str, Enum):
    """Which part of the version a bump changes."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    EXPLICIT = "explicit"


class Version(BaseModel):
    """A major.minor.patch version triple."""

    major: int = Field(..., ge=0, description="Major component")
    minor: int = Field(..., ge=0, description="Minor component")
    patch: int = Field(..., ge=0, description="Patch component")

    # Original spelling when it differs from the canonical form, e.g. "01.2.3".
    _spelling: Optional[str] = PrivateAttr(default=None)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a strict ``X.Y.Z`` string.

        Pre-release and build suffixes are rejected, so ``1.2.3-rc1`` and
        ``v1.2.3`` both fail with :class:`InvalidVersionError`. Leading zeros
        are accepted and kept until the version is bumped.
        """
        match = VERSION_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidVersionError(text)
        major, minor, patch = (int(part) for part in match.groups())
        version = cls(major=major, minor=minor, patch=patch)
        if str(version) != text:
            version._spelling = text
        return version

    def to_semver(self) -> semver.Version:
        return semver.Version(self.major, self.minor, self.patch)

    def bump(self, request: BumpRequest) -> None:
        """Apply a bump in place.

        Bumping minor resets patch, bumping major resets minor and patch.
        An explicit request replaces the whole triple.
        """
        if request.kind is BumpKind.EXPLICIT:
            if request.version is None:
                raise ValueError("Explicit bump requires a target version")
            target = request.version.to_semver()
        elif request.kind is BumpKind.MAJOR:
            target = self.to_semver().bump_major()
        elif request.kind is BumpKind.MINOR:
            target = self.to_semver().bump_minor()
        else:
            target = self.to_semver().bump_patch()

        self.major = target.major
        self.minor = target.minor
        self.patch = target.patch
        self._spelling = None

    def __str__(self) -> str:
        if self._spelling is not None:
            return self._spelling
        return f"{self.major}.{self.minor}.{self.patch}"


class BumpRequest(BaseModel):
    """A requested version change."""

    kind: BumpKind = Field(default=BumpKind.PATCH, description="Part of the version to bump")
    version: Optional[Version] = Field(default=None, description="Target version for explicit bumps")

    @model_validator(mode="after")
    def validate_explicit_version(self) -> BumpRequest:
        """Explicit bumps carry a version, keyword bumps do not."""
        if self.kind is BumpKind.EXPLICIT and self.version is None:
            raise ValueError("Explicit bump requires a target version")
        if self.kind is not BumpKind.EXPLICIT and self.version is not None:
            raise ValueError(f"A {self.kind.value} bump does not take a target version")
        return self

    @classmethod
    def from_argument(cls, argument: str) -> BumpRequest:
        """Build a request from ``major``, ``minor``, ``patch`` or ``X.Y.Z``."""
        if argument in BUMP_KEYWORDS:
            return cls(kind=BumpKind(argument))
        return cls(kind=BumpKind.EXPLICIT, version=Version.parse(argument))


class ParsedDocument(BaseModel):
    """A manifest whose version literal has been lifted out into a placeholder."""

    template: str = Field(..., description="Document text with the version literal replaced")
    placeholder: str = Field(..., description="Random token standing in for the version")
    version: Optional[Version] = Field(default=None, description="Top-level version, if any")

    @property
    def has_version(self) -> bool:
        return self.version is not None

    @property
    def placeholder_literal(self) -> str:
        """The placeholder as it appears in the template, quotes included."""
        return f'"{self.placeholder}"'

    def require_version(self) -> Version:
        if self.version is None:
            raise VersionNotFoundError()
        return self.version

    def emit(self) -> str:
        """Render the template with the current version substituted in."""
        version = self.require_version()
        return self.template.replace(self.placeholder_literal, f'"{version}"', 1)


class BumpResult(BaseModel):
    """Outcome of bumping a manifest."""

    path: Path = Field(..., description="Manifest that was bumped")
    previous: Version = Field(..., description="Version before the bump")
    current: Version = Field(..., description="Version after the bump")
    written: bool = Field(default=True, description="Whether the manifest was rewritten")

    @property
    def summary(self) -> str:
        return f"v{self.previous} -> v{self.current}"
