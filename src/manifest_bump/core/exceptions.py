"""Custom exceptions for manifest-bump."""


class ManifestBumpError(Exception):
    """Base exception for manifest-bump errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(ManifestBumpError):
    """Configuration validation or loading errors."""

    pass


class JsonParseError(ManifestBumpError):
    """Structural errors found while walking a JSON document."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class UnexpectedCharacterError(JsonParseError):
    """A character that cannot appear at the current position."""

    def __init__(self, char: str, position: int | None = None) -> None:
        super().__init__(f"unexpected char: {char}", position)
        self.char = char


class UnexpectedEndError(JsonParseError):
    """Input ended in the middle of a structure."""

    def __init__(self, context: str = "json", position: int | None = None) -> None:
        super().__init__(f"unexpected end of {context}", position)
        self.context = context


class VersionError(ManifestBumpError):
    """Problems with the manifest version field."""

    pass


class InvalidVersionError(VersionError):
    """A version literal that is not a major.minor.patch triple."""

    def __init__(self, literal: str) -> None:
        super().__init__(f"invalid version: {literal}")
        self.literal = literal


class DuplicateVersionError(VersionError):
    """More than one top-level version key."""

    def __init__(self) -> None:
        super().__init__("duplicate version")


class VersionNotFoundError(VersionError):
    """No top-level version key in the manifest."""

    def __init__(self, source: str = "manifest") -> None:
        super().__init__(f"No version found in {source}")


class ManifestError(ManifestBumpError):
    """Manifest read or write errors."""

    pass


class ManifestNotFoundError(ManifestError):
    """Manifest file does not exist."""

    pass


class CommandError(ManifestBumpError):
    """External command errors."""

    def __init__(self, message: str, exit_code: int | None = None, cause: Exception | None = None) -> None:
        super().__init__(message, cause)
        self.exit_code = exit_code


class GitError(CommandError):
    """Git operation errors."""

    pass
