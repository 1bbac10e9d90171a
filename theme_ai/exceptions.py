"""Custom exceptions for theme-ai."""


class ThemeAIError(Exception):
    """Base exception for all theme-ai errors."""


class ManifestError(ThemeAIError):
    """Raised when package.json is missing, unreadable, or not a JSON object.

    *reason* is the user-facing message and already names the file.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)


class AuditError(ThemeAIError):
    """Raised when ``npm outdated`` output cannot be turned into a result."""


class RegistryError(ThemeAIError):
    """Raised when package metadata cannot be fetched from the npm registry."""

    def __init__(self, package: str, detail: str):
        self.package = package
        self.detail = detail
        super().__init__(f"registry lookup failed for {package}: {detail}")
