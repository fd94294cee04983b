"""
Errors raised while resolving, running and staging Smithy builds.
"""
from pathlib import Path
from typing import Optional, Sequence


class SmithyToolError(Exception):
    """Base class for all smithytool errors"""


class ConfigurationError(SmithyToolError):
    """Build configuration is unusable as given"""


class MissingProjectionError(SmithyToolError):
    """An explicitly requested projection produced no artifacts"""

    def __init__(self, projection: str, path: Path):
        self.projection = projection
        self.path = Path(path)
        super().__init__(
            f"Smithy projection `{projection}` not found or does not contain any models "
            f"(looked in {self.path}). Is this projection defined in your smithy-build.json file?"
        )


class ExternalToolFailure(SmithyToolError):
    """The Smithy CLI exited with a non-zero status"""

    def __init__(self, arguments: Sequence[str], exit_code: int, stderr: Optional[str] = None):
        self.arguments = list(arguments)
        self.exit_code = exit_code
        self.stderr = stderr or ""
        message = f"Smithy CLI failed with exit code {exit_code}. Arguments: {self.arguments}"
        tail = self.stderr.strip()
        if tail:
            message += f"\n{tail[-2000:]}"
        super().__init__(message)
