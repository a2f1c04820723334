"""gitsigning - typed access to git signing configuration.

By default, the package's internal logging is disabled when used as a library.
Library users can enable logging by calling gitsigning.enable_logging().
"""

from gitsigning.common import disable_library_logging, enable_library_logging
from gitsigning.signing import SigningConfig, SigningFormat

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "SigningConfig",
    "SigningFormat",
    "enable_logging",
]
