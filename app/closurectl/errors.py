"""Exception hierarchy for closurectl.

Only genuinely fatal conditions are modelled here. Missing files,
unknown packages and static binaries are never errors.
"""


class ClosurectlError(Exception):
    """Base exception for all closurectl errors."""


class ConfigError(ClosurectlError):
    """Raised when the configuration file content is invalid."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


class ClosureError(ClosurectlError):
    """Raised when the closure walker is misused."""


class ArchiveError(ClosurectlError):
    """Raised when writing or extracting the archive stream fails."""


class OracleError(ClosurectlError):
    """Raised when a package or linker oracle does not answer in time."""
