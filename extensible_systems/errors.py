"""
Exceptions raised while configuring and wiring the demo systems.

Strategy operations themselves never raise: a failed payment is reported
through the boolean returned by ``pay``.
"""


class ExtensibleSystemsError(Exception):
    """Base exception for the package."""
    pass


class ConfigError(ExtensibleSystemsError):
    """Raised when a demo config file is missing or fails validation."""
    pass


class UnknownStrategyError(ExtensibleSystemsError):
    """Raised when a factory is asked for a strategy kind it does not know."""
    pass
