"""
tabjson exceptions

Base exception hierarchy for all tabjson modules
"""


class TabJsonError(Exception):
    """
    Base exception for all tabjson errors

    All module-specific exceptions should inherit from this class
    to keep a single hierarchy callers can catch.
    """
    pass


class ConfigurationError(TabJsonError):
    """Configuration or environment error"""
    pass


class ResourceError(TabJsonError):
    """Resource access or management error (e.g. history store)"""
    pass
