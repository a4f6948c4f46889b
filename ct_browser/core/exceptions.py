class CtBrowserError(Exception):
    """Base exception for all ct_browser errors"""
    pass

class ConfigError(CtBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class FetchFailure(CtBrowserError):
    """
    Loading the character listing failed.

    Raised for any page of the listing: transport errors, non-2xx responses
    and malformed payloads all end up here. Records accumulated before the
    failing page are discarded.
    """
    pass
