"""
Top-level package for the character table browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    ct_browser.core
    ct_browser.services
    ct_browser.ui
"""

__all__: list[str] = []
