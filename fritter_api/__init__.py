"""
Top‑level package for the Fritter API.

This file makes ``fritter_api`` a package so that modules within
``app`` can be imported using fully qualified names like
``fritter_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
