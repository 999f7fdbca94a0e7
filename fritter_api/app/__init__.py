"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Each resource (users, posts, displays, incognito sessions,
profiles and reactions) has a service, a set of validators, a presenter
and a router defined in ``api/v1/endpoints``.  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
