"""
Application package initializer.

The API is split into a handful of small layers: ``core`` holds
configuration, logging, the dataset loader, the response cache and
the HTTP plumbing; ``services`` holds the in-memory query engine;
``schemas`` defines request and response payloads; and ``api``
exposes the routes.  Versioning follows the ``api/<version>/``
hierarchy even though the public paths are mounted at the root.
"""

from .main import app  # noqa: F401
