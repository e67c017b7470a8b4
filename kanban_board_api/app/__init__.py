"""
Application package initializer.

The service is split into small layers: ``core`` holds configuration,
logging, the error taxonomy and the document store; ``schemas`` holds
the pydantic entity and payload models; ``services`` holds the board
and task logic; ``api`` exposes the services over HTTP.
"""

from .main import app  # noqa: F401
