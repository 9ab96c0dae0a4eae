"""
Sandbox gateway for integration tests.

A FastAPI application that plays the gateway's part of the Transparent
Redirect flow, plus a requests adapter that routes SDK traffic to it.
"""
from .adapter import SandboxAdapter
from .app import create_app

__all__ = ["SandboxAdapter", "create_app"]
