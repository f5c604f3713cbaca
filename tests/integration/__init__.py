"""Integration tests for components working together as a system.

The real BackendGateway talks to a stub FastAPI backend through
httpx.ASGITransport. No network access required.
"""
