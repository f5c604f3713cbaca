"""Unit tests for individual components in isolation.

Coverage:
    - models/: Message and payload validation
    - config: Base URL resolution policy
    - gateway: Reply extraction, failure classification, HTTP handling
    - conversation: State machine transitions

The backend is replaced by httpx.MockTransport or an in-memory fake gateway.
"""
