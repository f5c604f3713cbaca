"""Test package for the PSTI chat client.

Structure:
    - unit/: Models, config, gateway and conversation in isolation
    - integration/: Conversation and gateway against a stub backend app

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
