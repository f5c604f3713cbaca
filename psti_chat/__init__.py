"""PSTI Chatbot - web chat client for the PSTI lab conversational backend.

Relays user text to the remote chatbot service and renders the exchange
as a scrolling message thread.

Components:
    - config: Gateway and server settings resolved once at startup
    - models: Message, result and health schemas
    - gateway: HTTP exchange, reply normalization and error classification
    - conversation: Message log and single-flight state machine
    - ui: NiceGUI chat page
"""

__version__ = "0.1.0"
