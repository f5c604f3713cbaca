"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - Message bubbles with avatar and timestamp
    - Typing indicator and disabled input while a reply is pending
    - Quick-reply topic buttons
    - Backend online/offline badge

Contains no exchange logic. Delegates everything to ConversationState.
"""

from psti_chat.ui.chat_page import register_chat_page

__all__ = ["register_chat_page"]
