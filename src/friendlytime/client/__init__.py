"""Python client for the FriendlyTime chat channel."""

from .chat import ChatClient, ChatClientError, ChatMessage, ChatNotConnectedError

__all__ = ["ChatClient", "ChatClientError", "ChatMessage", "ChatNotConnectedError"]
