"""Chat transport boundary."""

from .i_chat_adapter import IChatAdapter, JoinHandler, MessageHandler

__all__ = ["IChatAdapter", "JoinHandler", "MessageHandler"]
