"""Chat model client helpers."""

from .client import create_chat_model, invoke_model, message_text

__all__ = ["create_chat_model", "invoke_model", "message_text"]
