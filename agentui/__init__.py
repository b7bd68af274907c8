"""Terminal user interface components for a chat-driven coding agent."""

__version__ = "0.1.0"