"""localchat - terminal chat client for locally hosted LLM endpoints."""

__version__ = "0.1.0"
