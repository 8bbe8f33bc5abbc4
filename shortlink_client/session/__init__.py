"""
Session access for the shortlink client.

SessionManager owns the persisted credentials; Navigator receives the
redirect issued when the server rejects them.
"""

from .manager import SessionManager, SessionListener
from .navigator import Navigator

__all__ = [
    "SessionManager",
    "SessionListener",
    "Navigator",
]
