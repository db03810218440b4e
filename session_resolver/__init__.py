"""Session parameter resolution engine.

Reconciles persistent profile preferences, per-session panel selections, and the
persisted muscle-targeting selection into one validated workout request payload.
"""

__version__ = "0.1.0"
