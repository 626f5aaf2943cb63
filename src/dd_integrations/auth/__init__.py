"""
Authentication module for the Datadog API.
"""

from __future__ import annotations

from dd_integrations.auth.keys import AuthKeys, build_auth_keys

__all__ = [
    "AuthKeys",
    "build_auth_keys",
]
