"""
CLI utility modules for shared functionality.

Provides common utilities used across CLI commands:
- client: Authentication and API client access
- helpers: Payload loading, record printing, error reporting
"""

from dd_integrations.cli.utils.client import get_client
from dd_integrations.cli.utils.helpers import api_errors, load_model_file, mask_secrets, print_json

__all__ = [
    # Client
    "get_client",
    # Helpers
    "api_errors",
    "load_model_file",
    "mask_secrets",
    "print_json",
]
