"""API keys for the model providers, read from the environment."""

import os

from common.errors import ProviderError


def require_api_key(env_var: str) -> str:
    """Return the API key from the environment or raise ProviderError."""
    api_key = os.environ.get(env_var)
    if not api_key:
        raise ProviderError(f"Set variable {env_var} to your key")
    return api_key
