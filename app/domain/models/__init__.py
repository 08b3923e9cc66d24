"""Domain models for the realty keystore."""

from .api_key import ApiKeyRecord, env_var_name

__all__ = [
    "ApiKeyRecord",
    "env_var_name",
]
