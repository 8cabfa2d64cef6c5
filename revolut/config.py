"""Runtime settings for the Revolut client.

Hosts are fixed per product and environment (see :mod:`revolut.environment`);
only transport and logging knobs are read from the process environment.
"""
import os
from typing import Final

from .errors import MissingEnvironmentVariable

HTTP_TIMEOUT: Final[float] = float(os.getenv("REVOLUT_HTTP_TIMEOUT", "30"))
LOG_FORMAT: Final[str] = os.getenv("REVOLUT_LOG_FORMAT", "text")
LOG_LEVEL: Final[str] = os.getenv("REVOLUT_LOG_LEVEL", "INFO")

MERCHANT_API_VERSION: Final[str] = "2024-09-01"
CLIENT_ASSERTION_TYPE: Final[str] = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"

# Conventional variable names for the with_environment_inherited_* helpers
CLIENT_ASSERTION_ENV: Final[str] = "REVOLUT_CLIENT_ASSERTION"
REFRESH_TOKEN_ENV: Final[str] = "REVOLUT_REFRESH_TOKEN"
AUTHORIZATION_CODE_ENV: Final[str] = "REVOLUT_AUTHORIZATION_CODE"
SECRET_KEY_ENV: Final[str] = "REVOLUT_SECRET_KEY"


def from_environment(variable: str) -> str:
    """Read *variable* once; credential builders never cache beyond this call."""
    value = os.environ.get(variable)
    if value is None:
        raise MissingEnvironmentVariable(variable)
    return value
