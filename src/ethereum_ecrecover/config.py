"""
Backend selection.

The signature recovery backend is chosen once, at composition time, from the
`ECRECOVER_BACKEND` environment variable. It defaults to `coincurve`.

Classes:
- RecoveryConfig: Validated configuration, read from the environment.

Functions:
- get_recoverer: Instantiate a backend by name.
- default_recoverer: The backend named by the environment, created once.
"""

import logging
import os
from functools import cache
from typing import Literal

from pydantic import BaseModel, ValidationError

from .crypto.backends import BACKENDS, SignatureRecoverer
from .exceptions import UnknownBackendError

BACKEND_ENV_VAR = "ECRECOVER_BACKEND"

logger = logging.getLogger(__name__)


class RecoveryConfig(BaseModel):
    """
    Configuration of the signature recovery layer.

    Attributes:
    - backend (str): Name of the library used for public key recovery.

    """

    backend: Literal["coincurve", "eth_keys", "py_ecc"] = "coincurve"

    @classmethod
    def from_env(cls) -> "RecoveryConfig":
        """
        Build a configuration from the process environment.
        """
        backend = os.environ.get(BACKEND_ENV_VAR)
        if backend is None:
            return cls()

        try:
            return cls(backend=backend)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e


def get_recoverer(name: str) -> SignatureRecoverer:
    """
    Instantiate the signature recovery backend called `name`.

    Raises
    ------
    :py:class:`~ethereum_ecrecover.exceptions.UnknownBackendError`
        If no backend has that name.
    """
    try:
        backend = BACKENDS[name]
    except KeyError:
        raise UnknownBackendError(name) from None

    logger.info("using %s signature recovery backend", name)
    return backend()


@cache
def default_recoverer() -> SignatureRecoverer:
    """
    The backend named by the environment. Resolved on first use only.
    """
    return get_recoverer(RecoveryConfig.from_env().backend)
