"""
Error types common to the whole package.
"""


class EthereumException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class RecoveryError(EthereumException):
    """
    Thrown when a public key cannot be recovered from a signature.

    Never escapes the precompile: the caller observes an empty output.
    """


class InvalidSignatureError(RecoveryError):
    """
    Thrown when `r` or `s` is zero, or not smaller than the order of the
    secp256k1 group.
    """


class RecoveryFailedError(RecoveryError):
    """
    Thrown when no curve point corresponds to the signature, digest and
    recovery identifier.
    """


class UnknownBackendError(EthereumException):
    """
    Thrown when the configuration names a signature recovery backend that does
    not exist.
    """
