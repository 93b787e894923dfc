"""
Signature Recovery Backends
^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Interchangeable libraries able to recover a secp256k1 public key from a
signature. Every backend receives a signature already checked by
:py:func:`~ethereum_ecrecover.crypto.elliptic_curve.parse_signature` and
returns the 65 byte uncompressed SEC1 encoding of the recovered key.

Backends differ internally (for instance in whether they insist on a low `s`)
but must agree on every output, so swapping one for another never changes
what the precompile returns.
"""
from typing import Dict, Protocol, Type

import coincurve
from eth_keys import KeyAPI
from eth_keys.backends import NativeECCBackend
from eth_keys.exceptions import BadSignature, ValidationError
from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U8, U256
from py_ecc.secp256k1.secp256k1 import ecdsa_raw_recover

from ..exceptions import RecoveryFailedError
from .elliptic_curve import normalize_s
from .hash import Hash32

UNCOMPRESSED_PREFIX = b"\x04"
POINT_AT_INFINITY = bytes(64)


class SignatureRecoverer(Protocol):
    """
    [`Protocol`] implemented by every signature recovery backend.

    [`Protocol`]: https://docs.python.org/3/library/typing.html#typing.Protocol
    """

    name: str

    def recover(
        self, r: U256, s: U256, recovery_id: U8, msg_hash: Hash32
    ) -> Bytes:
        """
        Recover the public key that produced `(r, s)` over `msg_hash`.

        Parameters
        ----------
        r :
            The `r` component, in `[1, N)`.
        s :
            The `s` component, in `[1, N)`.
        recovery_id :
            Either `0` or `1`.
        msg_hash :
            The signed digest.

        Returns
        -------
        public_key : `ethereum_types.bytes.Bytes`
            Uncompressed public key, `0x04 || x || y`.

        Raises
        ------
        :py:class:`~ethereum_ecrecover.exceptions.RecoveryFailedError`
            If no public key corresponds to the inputs.
        """
        ...


class CoincurveRecoverer:
    """
    Recovery through the libsecp256k1 bindings of [`coincurve`].

    [`coincurve`]: https://github.com/ofek/coincurve
    """

    name = "coincurve"

    def recover(
        self, r: U256, s: U256, recovery_id: U8, msg_hash: Hash32
    ) -> Bytes:
        """
        See :py:meth:`SignatureRecoverer.recover`.
        """
        signature = (
            r.to_be_bytes32() + s.to_be_bytes32() + recovery_id.to_bytes1()
        )

        # The point at infinity is rejected by libsecp256k1 itself.
        try:
            public_key = coincurve.PublicKey.from_signature_and_message(
                bytes(signature), msg_hash, hasher=None
            )
        except ValueError as e:
            raise RecoveryFailedError from e

        return public_key.format(compressed=False)


class EthKeysRecoverer:
    """
    Recovery through the pure Python backend of [`eth-keys`].

    [`eth-keys`]: https://github.com/ethereum/eth-keys
    """

    name = "eth_keys"

    def __init__(self) -> None:
        self.keys = KeyAPI(NativeECCBackend)

    def recover(
        self, r: U256, s: U256, recovery_id: U8, msg_hash: Hash32
    ) -> Bytes:
        """
        See :py:meth:`SignatureRecoverer.recover`.
        """
        try:
            signature = self.keys.Signature(
                vrs=(int(recovery_id), int(r), int(s))
            )
            public_key = self.keys.ecdsa_recover(bytes(msg_hash), signature)
        except (BadSignature, ValidationError) as e:
            raise RecoveryFailedError from e

        public_key_bytes = public_key.to_bytes()
        if public_key_bytes == POINT_AT_INFINITY:
            raise RecoveryFailedError("recovered the point at infinity")

        return UNCOMPRESSED_PREFIX + public_key_bytes


class PyEccRecoverer:
    """
    Recovery through the secp256k1 module of [`py_ecc`].

    Only signatures with a low `s` are handed to the library; high `s` values
    are normalized first, see
    :py:func:`~ethereum_ecrecover.crypto.elliptic_curve.normalize_s`.

    [`py_ecc`]: https://github.com/ethereum/py_ecc
    """

    name = "py_ecc"

    def recover(
        self, r: U256, s: U256, recovery_id: U8, msg_hash: Hash32
    ) -> Bytes:
        """
        See :py:meth:`SignatureRecoverer.recover`.
        """
        r, s, recovery_id = normalize_s(r, s, recovery_id)

        try:
            x, y = ecdsa_raw_recover(
                bytes(msg_hash), (int(recovery_id) + 27, int(r), int(s))
            )
        except ValueError as e:
            raise RecoveryFailedError from e

        if x == 0 and y == 0:
            raise RecoveryFailedError("recovered the point at infinity")

        return (
            UNCOMPRESSED_PREFIX
            + U256(x).to_be_bytes32()
            + U256(y).to_be_bytes32()
        )


BACKENDS: Dict[str, Type[SignatureRecoverer]] = {
    CoincurveRecoverer.name: CoincurveRecoverer,
    EthKeysRecoverer.name: EthKeysRecoverer,
    PyEccRecoverer.name: PyEccRecoverer,
}
"""
Every available backend, keyed by the name used in configuration.
"""
