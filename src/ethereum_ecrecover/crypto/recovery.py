"""
Address Recovery
^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Turns a signature, a recovery identifier and a digest into the address of the
account that signed it.
"""
from typing import Optional

from ethereum_types.bytes import Bytes20, Bytes64
from ethereum_types.numeric import U8

from ..config import default_recoverer
from ..exceptions import RecoveryFailedError
from .backends import SignatureRecoverer
from .elliptic_curve import parse_signature
from .hash import Hash32, keccak256


def secp256k1_recover(
    signature: Bytes64,
    recovery_id: U8,
    msg_hash: Hash32,
    recoverer: Optional[SignatureRecoverer] = None,
) -> Bytes64:
    """
    Recovers the public key from a given signature.

    Parameters
    ----------
    signature :
        `r || s`, each a 32 byte big endian integer.
    recovery_id :
        Parity of the y coordinate of the signer's nonce point, `0` or `1`.
    msg_hash :
        Hash of the message being recovered.
    recoverer :
        Backend to use. Defaults to the configured one.

    Returns
    -------
    public_key : `ethereum_types.bytes.Bytes64`
        Recovered public key, `x || y`, without the SEC1 prefix byte.

    Raises
    ------
    :py:class:`~ethereum_ecrecover.exceptions.InvalidSignatureError`
        If the signature is not canonically encoded.
    :py:class:`~ethereum_ecrecover.exceptions.RecoveryFailedError`
        If no public key corresponds to the inputs.
    """
    r, s = parse_signature(signature)

    if recovery_id > U8(1):
        raise RecoveryFailedError(f"invalid recovery id {int(recovery_id)}")

    if recoverer is None:
        recoverer = default_recoverer()

    public_key = recoverer.recover(r, s, recovery_id, msg_hash)
    return Bytes64(public_key[1:])


def public_key_to_address(public_key: Bytes64) -> Bytes20:
    """
    Derives an address from an uncompressed public key.

    Parameters
    ----------
    public_key :
        `x || y` of the public key.

    Returns
    -------
    address : `ethereum_types.bytes.Bytes20`
        Last 20 bytes of the keccak256 hash of the public key.
    """
    return Bytes20(keccak256(public_key)[12:32])


def recover_address(
    signature: Bytes64,
    recovery_id: U8,
    msg_hash: Hash32,
    recoverer: Optional[SignatureRecoverer] = None,
) -> Bytes20:
    """
    Recovers the address of the account that signed `msg_hash`.

    Takes the same parameters and raises the same exceptions as
    :py:func:`secp256k1_recover`.
    """
    public_key = secp256k1_recover(signature, recovery_id, msg_hash, recoverer)
    return public_key_to_address(public_key)
