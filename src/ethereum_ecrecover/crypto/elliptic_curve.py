"""
Elliptic Curves
^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Parameters of the secp256k1 curve and the rules for decoding the compact
`r || s` signature carried in ECRECOVER call data.
"""
from typing import Tuple

from ethereum_types.bytes import Bytes64
from ethereum_types.numeric import U8, U256

from ..exceptions import InvalidSignatureError

SECP256K1N = U256(
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
)
SECP256K1N_HALF = SECP256K1N // U256(2)


def parse_signature(signature: Bytes64) -> Tuple[U256, U256]:
    """
    Splits a compact signature into its `r` and `s` components.

    Parameters
    ----------
    signature :
        `r` followed by `s`, each a 32 byte big endian integer.

    Returns
    -------
    r : `ethereum_types.numeric.U256`
        The x coordinate, modulo the group order, of the signer's nonce point.
    s : `ethereum_types.numeric.U256`
        The signature proof.

    Raises
    ------
    :py:class:`~ethereum_ecrecover.exceptions.InvalidSignatureError`
        If either component is zero or not below the group order.
    """
    r = U256.from_be_bytes(signature[0:32])
    s = U256.from_be_bytes(signature[32:64])

    if r == 0 or r >= SECP256K1N:
        raise InvalidSignatureError("r is out of range")
    if s == 0 or s >= SECP256K1N:
        raise InvalidSignatureError("s is out of range")

    return r, s


def normalize_s(r: U256, s: U256, recovery_id: U8) -> Tuple[U256, U256, U8]:
    """
    Moves `s` into the lower half of the group order.

    `(r, s)` and `(r, N - s)` are both valid signatures of the same digest by
    the same key, with nonce points of opposite parity. Replacing `s` therefore
    also flips the parity bit of the recovery identifier, and the recovered
    public key is unchanged.

    Parameters
    ----------
    r :
        The `r` component, returned untouched.
    s :
        The `s` component.
    recovery_id :
        Parity of the nonce point's y coordinate.

    Returns
    -------
    normalized : `Tuple[U256, U256, U8]`
        `(r, s, recovery_id)` with `s <= N // 2`.
    """
    if s > SECP256K1N_HALF:
        return r, SECP256K1N - s, recovery_id ^ U8(1)
    return r, s, recovery_id
