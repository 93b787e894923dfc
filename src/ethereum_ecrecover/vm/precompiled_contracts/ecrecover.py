"""
Ethereum Virtual Machine (EVM) ECRECOVER PRECOMPILED CONTRACT
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Implementation of the ECRECOVER precompiled contract.

The call data is read as four 32 byte words: the message hash, `v`, `r` and
`s`. A malformed `v` or a signature that does not recover to a public key is
not an error, the contract simply returns no data.
"""
import logging
from typing import Optional

from ethereum_types.bytes import Bytes, Bytes64
from ethereum_types.numeric import U8, U256, Uint

from ... import trace
from ...config import default_recoverer
from ...crypto.backends import SignatureRecoverer
from ...crypto.hash import Hash32
from ...crypto.recovery import recover_address
from ...exceptions import RecoveryError
from ...trace import PrecompileEnd, PrecompileStart
from ...utils.byte import buffer_read, left_pad_zero_bytes
from .. import PrecompileOutput
from ..gas import GAS_ECRECOVER, charge_gas
from . import ECRECOVER_ADDRESS

ECRECOVER_INPUT_SIZE = Uint(128)

logger = logging.getLogger(__name__)


def ecrecover(
    data: Bytes,
    gas_limit: Uint,
    recoverer: Optional[SignatureRecoverer] = None,
) -> PrecompileOutput:
    """
    Decrypts the address using elliptic curve DSA recovery mechanism and writes
    the address to output.

    Parameters
    ----------
    data :
        Call data, of any length.
    gas_limit :
        Gas available to the call.
    recoverer :
        Signature recovery backend. Defaults to the configured one.

    Returns
    -------
    output : `ethereum_ecrecover.vm.PrecompileOutput`
        The gas consumed, and either the signer's address left padded to 32
        bytes or no data at all.

    Raises
    ------
    :py:class:`~ethereum_ecrecover.vm.exceptions.OutOfGasError`
        If `gas_limit` does not cover the cost of the call.
    ValueError
        If no `recoverer` is given and the configured backend is invalid.
        Raised before the call data is looked at.
    """
    if recoverer is None:
        recoverer = default_recoverer()

    trace.evm_trace(PrecompileStart(ECRECOVER_ADDRESS))

    # GAS
    charge_gas(gas_limit, GAS_ECRECOVER)

    # OPERATION
    output = _recover(data, recoverer)

    trace.evm_trace(PrecompileEnd())
    return PrecompileOutput(GAS_ECRECOVER, output)


def _recover(data: Bytes, recoverer: SignatureRecoverer) -> Bytes:
    """
    Decodes the call data and recovers the signer's address from it.

    Parameters
    ----------
    data :
        Call data, zero padded or truncated here to 128 bytes.
    recoverer :
        Signature recovery backend.

    Returns
    -------
    output : `ethereum_types.bytes.Bytes`
        The signer's address left padded to 32 bytes, or empty bytes if `v`
        is malformed or the signature does not recover to a public key.
    """
    data = buffer_read(data, Uint(0), ECRECOVER_INPUT_SIZE)

    message_hash = Hash32(data[0:32])
    v = U256.from_be_bytes(data[32:64])
    signature = Bytes64(data[64:128])

    if v != 27 and v != 28:
        return b""

    recovery_id = U8(int(v) - 27)

    try:
        address = recover_address(
            signature, recovery_id, message_hash, recoverer
        )
    except RecoveryError as e:
        # unable to extract public key
        logger.debug("signature recovery failed: %r", e)
        return b""

    return left_pad_zero_bytes(address, 32)
