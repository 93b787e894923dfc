from typing import Tuple

import coincurve
from ethereum_types.bytes import Bytes, Bytes20, Bytes32
from ethereum_types.numeric import U256

from ethereum_ecrecover.crypto.elliptic_curve import SECP256K1N
from ethereum_ecrecover.crypto.hash import keccak256

# Private keys used to produce signatures. Never use these on a live network.
TEST_SECRET_KEYS = (
    0x45A915E4D060149EB4365960E6A7A45F334393093061116B197E3240065FF2D8,
    0x4646464646464646464646464646464646464646464646464646464646464646,
    0x0000000000000000000000000000000000000000000000000000000000000001,
    int(SECP256K1N) - 1,
)

TEST_DIGESTS = (
    keccak256(b""),
    keccak256(b"hello world"),
    Bytes32(b"\x00" * 32),
    Bytes32(b"\xff" * 32),
)


def secp256k1_sign(msg_hash: Bytes32, secret_key: int) -> Tuple[U256, ...]:
    """
    Returns `(r, s, recovery_id)` for a message hash given the secret key.
    """
    private_key = coincurve.PrivateKey.from_int(secret_key)
    signature = private_key.sign_recoverable(msg_hash, hasher=None)

    return (
        U256.from_be_bytes(signature[0:32]),
        U256.from_be_bytes(signature[32:64]),
        U256(signature[64]),
    )


def secret_key_to_address(secret_key: int) -> Bytes20:
    """
    Derives the address of a secret key without going through recovery.
    """
    public_key = coincurve.PrivateKey.from_int(secret_key).public_key
    return Bytes20(keccak256(public_key.format(compressed=False)[1:])[12:])


def ecrecover_input(msg_hash: Bytes, v: U256, r: U256, s: U256) -> Bytes:
    """
    Lays out call data for the ECRECOVER precompile.
    """
    return (
        msg_hash + v.to_be_bytes32() + r.to_be_bytes32() + s.to_be_bytes32()
    )
