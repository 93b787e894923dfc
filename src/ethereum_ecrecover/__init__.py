"""
Ethereum ECRECOVER Precompile
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

Recovery of a signer's address from a secp256k1 ECDSA signature, with the
exact input layout and gas accounting of the ECRECOVER precompiled contract
found at address `0x01` of the Ethereum Virtual Machine.

The entry point is
:py:func:`ethereum_ecrecover.vm.precompiled_contracts.ecrecover.ecrecover`.
The elliptic curve arithmetic itself is delegated to one of several
interchangeable libraries, see :py:mod:`ethereum_ecrecover.crypto.backends`.
"""

__version__ = "0.1.0"
