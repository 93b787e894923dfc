"""
Cryptographic primitives used by the ECRECOVER precompile.
"""
