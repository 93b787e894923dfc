"""
Precompiled Contract Addresses
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Addresses of precompiled contracts.
"""

from ...utils.hexadecimal import hex_to_address

__all__ = ("ECRECOVER_ADDRESS",)

ECRECOVER_ADDRESS = hex_to_address("0x01")
