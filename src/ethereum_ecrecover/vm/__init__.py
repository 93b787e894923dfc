"""
Ethereum Virtual Machine (EVM)
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

The small part of the virtual machine's interface a precompiled contract
needs: what it hands back to its caller.
"""

from dataclasses import dataclass

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import Uint

__all__ = ("PrecompileOutput",)


@dataclass(frozen=True)
class PrecompileOutput:
    """
    Result of a precompiled contract that ran to completion.
    """

    gas_used: Uint
    output: Bytes
