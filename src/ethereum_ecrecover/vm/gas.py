"""
Ethereum Virtual Machine (EVM) Gas
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

EVM gas constants and calculators.
"""
from ethereum_types.numeric import Uint

from .. import trace
from ..trace import GasAndRefund
from .exceptions import OutOfGasError

GAS_ECRECOVER = Uint(3000)


def charge_gas(gas_left: Uint, amount: Uint) -> None:
    """
    Checks that `gas_left` covers `amount`.

    Parameters
    ----------
    gas_left :
        The amount of gas available to the current frame.
    amount :
        The amount of gas the current operation requires.

    Raises
    ------
    :py:class:`~ethereum_ecrecover.vm.exceptions.OutOfGasError`
        If `gas_left` is less than `amount`.
    """
    trace.evm_trace(GasAndRefund(int(amount)))

    if gas_left < amount:
        raise OutOfGasError
