"""
Utility Functions For Byte Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Byte specific utility functions used by the precompile.
"""
from typing import Union

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import FixedUnsigned, Uint


def left_pad_zero_bytes(
    value: Bytes, size: Union[int, FixedUnsigned, Uint]
) -> Bytes:
    """
    Left pad zeroes to `value` if its length is less than the given `size`.

    Parameters
    ----------
    value :
        The byte string that needs to be padded.
    size :
        The length, in bytes, of the padded result.

    Returns
    -------
    left_padded_value: `ethereum_types.bytes.Bytes`
        left padded byte string of given `size`.
    """
    return value.rjust(int(size), b"\x00")


def right_pad_zero_bytes(
    value: Bytes, size: Union[int, FixedUnsigned, Uint]
) -> Bytes:
    """
    Right pad zeroes to `value` if its length is less than the given `size`.

    Parameters
    ----------
    value :
        The byte string that needs to be padded.
    size :
        The length, in bytes, of the padded result.

    Returns
    -------
    right_padded_value: `ethereum_types.bytes.Bytes`
        right padded byte string of given `size`.
    """
    return value.ljust(int(size), b"\x00")


def buffer_read(buffer: Bytes, start_position: Uint, size: Uint) -> Bytes:
    """
    Read exactly `size` bytes from a buffer, padding with zeros past its end.

    Bytes beyond `start_position + size` are never looked at, so the result
    is the same whether `buffer` stops short or runs long.

    Parameters
    ----------
    buffer :
        Call data of the precompile.
    start_position :
        Offset of the first byte to read.
    size :
        Number of bytes to read.

    Returns
    -------
    data_bytes :
        Data read from the buffer.
    """
    start = int(start_position)
    return right_pad_zero_bytes(buffer[start : start + int(size)], size)
