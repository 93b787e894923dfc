"""
Defines the events emitted while the precompile runs.

A _trace_ is a log of operations that took place during an event or period of
time. Here the log is built from a series of [`TraceEvent`]s emitted by
[`ecrecover`].

Note that this module _does not_ contain a trace implementation. Instead, it
defines only the events that can be collected into a trace by some other
package. See [`EvmTracer`].

[`EvmTracer`]: ref:ethereum_ecrecover.trace.EvmTracer
[`TraceEvent`]: ref:ethereum_ecrecover.trace.TraceEvent
[`ecrecover`]: ref:ethereum_ecrecover.vm.precompiled_contracts.ecrecover.ecrecover
"""

from dataclasses import dataclass
from typing import Protocol, Union


@dataclass
class PrecompileStart:
    """
    Trace event that is triggered before executing a precompile.
    """

    address: bytes
    """
    Precompile that is about to be executed.
    """


@dataclass
class PrecompileEnd:
    """
    Trace event that is triggered after executing a precompile.
    """


@dataclass
class GasAndRefund:
    """
    Trace event that is triggered when gas is deducted.
    """

    gas_cost: int
    """
    Amount of gas charged.
    """


TraceEvent = Union[
    PrecompileStart,
    PrecompileEnd,
    GasAndRefund,
]
"""
All possible types of events that an [`EvmTracer`] is expected to handle.

[`EvmTracer`]: ref:ethereum_ecrecover.trace.EvmTracer
"""


def discard_evm_trace(event: TraceEvent) -> None:
    """
    An [`EvmTracer`] that discards all events.

    [`EvmTracer`]: ref:ethereum_ecrecover.trace.EvmTracer
    """


class EvmTracer(Protocol):
    """
    [`Protocol`] that describes tracer functions.

    [`Protocol`]: https://docs.python.org/3/library/typing.html#typing.Protocol
    """

    def __call__(self, event: TraceEvent, /) -> None:
        """
        Call `self` as a function, recording a trace event.

        `event`, a [`TraceEvent`], is the reason why the tracer was triggered.

        [`TraceEvent`]: ref:ethereum_ecrecover.trace.TraceEvent
        """


evm_trace: EvmTracer = discard_evm_trace
"""
Active [`EvmTracer`] that is used for generating traces. Replace it, as a
module attribute, to collect events.

[`EvmTracer`]: ref:ethereum_ecrecover.trace.EvmTracer
"""
