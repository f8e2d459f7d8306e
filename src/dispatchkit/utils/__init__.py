"""General-purpose helpers: stacks, multimaps, arrays, futures and test assertions."""

from dispatchkit.utils.arrays import map_array, resize_binary_power
from dispatchkit.utils.concurrency import Exceptional, await_future, wait_forever
from dispatchkit.utils.multimap import MultiHashSetMap
from dispatchkit.utils.stack import ArrayStack
from dispatchkit.utils.testing import TestFixture, assertion_helper, trim_traceback

__all__ = [
    "ArrayStack",
    "MultiHashSetMap",
    "map_array",
    "resize_binary_power",
    "Exceptional",
    "await_future",
    "wait_forever",
    "TestFixture",
    "assertion_helper",
    "trim_traceback",
]
