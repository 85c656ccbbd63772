"""Decoding errors and helpers for inspecting the layers found in a packet."""

from __future__ import annotations

from typing import Hashable


class DecodeError(ValueError):
    """Raised when bytes received from the wire cannot be decoded."""


class TruncatedError(DecodeError):
    """Raised when a packet is shorter than its format requires."""


class DecodedTypes(list):
    """Layer types in the order they were decoded, outermost first."""

    def contains(self, needle: Hashable) -> int:
        """Return the index of the innermost occurrence of ``needle``.

        Raises DecodeError if the layer type was not decoded.
        """
        for index in range(len(self) - 1, -1, -1):
            if self[index] == needle:
                return index
        raise DecodeError(f"{needle} layer not received")

    def innermost_equals(self, want: Hashable) -> Hashable:
        """Check the last decoded layer is ``want`` and return it.

        Raises DecodeError if no layers were decoded or the innermost differs.
        """
        if not self:
            raise DecodeError("no layers received")
        got = self[-1]
        if got != want:
            raise DecodeError(f"inner-most layer is {got}, wanted {want}")
        return got