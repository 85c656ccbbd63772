"""IPMI v1.5 and v2.0/RMCP+ session headers and the selector between them."""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Callable, Optional

from bmcwire.codes import PayloadType
from bmcwire.layers import DecodeError, TruncatedError
from bmcwire.payload import LAYER_TYPE_MESSAGE, PayloadDescriptor

LAYER_TYPE_SESSION_SELECTOR = "SessionSelector"
LAYER_TYPE_V1_SESSION = "V1Session"
LAYER_TYPE_V2_SESSION = "V2Session"

_AUTH_TYPE_NONE = 0x0
_AUTH_TYPE_RMCP_PLUS = 0x6

_V1_HEADER_LENGTH = 10
_V1_AUTH_CODE_LENGTH = 16
_V2_HEADER_LENGTH = 12
_V2_OEM_FIELDS_LENGTH = 6
_V2_NEXT_HEADER = 0x07

Hasher = Callable[[bytes], bytes]


def _u16(value: int) -> bytes:
    return (value & 0xFFFF).to_bytes(2, "little")


def _u32(value: int) -> bytes:
    return (value & 0xFFFFFFFF).to_bytes(4, "little")


def _read_u16(data: bytes, start: int) -> int:
    return int.from_bytes(data[start:start + 2], "little")


def _read_u32(data: bytes, start: int) -> int:
    return int.from_bytes(data[start:start + 4], "little")


def _execute_hash(algorithm: Optional[Hasher], data: bytes) -> bytes:
    if algorithm is None:
        return b""
    return bytes(algorithm(bytes(data)))


@dataclass
class SequenceNumbers:
    """A pair of session sequence numbers, relative to the BMC.

    ``inbound`` is the number of the last packet the remote console sent to the
    managed system; ``outbound`` the last the managed system sent back. The
    first packet in each direction is numbered 1.
    """

    inbound: int = 0
    outbound: int = 0


@dataclass
class SessionSelector:
    """A zero-length layer choosing between v1.5 and v2.0 session wrappers."""

    is_rmcp_plus: bool = False
    payload: bytes = b""

    def decode_from_bytes(self, data: bytes) -> None:
        """Inspect the auth type byte to decide which wrapper follows."""
        data = bytes(data)
        if not data:
            raise TruncatedError("session wrapper cannot be empty")
        self.payload = data
        self.is_rmcp_plus = data[0] == _AUTH_TYPE_RMCP_PLUS

    def next_layer_type(self) -> str:
        """The session wrapper layer type that follows."""
        return LAYER_TYPE_V2_SESSION if self.is_rmcp_plus else LAYER_TYPE_V1_SESSION


@dataclass
class V1Session:
    """The IPMI v1.5 session header.

    The default instance suits commands sent outside of a session. The auth
    code is absent from the wire when ``auth_type`` is none (0).
    """

    auth_type: int = _AUTH_TYPE_NONE
    sequence: int = 0
    session_id: int = 0
    auth_code: bytes = bytes(_V1_AUTH_CODE_LENGTH)
    length: int = 0
    authentication_algorithm: Optional[Hasher] = None
    contents: bytes = b""
    payload: bytes = b""

    def next_layer_type(self) -> str:
        """A v1.5 session always wraps an IPMI message."""
        return LAYER_TYPE_MESSAGE

    def decode_from_bytes(self, data: bytes) -> None:
        """Populate the header from wire bytes."""
        data = bytes(data)
        if len(data) < _V1_HEADER_LENGTH:
            raise TruncatedError(
                f"v1.5 session is at least {_V1_HEADER_LENGTH} bytes, got {len(data)} bytes"
            )
        self.auth_type = data[0]
        self.sequence = _read_u32(data, 1)
        self.session_id = _read_u32(data, 5)
        if self.auth_type == _AUTH_TYPE_NONE:
            self.contents = data[:_V1_HEADER_LENGTH]
            self.payload = data[_V1_HEADER_LENGTH:]
            self.length = data[9]
            return
        full = _V1_HEADER_LENGTH + _V1_AUTH_CODE_LENGTH
        if len(data) < full:
            raise TruncatedError(
                f"v1.5 session is {full} bytes with an auth code, got {len(data)} bytes"
            )
        self.contents = data[:full]
        self.payload = data[full:]
        self.auth_code = data[9:25]
        self.length = data[25]

    def serialize(self, payload: bytes = b"", fix_lengths: bool = False) -> bytes:
        """Return the header followed by ``payload``.

        With ``fix_lengths``, the length field is set from the payload.
        """
        payload = bytes(payload)
        if fix_lengths:
            self.length = len(payload) & 0xFF
        header = bytes([self.auth_type & 0xFF]) + _u32(self.sequence) + _u32(self.session_id)
        if self.auth_type != _AUTH_TYPE_NONE:
            auth_code = bytes(self.auth_code)
            if len(auth_code) != _V1_AUTH_CODE_LENGTH:
                raise ValueError(
                    f"auth code must be {_V1_AUTH_CODE_LENGTH} bytes, got {len(auth_code)}"
                )
            header += auth_code
        return header + bytes([self.length & 0xFF]) + payload


@dataclass
class V2Session:
    """The IPMI v2.0/RMCP+ session header.

    ``integrity_algorithm`` is a function returning the integrity check value of
    the bytes given to it, already keyed. Without it, only packets with an empty
    signature are accepted. ``confidentiality_layer_type`` names the layer that
    decodes encrypted IPMI messages.
    """

    payload_type: PayloadType = PayloadType.IPMI
    enterprise: int = 0
    payload_id: int = 0
    encrypted: bool = False
    authenticated: bool = False
    session_id: int = 0
    sequence: int = 0
    length: int = 0
    pad: int = 0
    signature: bytes = b""
    integrity_algorithm: Optional[Hasher] = None
    confidentiality_layer_type: Optional[str] = None
    contents: bytes = b""
    payload: bytes = b""

    @property
    def descriptor(self) -> PayloadDescriptor:
        """The payload descriptor formed by the payload type and OEM fields."""
        return PayloadDescriptor(self.payload_type, self.enterprise, self.payload_id)

    def next_layer_type(self) -> Optional[str]:
        """The layer that decodes the payload, accounting for encryption."""
        layer_type = self.descriptor.next_layer_type()
        if layer_type == LAYER_TYPE_MESSAGE and self.encrypted:
            return self.confidentiality_layer_type
        return layer_type

    def _header_length(self) -> int:
        if self.payload_type == PayloadType.OEM:
            return _V2_HEADER_LENGTH + _V2_OEM_FIELDS_LENGTH
        return _V2_HEADER_LENGTH

    def decode_from_bytes(self, data: bytes) -> None:
        """Populate the header from wire bytes, verifying any signature."""
        data = bytes(data)
        if len(data) < _V2_HEADER_LENGTH:
            raise TruncatedError(
                "session packet too small for header fields: "
                f"want {_V2_HEADER_LENGTH} bytes, got {len(data)}"
            )
        if data[0] != _AUTH_TYPE_RMCP_PLUS:
            raise DecodeError(
                "the first byte of an RMCP+ session header is always 0x6 "
                "(auth type RMCP+), otherwise it is a v1.5 session wrapper"
            )
        self.encrypted = bool(data[1] & 0x80)
        self.authenticated = bool(data[1] & 0x40)
        self.payload_type = PayloadType(data[1] & 0x3F)

        offset = 2
        if self.payload_type == PayloadType.OEM:
            want = _V2_HEADER_LENGTH + _V2_OEM_FIELDS_LENGTH
            if len(data) < want:
                raise TruncatedError(
                    f"session packet too small for OEM fields; want {want} bytes, "
                    f"got {len(data)}"
                )
            self.enterprise = _read_u32(data, 2)
            self.payload_id = _read_u16(data, 6)
            offset += _V2_OEM_FIELDS_LENGTH
        else:
            self.enterprise = 0
            self.payload_id = 0

        self.session_id = _read_u32(data, offset)
        self.sequence = _read_u32(data, offset + 4)
        self.length = _read_u16(data, offset + 8)
        offset += 10

        self.contents = data[:offset]
        end = offset + self.length
        if len(data) < end:
            raise TruncatedError(
                "session packet shorter than payload length field suggests: "
                f"want {end} bytes, got {len(data)}"
            )
        self.payload = data[offset:end]
        offset = end

        if not self.authenticated:
            self.pad = 0
            self.signature = b""
            return

        pad_end = offset
        while pad_end < len(data) and data[pad_end] == 0xFF:
            pad_end += 1
        self.pad = (pad_end - offset) & 0xFF
        # skip the pad length and next header fields
        offset = pad_end + 2

        if len(data) < offset:
            self.signature = b""
            raise TruncatedError(
                f"session packet too short for auth code; want {offset} bytes, got {len(data)}"
            )

        self.signature = data[offset:]
        expected = _execute_hash(self.integrity_algorithm, data[:offset])
        if not hmac.compare_digest(self.signature, expected):
            raise DecodeError(
                f"invalid signature: want {expected.hex()}, got {self.signature.hex()}"
            )

    def serialize(
        self,
        payload: bytes = b"",
        fix_lengths: bool = False,
        compute_checksums: bool = False,
    ) -> bytes:
        """Return the header, ``payload`` and, if authenticated, the trailer.

        ``fix_lengths`` sets the length and pad fields; ``compute_checksums``
        recalculates the signature with the integrity algorithm.
        """
        payload = bytes(payload)
        header_length = self._header_length()

        if fix_lengths:
            if len(payload) > 0xFFFF:
                raise ValueError(f"payload too long for a session: {len(payload)} bytes")
            self.length = len(payload)
            if self.authenticated:
                auth_code_range_length = header_length + self.length + 2
                self.pad = (4 - auth_code_range_length % 4) % 4

        flags = int(self.payload_type) & 0x3F
        if self.encrypted:
            flags |= 0x80
        if self.authenticated:
            flags |= 0x40

        parts = [bytes([_AUTH_TYPE_RMCP_PLUS, flags])]
        if self.payload_type == PayloadType.OEM:
            parts += [_u32(self.enterprise), _u16(self.payload_id)]
        parts += [_u32(self.session_id), _u32(self.sequence), _u16(self.length), payload]
        packet = b"".join(parts)

        if self.authenticated:
            packet += b"\xff" * self.pad + bytes([self.pad & 0xFF, _V2_NEXT_HEADER])
            if compute_checksums:
                self.signature = _execute_hash(self.integrity_algorithm, packet)
            packet += bytes(self.signature)
        return packet