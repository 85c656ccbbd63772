"""RAKP messages exchanged while establishing an RMCP+ session."""

from __future__ import annotations

from dataclasses import dataclass, field

from bmcwire.codes import PrivilegeLevel, StatusCode
from bmcwire.layers import DecodeError, TruncatedError
from bmcwire.payload import (
    PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_1,
    PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_3,
    Payload,
    PayloadDescriptor,
)

_MAX_USERNAME_LENGTH = 16
_RAKP1_FIXED_LENGTH = 28
_STATUS_HEADER_LENGTH = 8
_RAKP2_FIXED_LENGTH = 40


def _u32(value: int) -> bytes:
    return (value & 0xFFFFFFFF).to_bytes(4, "little")


def _read_u32(data: bytes, start: int) -> int:
    return int.from_bytes(data[start:start + 4], "little")


@dataclass
class RAKPMessage1:
    """RAKP Message 1, which begins session authentication."""

    tag: int = 0
    managed_system_session_id: int = 0
    remote_console_random: bytes = bytes(16)
    privilege_level_lookup: bool = False
    max_privilege_level: PrivilegeLevel = PrivilegeLevel.HIGHEST
    username: str = ""
    contents: bytes = b""

    def serialize(self) -> bytes:
        """Encode the message for the wire."""
        username = self.username.encode("utf-8")
        if len(username) > _MAX_USERNAME_LENGTH:
            raise ValueError(
                f"Username cannot be more than {_MAX_USERNAME_LENGTH} characters "
                f"long, got {len(username)}"
            )
        random = bytes(self.remote_console_random)
        if len(random) != 16:
            raise ValueError(f"remote console random must be 16 bytes, got {len(random)}")
        privilege = int(self.max_privilege_level) & 0xF
        if not self.privilege_level_lookup:
            privilege |= 1 << 4
        return b"".join(
            (
                bytes([self.tag & 0xFF, 0, 0, 0]),
                _u32(self.managed_system_session_id),
                random,
                bytes([privilege, 0, 0, len(username)]),
                username,
            )
        )

    def decode_from_bytes(self, data: bytes) -> None:
        """Populate the message from wire bytes."""
        data = bytes(data)
        if len(data) < _RAKP1_FIXED_LENGTH:
            raise TruncatedError(
                f"RAKP Message 1 must be at least {_RAKP1_FIXED_LENGTH} bytes, got {len(data)}"
            )
        self.contents = data
        self.tag = data[0]
        self.managed_system_session_id = _read_u32(data, 4)
        self.remote_console_random = data[8:24]
        self.max_privilege_level = PrivilegeLevel(data[24] & 0xF)
        self.privilege_level_lookup = (data[24] & (1 << 4)) == 0
        username_length = data[27]
        if username_length > _MAX_USERNAME_LENGTH:
            raise DecodeError(
                f"username should not be more than {_MAX_USERNAME_LENGTH} characters "
                f"long, got {username_length}"
            )
        end = _RAKP1_FIXED_LENGTH + username_length
        if len(data) < end:
            raise TruncatedError(
                "RAKP Message 1 not long enough to contain username. "
                f"Expected {end}, got {len(data)}"
            )
        self.username = data[_RAKP1_FIXED_LENGTH:end].decode("utf-8", errors="replace")


@dataclass
class RAKPMessage2:
    """RAKP Message 2, the managed system's reply to RAKP Message 1."""

    tag: int = 0
    status: StatusCode = StatusCode.OK
    remote_console_session_id: int = 0
    managed_system_random: bytes = bytes(16)
    managed_system_guid: bytes = bytes(16)
    auth_code: bytes = b""
    contents: bytes = b""

    def decode_from_bytes(self, data: bytes) -> None:
        """Populate the message from wire bytes."""
        data = bytes(data)
        if len(data) < _STATUS_HEADER_LENGTH:
            raise TruncatedError(
                f"RAKP Message 2 must be at least {_STATUS_HEADER_LENGTH} bytes, got {len(data)}"
            )
        status = StatusCode(data[1])
        if status == StatusCode.OK and len(data) < _RAKP2_FIXED_LENGTH:
            raise TruncatedError(
                f"Success RAKP Message 2 must be at least {_RAKP2_FIXED_LENGTH} bytes, "
                f"got {len(data)}"
            )
        self.contents = data
        self.tag = data[0]
        self.status = status
        self.remote_console_session_id = _read_u32(data, 4)
        if status == StatusCode.OK:
            self.managed_system_random = data[8:24]
            self.managed_system_guid = data[24:40]
            self.auth_code = data[_RAKP2_FIXED_LENGTH:]
        else:
            self.managed_system_random = bytes(16)
            self.managed_system_guid = bytes(16)
            self.auth_code = b""


@dataclass
class RAKPMessage3:
    """RAKP Message 3, the remote console's reply to RAKP Message 2."""

    tag: int = 0
    status: StatusCode = StatusCode.OK
    managed_system_session_id: int = 0
    auth_code: bytes = b""

    def serialize(self) -> bytes:
        """Encode the message for the wire.

        The auth code is only sent with an OK status; otherwise it is cleared.
        """
        header = bytes([self.tag & 0xFF, int(self.status) & 0xFF, 0, 0]) + _u32(
            self.managed_system_session_id
        )
        if self.status == StatusCode.OK:
            return header + bytes(self.auth_code)
        self.auth_code = b""
        return header


@dataclass
class RAKPMessage4:
    """RAKP Message 4, the managed system's reply to RAKP Message 3."""

    tag: int = 0
    status: StatusCode = StatusCode.OK
    remote_console_session_id: int = 0
    icv: bytes = b""
    contents: bytes = b""

    def decode_from_bytes(self, data: bytes) -> None:
        """Populate the message from wire bytes."""
        data = bytes(data)
        if len(data) < _STATUS_HEADER_LENGTH:
            raise TruncatedError(
                f"RAKP Message 4 must be at least {_STATUS_HEADER_LENGTH} bytes, got {len(data)}"
            )
        self.contents = data
        self.tag = data[0]
        self.status = StatusCode(data[1])
        self.remote_console_session_id = _read_u32(data, 4)
        if self.status == StatusCode.OK:
            self.icv = data[_STATUS_HEADER_LENGTH:]
        else:
            self.icv = b""


@dataclass
class RAKPMessage1Payload(Payload):
    """Sends RAKP Message 1 and expects RAKP Message 2."""

    req: RAKPMessage1 = field(default_factory=RAKPMessage1)
    rsp: RAKPMessage2 = field(default_factory=RAKPMessage2)

    def descriptor(self) -> PayloadDescriptor:
        return PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_1

    def request(self) -> RAKPMessage1:
        return self.req

    def response(self) -> RAKPMessage2:
        return self.rsp


@dataclass
class RAKPMessage3Payload(Payload):
    """Sends RAKP Message 3 and expects RAKP Message 4."""

    req: RAKPMessage3 = field(default_factory=RAKPMessage3)
    rsp: RAKPMessage4 = field(default_factory=RAKPMessage4)

    def descriptor(self) -> PayloadDescriptor:
        return PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_3

    def request(self) -> RAKPMessage3:
        return self.req

    def response(self) -> RAKPMessage4:
        return self.rsp