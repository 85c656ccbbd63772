"""Sensor Data Record headers and repository identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field

from bmcwire.codes import _OpenIntEnum
from bmcwire.layers import TruncatedError

LAYER_TYPE_SDR = "SDR"
LAYER_TYPE_FULL_SENSOR_RECORD = "FullSensorRecord"
LAYER_TYPE_PAYLOAD = "Payload"

_HEADER_LENGTH = 5


class RecordType(_OpenIntEnum):
    """The format of a Sensor Data Record."""

    FULL_SENSOR = 0x01
    COMPACT_SENSOR = 0x02
    EVENT_ONLY = 0x03
    ENTITY_ASSOCIATION = 0x08
    DEVICE_RELATIVE_ENTITY_ASSOCIATION = 0x09
    GENERIC_DEVICE_LOCATOR = 0x10
    FRU_DEVICE_LOCATOR = 0x11
    MANAGEMENT_CONTROLLER_DEVICE_LOCATOR = 0x12
    MANAGEMENT_CONTROLLER_CONFIRMATION = 0x13
    BMC_MESSAGE_CHANNEL_INFO = 0x14

    def description(self) -> str:
        """A human-readable description of the record type."""
        return _RECORD_TYPE_DESCRIPTIONS.get(int(self), "Unknown")

    def next_layer_type(self) -> str:
        """The layer type that decodes the body of this kind of record."""
        return _RECORD_TYPE_LAYER_TYPES.get(int(self), LAYER_TYPE_PAYLOAD)

    def __str__(self) -> str:
        return f"{int(self):#x}({self.description()})"


_RECORD_TYPE_LAYER_TYPES = {
    0x01: LAYER_TYPE_FULL_SENSOR_RECORD,
}

_RECORD_TYPE_DESCRIPTIONS = {
    0x01: "Full Sensor Record",
    0x02: "Compact Sensor Record",
    0x03: "Event-only Record",
    0x08: "Entity Association Record",
    0x09: "Device-relative Entity Association Record",
    0x10: "Generic Device Locator Record",
    0x11: "FRU Device Locator Record",
    0x12: "Management Controller Device Locator Record",
    0x13: "Management Controller Confirmation Record",
    0x14: "BMC Message Channel Info Record",
}


class _UInt16(int):
    def __new__(cls, value: int = 0):
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"{cls.__name__} must fit in 16 bits, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self):#06x})"


class RecordID(_UInt16):
    """Identifies an SDR in the repository until the repository is modified.

    ``RecordID.FIRST`` starts iteration; ``RecordID.LAST`` marks its end.
    """

    FIRST: "RecordID"
    LAST: "RecordID"


RecordID.FIRST = RecordID(0x0000)
RecordID.LAST = RecordID(0xFFFF)


class ReservationID(_UInt16):
    """Token returned by Reserve SDR Repository, invalidated on record changes."""


@dataclass
class SDR:
    """A Sensor Data Record header, common to every record type."""

    record_id: RecordID = field(default_factory=RecordID)
    version: int = 0
    record_type: RecordType = field(default_factory=lambda: RecordType(0))
    contents: bytes = b""
    payload: bytes = b""

    def decode_from_bytes(self, data: bytes) -> None:
        """Populate the header from ``data``; the rest becomes the payload."""
        data = bytes(data)
        if len(data) < _HEADER_LENGTH:
            raise TruncatedError(
                f"SDR Header is always {_HEADER_LENGTH} bytes, got {len(data)}"
            )
        self.record_id = RecordID(int.from_bytes(data[0:2], "little"))
        self.version = (data[2] & 0xF) * 10 + (data[2] >> 4)
        self.record_type = RecordType(data[3])
        self.contents = data[:_HEADER_LENGTH]
        self.payload = data[_HEADER_LENGTH:]

    def next_layer_type(self) -> str:
        """The layer type that decodes the record key and body."""
        return self.record_type.next_layer_type()