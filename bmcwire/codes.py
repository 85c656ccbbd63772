"""Numeric codes that appear in IPMI and RMCP+ messages."""

from __future__ import annotations

from enum import IntEnum


class _OpenIntEnum(IntEnum):
    """An integer enum accepting any byte value, not only the named ones."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"VALUE_{value:#x}"
            member._value_ = value
            return member
        return None


class NetworkFunction(_OpenIntEnum):
    """Network function code identifying the functional class of a message."""

    CHASSIS_REQ = 0x0
    CHASSIS_RSP = 0x1
    BRIDGE_REQ = 0x2
    BRIDGE_RSP = 0x3
    SENSOR_REQ = 0x4
    SENSOR_RSP = 0x5
    APP_REQ = 0x6
    APP_RSP = 0x7
    FIRMWARE_REQ = 0x8
    FIRMWARE_RSP = 0x9
    STORAGE_REQ = 0xA
    STORAGE_RSP = 0xB
    TRANSPORT_REQ = 0xC
    TRANSPORT_RSP = 0xD
    GROUP_REQ = 0x2C
    GROUP_RSP = 0x2D
    OEM_REQ = 0x2E
    OEM_RSP = 0x2F

    def is_request(self) -> bool:
        """Whether this code is used for requests (even) rather than responses."""
        return int(self) % 2 == 0

    def category(self) -> str:
        """The functional class this code belongs to."""
        named = _NETWORK_FUNCTION_CATEGORIES.get(int(self) & ~1)
        if named is not None and int(self) <= 0x2F:
            return named
        if 0xE <= self <= 0x2B:
            return "Reserved"
        if 0x30 <= self <= 0x3F:
            return "Controller-specific OEM/Group"
        return "Unknown"

    def __str__(self) -> str:
        variety = "Request" if self.is_request() else "Response"
        return f"{int(self):#x}({self.category()} {variety})"


_NETWORK_FUNCTION_CATEGORIES = {
    0x0: "Chassis",
    0x2: "Bridge",
    0x4: "Sensor/Event",
    0x6: "App",
    0x8: "Firmware",
    0xA: "Storage",
    0xC: "Transport",
    0x2C: "Group Extension",
    0x2E: "OEM/Group",
}


class PayloadType(_OpenIntEnum):
    """Identifies the layer immediately within the RMCP+ session wrapper."""

    IPMI = 0x0
    OEM = 0x2
    OPEN_SESSION_REQ = 0x10
    OPEN_SESSION_RSP = 0x11
    RAKP_MESSAGE_1 = 0x12
    RAKP_MESSAGE_2 = 0x13
    RAKP_MESSAGE_3 = 0x14
    RAKP_MESSAGE_4 = 0x15

    def __str__(self) -> str:
        return _PAYLOAD_TYPE_NAMES.get(int(self), "Unknown")


_PAYLOAD_TYPE_NAMES = {
    0x0: "IPMI",
    0x2: "OEM Explicit",
    0x10: "RMCP+ Open Session Request",
    0x11: "RMCP+ Open Session Response",
    0x12: "RAKP Message 1",
    0x13: "RAKP Message 2",
    0x14: "RAKP Message 3",
    0x15: "RAKP Message 4",
}


class PrivilegeLevel(_OpenIntEnum):
    """Privilege level limiting which commands may be executed."""

    HIGHEST = 0
    CALLBACK = 1
    USER = 2
    OPERATOR = 3
    ADMINISTRATOR = 4
    OEM = 5

    def __str__(self) -> str:
        return _PRIVILEGE_LEVEL_NAMES.get(int(self), "Unknown")


_PRIVILEGE_LEVEL_NAMES = {
    0: "Highest",
    1: "Callback",
    2: "User",
    3: "Operator",
    4: "Administrator",
    5: "OEM",
}


class StatusCode(_OpenIntEnum):
    """RMCP+ status code carried in session establishment messages."""

    OK = 0x00
    INSUFFICIENT_RESOURCES = 0x01
    INVALID_SESSION_ID = 0x02
    UNAUTHORISED_NAME = 0x0D

    def description(self) -> str:
        """A human-readable description of the code."""
        return _STATUS_CODE_DESCRIPTIONS.get(int(self), "Unknown")

    def is_temporary(self) -> bool:
        """Whether a retry may succeed."""
        return self == StatusCode.INSUFFICIENT_RESOURCES

    def __str__(self) -> str:
        return f"0x{int(self):02x}({self.description()})"


_STATUS_CODE_DESCRIPTIONS = {
    0x00: "Ok",
    0x01: "Insufficient Resources",
    0x02: "Invalid Session ID",
    0x0D: "Unauthorised User",
}


class SlaveAddress(_OpenIntEnum):
    """A 7-bit I2C slave address."""

    BMC = 0x10

    def address(self) -> int:
        """The value used in an IPMI message address field."""
        return (int(self) << 1) & 0xFF

    def __str__(self) -> str:
        if self == SlaveAddress.BMC:
            return "BMC"
        return f"{int(self):#x}"


class SoftwareID(_OpenIntEnum):
    """Identifies system software or an event message generator."""

    REMOTE_CONSOLE_1 = 0x40

    def address(self) -> int:
        """The value used in an IPMI message address field."""
        return ((int(self) << 1) | 1) & 0xFF

    def __str__(self) -> str:
        value = int(self)
        if value <= 0xF:
            return "BIOS"
        if value <= 0x1F:
            return "System Management Interrupt Handler"
        if value <= 0x2F:
            return "System Management Software"
        if value <= 0x3F:
            return "OEM"
        if value <= 0x46:
            return f"Remote Console #{value - 0x40 + 1}"
        if value == 0x47:
            return "Terminal Mode Remote Console Software"
        return "Reserved"


class SessionHandle(int):
    """Identifies an active session within a channel."""

    def __new__(cls, value: int = 0) -> "SessionHandle":
        if not 0 <= value <= 0xFF:
            raise ValueError(f"session handle must fit in one byte, got {value}")
        return super().__new__(cls, value)