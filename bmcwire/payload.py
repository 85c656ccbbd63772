"""RMCP+ payload descriptors and the interface for session setup payloads."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from bmcwire.codes import PayloadType
from bmcwire.sdr import LAYER_TYPE_PAYLOAD

LAYER_TYPE_MESSAGE = "Message"
LAYER_TYPE_OPEN_SESSION_REQ = "OpenSessionReq"
LAYER_TYPE_OPEN_SESSION_RSP = "OpenSessionRsp"
LAYER_TYPE_RAKP_MESSAGE_1 = "RAKPMessage1"
LAYER_TYPE_RAKP_MESSAGE_2 = "RAKPMessage2"
LAYER_TYPE_RAKP_MESSAGE_3 = "RAKPMessage3"
LAYER_TYPE_RAKP_MESSAGE_4 = "RAKPMessage4"


@dataclass(frozen=True)
class PayloadDescriptor:
    """The session fields that together describe the format of a payload.

    ``enterprise`` and ``payload_id`` are only meaningful, and only present on
    the wire, when the payload type is OEM explicit.
    """

    payload_type: PayloadType = PayloadType.IPMI
    enterprise: int = 0
    payload_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload_type", PayloadType(self.payload_type))
        if not 0 <= self.enterprise <= 0xFFFFFFFF:
            raise ValueError(f"enterprise must fit in 32 bits, got {self.enterprise}")
        if not 0 <= self.payload_id <= 0xFFFF:
            raise ValueError(f"payload ID must fit in 16 bits, got {self.payload_id}")

    def next_layer_type(self) -> str:
        """The layer type that decodes a payload with this descriptor."""
        return _payload_layer_types.get(self, LAYER_TYPE_PAYLOAD)

    def __str__(self) -> str:
        if self.payload_type == PayloadType.OEM:
            return f"PayloadDescriptor(OEM, {self.enterprise}, {self.payload_id:#x})"
        return f"PayloadDescriptor({self.payload_type})"


PAYLOAD_DESCRIPTOR_IPMI = PayloadDescriptor(PayloadType.IPMI)
PAYLOAD_DESCRIPTOR_OPEN_SESSION_REQ = PayloadDescriptor(PayloadType.OPEN_SESSION_REQ)
PAYLOAD_DESCRIPTOR_OPEN_SESSION_RSP = PayloadDescriptor(PayloadType.OPEN_SESSION_RSP)
PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_1 = PayloadDescriptor(PayloadType.RAKP_MESSAGE_1)
PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_2 = PayloadDescriptor(PayloadType.RAKP_MESSAGE_2)
PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_3 = PayloadDescriptor(PayloadType.RAKP_MESSAGE_3)
PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_4 = PayloadDescriptor(PayloadType.RAKP_MESSAGE_4)

_payload_layer_types: dict[PayloadDescriptor, str] = {
    PAYLOAD_DESCRIPTOR_IPMI: LAYER_TYPE_MESSAGE,
    PAYLOAD_DESCRIPTOR_OPEN_SESSION_REQ: LAYER_TYPE_OPEN_SESSION_REQ,
    PAYLOAD_DESCRIPTOR_OPEN_SESSION_RSP: LAYER_TYPE_OPEN_SESSION_RSP,
    PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_1: LAYER_TYPE_RAKP_MESSAGE_1,
    PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_2: LAYER_TYPE_RAKP_MESSAGE_2,
    PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_3: LAYER_TYPE_RAKP_MESSAGE_3,
    PAYLOAD_DESCRIPTOR_RAKP_MESSAGE_4: LAYER_TYPE_RAKP_MESSAGE_4,
}


def register_oem_payload_descriptor(enterprise: int, payload_id: int, layer_type: str) -> None:
    """Add or override the layer type used to decode an OEM payload.

    The registry is a plain dict; do not call this from several threads at once.
    """
    descriptor = PayloadDescriptor(PayloadType.OEM, enterprise, payload_id)
    _payload_layer_types[descriptor] = layer_type


class Payload(ABC):
    """An RMCP+ session setup interaction: a request and its expected response."""

    @abstractmethod
    def descriptor(self) -> PayloadDescriptor:
        """The descriptor of the request layer."""

    @abstractmethod
    def request(self) -> Any:
        """The layer sent to the managed system; it has a ``serialize()`` method."""

    @abstractmethod
    def response(self) -> Any:
        """The layer expected back; it has a ``decode_from_bytes(data)`` method."""