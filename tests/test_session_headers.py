import hashlib
import hmac

import pytest

from bmcwire.codes import PayloadType
from bmcwire.layers import DecodeError, TruncatedError
from bmcwire.session_headers import (
    LAYER_TYPE_V1_SESSION,
    LAYER_TYPE_V2_SESSION,
    SequenceNumbers,
    SessionSelector,
    V1Session,
    V2Session,
)


def hasher(data):
    return bytes([0x01, 0x02, 0x03, 0x04])


# --- SequenceNumbers -------------------------------------------------------


def test_sequence_numbers_independent():
    numbers = SequenceNumbers()
    numbers.inbound += 1
    assert numbers == SequenceNumbers(inbound=1, outbound=0)


# --- SessionSelector -------------------------------------------------------


def test_session_selector_rmcp_plus():
    selector = SessionSelector()
    selector.decode_from_bytes(b"\x06\x00\x01")
    assert selector.is_rmcp_plus is True
    assert selector.payload == b"\x06\x00\x01"
    assert selector.next_layer_type() == LAYER_TYPE_V2_SESSION


def test_session_selector_v1():
    selector = SessionSelector()
    selector.decode_from_bytes(b"\x00")
    assert selector.is_rmcp_plus is False
    assert selector.next_layer_type() == LAYER_TYPE_V1_SESSION


def test_session_selector_empty():
    with pytest.raises(TruncatedError):
        SessionSelector().decode_from_bytes(b"")


# --- V1Session ------------------------------------------------------------

V1_CASES = [
    (
        V1Session(
            contents=bytes([0x0, 0x0, 0x0, 0x0, 0x40, 0x0, 0x0, 0x0, 0x20, 0x3]),
            payload=bytes([0x0, 0x0, 0x0]),
            auth_type=0,
            sequence=1073741824,
            session_id=536870912,
            length=3,
        ),
        bytes([0x0, 0x0, 0x0, 0x0, 0x40, 0x0, 0x0, 0x0, 0x20, 0x3, 0, 0, 0]),
    ),
    (
        V1Session(
            contents=bytes([0x6, 0xA3, 0x8, 0x0, 0x0, 0x62, 0x4, 0x0, 0x0, 0x1])
            + bytes(16),
            payload=b"",
            auth_type=6,
            sequence=2211,
            session_id=1122,
            auth_code=bytes([0x1]) + bytes(15),
            length=0,
        ),
        bytes([0x6, 0xA3, 0x8, 0x0, 0x0, 0x62, 0x4, 0x0, 0x0, 0x1]) + bytes(16),
    ),
]


@pytest.mark.parametrize("layer,wire", V1_CASES)
def test_v1_session_round_trip(layer, wire):
    got = layer.serialize(bytes(layer.length), fix_lengths=True)
    assert got == wire
    decoded = V1Session()
    decoded.decode_from_bytes(got)
    assert decoded == layer


def test_v1_session_too_short():
    with pytest.raises(TruncatedError):
        V1Session().decode_from_bytes(bytes(9))


def test_v1_session_missing_auth_code():
    with pytest.raises(TruncatedError):
        V1Session().decode_from_bytes(bytes([0x1]) + bytes(15))


def test_v1_session_next_layer_is_message():
    assert V1Session().next_layer_type() == "Message"


# --- V2Session ------------------------------------------------------------

V2_CASES = [
    (
        None,
        bytes([0x3, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0]),
    ),
    (
        V2Session(
            contents=bytes([0x6, 0x0, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0]),
            payload=bytes([0x0]),
            session_id=0x4030201,
            sequence=0x1020304,
            length=1,
            integrity_algorithm=hasher,
        ),
        bytes([0x6, 0x0, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0, 0x0]),
    ),
    (
        V2Session(
            contents=bytes([0x6, 0x20, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0]),
            payload=bytes([0x0]),
            payload_type=PayloadType(0x20),
            session_id=0x4030201,
            sequence=0x1020304,
            length=1,
            integrity_algorithm=hasher,
        ),
        bytes([0x6, 0x20, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0, 0x0]),
    ),
    (
        V2Session(
            contents=bytes(
                [0x6, 0x2, 0xA2, 0x2, 0x0, 0x0, 0x1, 0x2,
                 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0]
            ),
            payload=bytes([0x0]),
            payload_type=PayloadType.OEM,
            enterprise=674,
            payload_id=0x201,
            session_id=0x4030201,
            sequence=0x1020304,
            length=1,
            integrity_algorithm=hasher,
        ),
        bytes(
            [0x6, 0x2, 0xA2, 0x2, 0x0, 0x0, 0x1, 0x2, 0x1, 0x2, 0x3, 0x4,
             0x4, 0x3, 0x2, 0x1, 0x1, 0x0, 0x0]
        ),
    ),
    (
        V2Session(
            contents=bytes([0x6, 0x80, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0]),
            payload=bytes([0x0]),
            encrypted=True,
            session_id=0x4030201,
            sequence=0x1020304,
            length=1,
            integrity_algorithm=hasher,
        ),
        bytes([0x6, 0x80, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0, 0x0]),
    ),
    (
        V2Session(
            contents=bytes([0x6, 0x40, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1, 0x0]),
            payload=bytes([0x0]),
            authenticated=True,
            session_id=0x4030201,
            sequence=0x1020304,
            length=1,
            pad=1,
            signature=bytes([0x1, 0x2, 0x3, 0x4]),
            integrity_algorithm=hasher,
        ),
        bytes(
            [0x6, 0x40, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x1,
             0x0, 0x0, 0xFF, 0x1, 0x07, 0x1, 0x2, 0x3, 0x4]
        ),
    ),
    (
        V2Session(
            contents=bytes([0x6, 0xC0, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x2, 0x0]),
            payload=bytes([0x0, 0x0]),
            encrypted=True,
            authenticated=True,
            session_id=0x4030201,
            sequence=0x1020304,
            length=2,
            pad=0,
            signature=bytes([0x1, 0x2, 0x3, 0x4]),
            integrity_algorithm=hasher,
        ),
        bytes(
            [0x6, 0xC0, 0x1, 0x2, 0x3, 0x4, 0x4, 0x3, 0x2, 0x1, 0x2,
             0x0, 0x0, 0x0, 0x0, 0x07, 0x1, 0x2, 0x3, 0x4]
        ),
    ),
]


@pytest.mark.parametrize("layer,wire", [c for c in V2_CASES if c[0] is not None])
def test_v2_session_serialize(layer, wire):
    got = layer.serialize(bytes(layer.length), fix_lengths=True)
    assert got == wire


def test_v2_session_decode_cases_with_shared_layer():
    session = V2Session(integrity_algorithm=hasher)
    for layer, wire in V2_CASES:
        if layer is None:
            with pytest.raises(DecodeError):
                session.decode_from_bytes(wire)
        else:
            session.decode_from_bytes(wire)
            assert session == layer


def test_v2_session_too_short():
    with pytest.raises(TruncatedError):
        V2Session().decode_from_bytes(bytes([0x6]) + bytes(10))


def test_v2_session_oem_too_short():
    with pytest.raises(TruncatedError):
        V2Session().decode_from_bytes(bytes([0x6, 0x2]) + bytes(12))


def test_v2_session_payload_shorter_than_length():
    wire = bytes([0x6, 0x0, 0, 0, 0, 0, 0, 0, 0, 0, 0x5, 0x0, 0x1])
    with pytest.raises(TruncatedError):
        V2Session().decode_from_bytes(wire)


def test_v2_session_missing_trailer():
    wire = bytes([0x6, 0x40, 0, 0, 0, 0, 0, 0, 0, 0, 0x1, 0x0, 0x0, 0xFF, 0xFF])
    with pytest.raises(TruncatedError):
        V2Session(integrity_algorithm=hasher).decode_from_bytes(wire)


def test_v2_session_bad_signature():
    wire = bytes(
        [0x6, 0x40, 0, 0, 0, 0, 0, 0, 0, 0, 0x1, 0x0, 0x0, 0xFF, 0x1, 0x07, 9, 9, 9, 9]
    )
    with pytest.raises(DecodeError, match="invalid signature"):
        V2Session(integrity_algorithm=hasher).decode_from_bytes(wire)


def test_v2_session_signature_without_algorithm_rejected():
    wire = bytes(
        [0x6, 0x40, 0, 0, 0, 0, 0, 0, 0, 0, 0x1, 0x0, 0x0, 0xFF, 0x1, 0x07, 1, 2, 3, 4]
    )
    with pytest.raises(DecodeError):
        V2Session().decode_from_bytes(wire)


def _sha1_96(data):
    return hmac.new(b"k" * 20, data, hashlib.sha1).digest()[:12]


def test_v2_session_checksum_round_trip():
    payload = b"\x01\x02\x03"
    sender = V2Session(
        authenticated=True,
        session_id=0x1234,
        sequence=7,
        integrity_algorithm=_sha1_96,
    )
    wire = sender.serialize(payload, fix_lengths=True, compute_checksums=True)
    assert len(sender.signature) == 12
    assert wire.endswith(sender.signature)
    assert (len(wire) - len(sender.signature)) % 4 == 0

    receiver = V2Session(integrity_algorithm=_sha1_96)
    receiver.decode_from_bytes(wire)
    assert receiver.payload == payload
    assert receiver.pad == sender.pad
    assert receiver.session_id == 0x1234
    assert receiver.sequence == 7


def test_v2_session_tampered_packet_rejected():
    sender = V2Session(authenticated=True, integrity_algorithm=_sha1_96)
    wire = bytearray(sender.serialize(b"\xaa\xbb", fix_lengths=True, compute_checksums=True))
    wire[12] ^= 0x01
    with pytest.raises(DecodeError):
        V2Session(integrity_algorithm=_sha1_96).decode_from_bytes(bytes(wire))


def test_v2_session_next_layer_types():
    assert V2Session().next_layer_type() == "Message"
    encrypted = V2Session(encrypted=True, confidentiality_layer_type="AESCBC128")
    assert encrypted.next_layer_type() == "AESCBC128"
    assert V2Session(payload_type=PayloadType.RAKP_MESSAGE_2).next_layer_type() == "RAKPMessage2"
    assert V2Session(payload_type=PayloadType(0x20)).next_layer_type() == "Payload"