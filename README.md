# bmcwire

Encoders and decoders for the packets that a remote console exchanges with a
baseboard management controller (BMC) over IPMI-over-LAN. The package uses only
the standard library.

## What is included

- `bmcwire.session_headers`: `V1Session` is the IPMI v1.5 header. `V2Session`
  is the IPMI v2.0 / RMCP+ header. It handles OEM payload fields, padding and
  integrity trailers, and checks the signature on decode. `SessionSelector` is
  the zero-length layer that chooses between the two headers. `SequenceNumbers`
  holds a session's inbound and outbound counters.
- `bmcwire.rakp`: `RAKPMessage1` to `RAKPMessage4`, and the
  `RAKPMessage1Payload` and `RAKPMessage3Payload` request/response pairs.
- `bmcwire.payload`: `PayloadDescriptor`, the abstract `Payload` interface, and
  `register_oem_payload_descriptor` for vendor payloads.
- `bmcwire.sdr`: the common `SDR` record header, `RecordType`, `RecordID`
  (with `RecordID.FIRST` and `RecordID.LAST`) and `ReservationID`.
- `bmcwire.codes`: `NetworkFunction`, `PayloadType`, `PrivilegeLevel`,
  `StatusCode`, `SlaveAddress`, `SoftwareID` and `SessionHandle`.
- `bmcwire.sensors`: `RateUnit`, `SensorDirection`, `SensorType`,
  `SensorUnit` and `OutputType`.
- `bmcwire.layers`: `DecodedTypes` checks which layer types a decode
  produced. `DecodeError` and `TruncatedError` report malformed or short input.

The code enumerations accept any byte value. Values without a name still
format, as "Unknown" or "Reserved" where that applies.

## Installation

```
pip install bmcwire
```

## Examples

Build a RAKP Message 1:

```python
from bmcwire.codes import PrivilegeLevel
from bmcwire.rakp import RAKPMessage1

msg = RAKPMessage1(
    tag=0x01,
    managed_system_session_id=0x04030201,
    remote_console_random=bytes(range(16)),
    max_privilege_level=PrivilegeLevel.ADMINISTRATOR,
    username="operator",
)
wire = msg.serialize()
```

Decode an SDR header and find out which layer follows it:

```python
from bmcwire.sdr import SDR

sdr = SDR()
sdr.decode_from_bytes(bytes([0x0F, 0xF0, 0x99, 0x01, 0x16]))
print(sdr.record_id, sdr.version, sdr.record_type.description())
print(sdr.next_layer_type())  # "FullSensorRecord"
```

Wrap a payload in an authenticated RMCP+ header. The integrity algorithm is any
callable that takes bytes and returns the check value:

```python
import hashlib
import hmac

from bmcwire.session_headers import V2Session

key = bytes(20)
session = V2Session(
    authenticated=True,
    session_id=0x1234,
    sequence=1,
    integrity_algorithm=lambda data: hmac.new(key, data, hashlib.sha1).digest()[:12],
)
packet = session.serialize(b"\x00", fix_lengths=True, compute_checksums=True)

received = V2Session(integrity_algorithm=session.integrity_algorithm)
received.decode_from_bytes(packet)
```

Check the layers a decode produced:

```python
from bmcwire.layers import DecodedTypes, DecodeError

types = DecodedTypes(["RMCP", "SessionSelector", "V2Session"])
try:
    types.innermost_equals("Message")
except DecodeError as exc:
    print(exc)
```

## Errors

`decode_from_bytes` raises `TruncatedError` when the input is too short. It
raises `DecodeError` when the input is malformed, for example a wrong auth type
byte, an over-long username length or a bad signature. Both errors are
subclasses of `ValueError`. `serialize` raises `ValueError` when a field cannot
be encoded, for example a username longer than 16 bytes or a random value that
is not 16 bytes long.

## What it does not do

bmcwire only turns bytes into structured values and back. It does not open
sockets or send anything. It does not run session establishment, retry or time
out requests, or track sequence numbers for you. It has no encoder or decoder
for the IPMI message layer, the Open Session request and response, individual
commands, or the bodies of Full Sensor Records. It also does not convert sensor
readings. Layer types are plain strings, such as `"Message"` and
`"FullSensorRecord"`, that name what would decode next.

## Running the tests

```
pip install -e ".[test]"
pytest
```