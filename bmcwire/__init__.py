"""Encoders and decoders for IPMI v1.5 and v2.0/RMCP+ headers, RAKP messages, SDR headers and codes."""

__version__ = "0.1.0"

__all__ = ["codes", "layers", "payload", "rakp", "sdr", "sensors", "session_headers"]