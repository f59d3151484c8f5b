from __future__ import annotations

from kurobako_solver.protocol.codec import decode_inbound, decode_outbound, encode_message
from kurobako_solver.protocol.transport import LineTransport

__all__ = ["LineTransport", "decode_inbound", "decode_outbound", "encode_message"]
