"""Buffered output that can be framed into length-prefixed packets."""

PACKET_MARKER = b"\x04"
PACKET_CAPACITY = 255


class PacketizedOutput:
    """Buffer bytes for a binary stream.

    In packetized mode the bytes are held until the buffer is full or
    ``flush`` is called, and each flushed chunk is written as a marker byte,
    a length byte and the data. Otherwise every ``add`` is written at once.
    """

    def __init__(self, stream, packetized=False):
        self.stream = stream
        self.packetized = packetized
        self._buffer = bytearray()

    def add(self, data):
        """Queue ``data`` (bytes, or str encoded as UTF-8) for output."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        view = memoryview(data)
        while view:
            if len(self._buffer) == PACKET_CAPACITY:
                self.flush()
            room = PACKET_CAPACITY - len(self._buffer)
            self._buffer += view[:room]
            view = view[room:]
        if not self.packetized:
            self.flush()

    def flush(self):
        """Write out whatever is buffered."""
        if not self._buffer:
            return
        if self.packetized:
            self.stream.write(PACKET_MARKER + bytes([len(self._buffer)]))
        self.stream.write(bytes(self._buffer))
        self._buffer.clear()