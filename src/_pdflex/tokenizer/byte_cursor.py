import logging

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024
HIGH_WATER_CHUNKS = 20


class ByteCursor:
    """
    A sliding window over a seekable byte stream.

    The cursor keeps a buffer of bytes read from the stream together with the
    offset in the stream of the first buffered byte (logical_start), so that
    the logical position is logical_start + cursor. The buffer is refilled
    one chunk at a time and the consumed prefix is dropped once the buffer
    grows past the high water mark.

    The stream is always seeked to next_read_offset before reading, so the
    position of the stream may be changed by others between calls.

    >>> cursor = ByteCursor(io.BytesIO(b"abc"))
    >>> cursor.get_byte()
    97
    >>> cursor.position
    1

    """

    def __init__(self, stream, chunk_size=CHUNK_SIZE, high_water_mark=None):
        """
        :param stream: A byte stream supporting seek, read and tell.
        :param chunk_size: Number of bytes read from the stream per refill.
        :param high_water_mark: Buffer size after which consumed bytes are
            dropped, defaults to HIGH_WATER_CHUNKS chunks.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size has to be positive, got {chunk_size}")
        self.stream = stream
        self.chunk_size = chunk_size
        if high_water_mark is None:
            high_water_mark = HIGH_WATER_CHUNKS * chunk_size
        self.high_water_mark = high_water_mark

        self.buffer = bytearray()
        self.cursor = 0
        self.logical_start = 0
        self.next_read_offset = 0

    @property
    def position(self):
        return self.logical_start + self.cursor

    @position.setter
    def position(self, position):
        """
        Discards the buffer, the stream is not read until bytes are requested.
        """
        if position < 0:
            raise ValueError(f"Position has to be non-negative, got {position}")
        self.buffer = bytearray()
        self.cursor = 0
        self.logical_start = position
        self.next_read_offset = position

    @property
    def buffered_end(self):
        """
        The stream offset just after the last buffered byte, which is the end
        of the stream once a scan has run out of input.
        """
        return self.logical_start + len(self.buffer)

    def rewind(self, position):
        """
        Go back to a position earlier obtained from ByteCursor.position.
        Keeps the buffer if it still contains the position.
        """
        offset = position - self.logical_start
        if 0 <= offset <= len(self.buffer):
            self.cursor = offset
        else:
            self.position = position

    def available(self):
        return len(self.buffer) - self.cursor

    def fill(self):
        """
        Read one more chunk from the stream into the buffer.

        :returns: False if the stream is exhausted, True otherwise.
        """
        self.stream.seek(self.next_read_offset)
        data = self.stream.read(self.chunk_size)
        if not data:
            return False

        self.buffer += data
        self.next_read_offset = self.stream.tell()
        if len(self.buffer) > self.high_water_mark and self.cursor > self.chunk_size:
            self.compact()
        return True

    def compact(self):
        dropped = self.cursor
        del self.buffer[:dropped]
        self.cursor = 0
        self.logical_start += dropped
        logger.debug(
            "Dropped %d consumed bytes, buffer now starts at %d",
            dropped,
            self.logical_start,
        )

    def ensure(self, size):
        """
        Fill the buffer until at least size unconsumed bytes are available.

        :returns: Whether size bytes are available.
        """
        while self.available() < size:
            if not self.fill():
                return False
        return True

    def get_byte(self):
        """
        :returns: The next byte as an int, or None at the end of the stream.
        """
        if not self.ensure(1):
            return None
        byte = self.buffer[self.cursor]
        self.cursor += 1
        return byte

    def peek_byte(self):
        if not self.ensure(1):
            return None
        return self.buffer[self.cursor]

    def read(self, size):
        """
        :returns: The next size bytes, fewer only if the stream ends first.
        """
        self.ensure(size)
        data = bytes(self.buffer[self.cursor : self.cursor + size])
        self.cursor += len(data)
        return data

    def rest(self):
        """
        Consume and return everything up to the end of the stream.
        """
        while self.fill():
            pass
        data = bytes(self.buffer[self.cursor :])
        self.cursor = len(self.buffer)
        return data

    def scan_until(self, pattern):
        """
        Consume bytes until the given pattern matches.

        The pattern has to match a single byte or be an empty lookahead for a
        single byte, as the search is resumed at the end of the previous
        buffer after each refill.

        :param pattern: A compiled bytes regular expression.
        :returns: The bytes from the position up to the end of the match, or
            None (leaving the position unchanged) if the stream ends first.
        """
        searched = 0
        while True:
            match = pattern.search(self.buffer, self.cursor + searched)
            if match is not None:
                end = match.end()
                data = bytes(self.buffer[self.cursor : end])
                self.cursor = end
                return data
            searched = self.available()
            if not self.fill():
                return None

    def skip(self, pattern):
        """
        Consume a match of pattern anchored at the position. Patterns which
        can match across chunk boundaries (such as runs of a character class)
        are matched against enough data to reach the end of the run.

        :returns: The number of consumed bytes, or None if there is no match.
        """
        while True:
            match = pattern.match(self.buffer, self.cursor)
            if match is None:
                if self.available() == 0 and self.fill():
                    continue
                return None
            end = match.end()
            if end < len(self.buffer) or not self.fill():
                skipped = end - self.cursor
                self.cursor = end
                return skipped

    def match(self, pattern, size):
        """
        Match pattern against exactly the next size bytes.

        :returns: The groups of the match, or None if it does not match, in
            which case the position is unchanged.
        """
        self.ensure(size)
        end = self.cursor + size
        match = pattern.fullmatch(self.buffer, self.cursor, end)
        if match is None:
            return None
        groups = tuple(bytes(group) for group in match.groups())
        self.cursor = end
        return groups
