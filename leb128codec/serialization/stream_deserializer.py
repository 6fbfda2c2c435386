#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from typing import BinaryIO

from typing_extensions import override

from ..utils.result import Err, Ok, Result, as_result, propagate_result
from .deserializer import Deserializer
from .exceptions import OutOfDataError, ReadError
from .types import Buffer


class StreamDeserializer(Deserializer):
    """Deserializer that reads from a binary file-like object (files, `io.BytesIO`, `socket.makefile('rb')`, ...).

    Bytes are requested from the stream only when needed, so after decoding a value the stream is positioned right
    after it. An `OSError` raised by the stream is returned as `Err` holding that same exception.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._consumed = 0
        self._read = as_result(OSError)(stream.read)

    @property
    def consumed(self) -> int:
        """Number of bytes consumed from the stream by this deserializer."""
        return self._consumed

    @propagate_result
    @override
    def read_byte(self) -> Result[int, ReadError]:
        data = self._read(1).unwrap_or_propagate()
        if data is None:
            # non-blocking stream with nothing buffered
            return Err(OutOfDataError('no data available on non-blocking stream'))
        if not data:
            return Err(OutOfDataError('not enough bytes to read'))
        self._consumed += 1
        return Ok(data[0])

    @propagate_result
    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Result[Buffer, ReadError]:
        if n < 0:
            return super().read_bytes(n, exact=exact)
        parts: list[bytes] = []
        missing = n
        while missing > 0:
            data = self._read(missing).unwrap_or_propagate()
            if not data:
                break
            parts.append(data)
            missing -= len(data)
        result = b''.join(parts)
        self._consumed += len(result)
        if exact and missing > 0:
            return Err(OutOfDataError('not enough bytes to read'))
        return Ok(result)

    @propagate_result
    @override
    def read_all(self) -> Result[Buffer, ReadError]:
        data = self._read().unwrap_or_propagate()
        if data is None:
            data = b''
        self._consumed += len(data)
        return Ok(data)
