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

from typing_extensions import override

from ..utils.result import Err, Ok, Result
from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """Deserializer over an in-memory buffer.

    The buffer is not copied: reads advance an offset into a memoryview of it and `read_bytes`/`read_all` return
    slices of that view.
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast('B')
        self._offset = 0

    @property
    def consumed(self) -> int:
        """Number of bytes read so far."""
        return self._offset

    def remaining(self) -> int:
        return len(self._view) - self._offset

    def is_empty(self) -> bool:
        return self._offset >= len(self._view)

    @override
    def finalize(self) -> Result[None, SerializationError]:
        if not self.is_empty():
            return Err(SerializationError('trailing data'))
        del self._view
        return Ok(None)

    @override
    def read_byte(self) -> Result[int, SerializationError]:
        if self.is_empty():
            return Err(OutOfDataError('not enough bytes to read'))
        byte = self._view[self._offset]
        self._offset += 1
        return Ok(byte)

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Result[memoryview, SerializationError]:
        if n < 0:
            return Err(SerializationError('value cannot be negative'))
        if exact and self.remaining() < n:
            return Err(OutOfDataError('not enough bytes to read'))
        start, self._offset = self._offset, min(self._offset + n, len(self._view))
        return Ok(self._view[start:self._offset])

    @override
    def read_all(self) -> Result[memoryview, SerializationError]:
        start, self._offset = self._offset, len(self._view)
        return Ok(self._view[start:])
