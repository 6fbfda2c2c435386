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

from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Serializer that writes straight into a binary file-like object.

    Any `OSError` raised by the stream propagates unchanged. Calling `finalize()` flushes the stream and returns an
    empty buffer, the written bytes live in the stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pos = 0

    @override
    def finalize(self) -> memoryview:
        self._stream.flush()
        return memoryview(b'')

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        # int.to_bytes checks for correct range
        self.write_bytes(int.to_bytes(data, length=1, byteorder='little'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        while view:
            written = self._stream.write(view)
            if written is None:
                # unbuffered non-blocking streams can refuse the write
                raise BlockingIOError('stream is not ready for writing')
            self._pos += written
            view = view[written:]
