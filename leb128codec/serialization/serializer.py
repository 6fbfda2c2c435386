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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, BinaryIO, overload

from typing_extensions import Self

from .types import Buffer

if TYPE_CHECKING:
    from leb128codec.width import Width

    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer
    from .stream_serializer import StreamSerializer


class Serializer(ABC):
    """Byte sink, encoders only need `write_byte`.

    A failure of the underlying medium is an `OSError` raised by the write call, it propagates unchanged.
    """

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_stream_serializer(stream: BinaryIO) -> StreamSerializer:
        from .stream_serializer import StreamSerializer
        return StreamSerializer(stream)

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of bytes written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        raise NotImplementedError

    def write_bytes(self, data: Buffer) -> None:
        # XXX: byte by byte, implementations with a cheaper bulk write should override this
        for byte in memoryview(data).cast('B'):
            self.write_byte(byte)

    def finalize(self) -> Buffer:
        """Complete the serialization and return the bytes, this serializer cannot be used after that."""
        raise TypeError(f'{type(self).__name__} does not support finalization')

    def write_leb128(self, value: int, *, width: Width | int, signed: bool) -> None:
        """Write `value` LEB128 encoded, raises ValueError if it is out of range for `width` and `signed`."""
        from .encoding.leb128 import encode_leb128
        encode_leb128(self, value, width=width, signed=signed)

    def write_leb128_unsigned(self, value: int, *, width: Width | int) -> None:
        self.write_leb128(value, width=width, signed=False)

    def write_leb128_signed(self, value: int, *, width: Width | int) -> None:
        self.write_leb128(value, width=width, signed=True)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Wrap this serializer so that writing more than `max_bytes` raises `MaxBytesExceededError`."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
