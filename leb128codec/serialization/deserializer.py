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
from typing import TYPE_CHECKING, BinaryIO, Iterable, overload

from typing_extensions import Self

from ..utils.result import Err, Ok, Result, propagate_result
from .exceptions import OutOfDataError, ReadError, SerializationError
from .types import Buffer

if TYPE_CHECKING:
    from leb128codec.width import Width

    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer
    from .encoding.leb128 import DecodeResult
    from .iter_deserializer import IterDeserializer
    from .stream_deserializer import StreamDeserializer


class Deserializer(ABC):
    """Byte source: the only thing a decoder needs is `read_byte`.

    End of input is reported as `Err(OutOfDataError)`, a failure of the underlying medium as `Err(OSError)` holding the
    exception exactly as the medium raised it.
    """

    def finalize(self) -> Result[None, SerializationError]:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_stream_deserializer(stream: BinaryIO) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(stream)

    @staticmethod
    def build_iter_deserializer(data: Iterable[int]) -> IterDeserializer:
        from .iter_deserializer import IterDeserializer
        return IterDeserializer(data)

    @abstractmethod
    def read_byte(self) -> Result[int, ReadError]:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @propagate_result
    def read_bytes(self, n: int, *, exact: bool = True) -> Result[Buffer, ReadError]:
        """Read n bytes, when exact=True it errors if there isn't enough data"""
        # XXX: it is recommended that implementors of Deserializer specialize this implementation
        if n < 0:
            return Err(SerializationError('value cannot be negative'))
        data = bytearray()
        for _ in range(n):
            match self.read_byte():
                case Ok(byte):
                    data.append(byte)
                case Err(OutOfDataError()) if not exact:
                    break
                case err:
                    err.unwrap_or_propagate()
        return Ok(bytes(data))

    @propagate_result
    def read_all(self) -> Result[Buffer, ReadError]:
        """Read all bytes until the reader is empty."""
        # XXX: it is recommended that implementors of Deserializer specialize this implementation
        data = bytearray()
        while True:
            match self.read_byte():
                case Ok(byte):
                    data.append(byte)
                case Err(OutOfDataError()):
                    return Ok(bytes(data))
                case err:
                    err.unwrap_or_propagate()

    def read_leb128(
        self,
        *,
        width: Width | int,
        signed: bool,
        strict: bool = False,
    ) -> Result[DecodeResult, ReadError]:
        """Read one LEB128 value, consuming exactly its bytes."""
        from .encoding.leb128 import decode_leb128
        return decode_leb128(self, width=width, signed=signed, strict=strict)

    def read_leb128_unsigned(self, *, width: Width | int, strict: bool = False) -> Result[DecodeResult, ReadError]:
        return self.read_leb128(width=width, signed=False, strict=strict)

    def read_leb128_signed(self, *, width: Width | int, strict: bool = False) -> Result[DecodeResult, ReadError]:
        return self.read_leb128(width=width, signed=True, strict=strict)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        """Helper method to wrap the current deserializer with MaxBytesDeserializer."""
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesDeserializer[Self]:
        """Helper method to optionally wrap the current deserializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
