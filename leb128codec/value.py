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

"""
Encoded LEB128 numbers kept as their raw bytes.

`ULeb128` and `SLeb128` hold the bytes of exactly one encoded number, which allows splitting a byte sequence into its
numbers first and decoding each one later, with whatever width the consumer expects:

>>> numbers = ULeb128.all_from_bytes(bytes.fromhex('00 e58e26 8001')).unwrap()
>>> [n.byte_count for n in numbers]
[1, 3, 2]
>>> [n.decode(width=32).unwrap() for n in numbers]
[0, 624485, 128]
>>> numbers[2].decode(width=8)
Ok(128)
>>> SLeb128.from_bytes(bytes.fromhex('807f ff')).unwrap()
SLeb128(raw=b'\\x80\\x7f')
>>> SLeb128.from_bytes(bytes.fromhex('807f')).unwrap().decode(width=8)
Ok(-128)
>>> ULeb128.all_from_bytes(bytes.fromhex('01 80'))
Err(OutOfDataError('no terminating group found'))
"""

from dataclasses import dataclass
from typing import ClassVar

from typing_extensions import Self

from leb128codec.serialization import Deserializer, ReadError, SerializationError, Serializer
from leb128codec.serialization.encoding.leb128 import CONTINUATION_BIT
from leb128codec.serialization.exceptions import OutOfDataError
from leb128codec.serialization.types import Buffer
from leb128codec.utils.result import Err, Ok, Result, propagate_result
from leb128codec.width import Width


@dataclass(frozen=True)
class _Leb128:
    raw: bytes

    # XXX: subclass must define this value:
    _signed: ClassVar[bool]

    def __post_init__(self) -> None:
        if not self.raw:
            raise ValueError('an encoded number has at least one byte')
        if any((byte & CONTINUATION_BIT) == 0 for byte in self.raw[:-1]):
            raise ValueError('only the last byte can have the continuation bit clear')
        if (self.raw[-1] & CONTINUATION_BIT) != 0:
            raise ValueError('the last byte must have the continuation bit clear')

    def __bytes__(self) -> bytes:
        return self.raw

    @property
    def byte_count(self) -> int:
        return len(self.raw)

    @classmethod
    def encode(cls, value: int, *, width: Width | int) -> Self:
        """Encode `value` with the given width, raises ValueError if it does not fit."""
        serializer = Serializer.build_bytes_serializer()
        serializer.write_leb128(value, width=width, signed=cls._signed)
        return cls(bytes(serializer.finalize()))

    @classmethod
    def from_bytes(cls, data: Buffer) -> Result[Self, SerializationError]:
        """Take the first complete number at the start of `data`, trailing bytes are ignored."""
        view = memoryview(data).cast('B')
        for i, byte in enumerate(view):
            if (byte & CONTINUATION_BIT) == 0:
                return Ok(cls(bytes(view[:i + 1])))
        return Err(OutOfDataError('no terminating group found'))

    @classmethod
    @propagate_result
    def all_from_bytes(cls, data: Buffer) -> Result[list[Self], SerializationError]:
        """Split `data` into consecutive numbers, every byte must belong to a complete number."""
        view = memoryview(data).cast('B')
        numbers: list[Self] = []
        while view:
            number = cls.from_bytes(view).unwrap_or_propagate()
            numbers.append(number)
            view = view[number.byte_count:]
        return Ok(numbers)

    def decode(self, *, width: Width | int, strict: bool = False) -> Result[int, ReadError]:
        """Decode the number as an integer of the given width."""
        deserializer = Deserializer.build_bytes_deserializer(self.raw)
        return deserializer.read_leb128(width=width, signed=self._signed, strict=strict).map(lambda r: r.value)


@dataclass(frozen=True)
class ULeb128(_Leb128):
    """Unsigned LEB128 number."""

    _signed: ClassVar[bool] = False


@dataclass(frozen=True)
class SLeb128(_Leb128):
    """Signed LEB128 number."""

    _signed: ClassVar[bool] = True
