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

from typing import Generic, TypeVar

from typing_extensions import Self, override

from leb128codec.serialization.deserializer import Deserializer
from leb128codec.serialization.exceptions import ReadError, SerializationError
from leb128codec.serialization.serializer import Serializer
from leb128codec.utils.result import Result

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class _AdapterContext:
    """Lets an adapter be used in a `with` block, leaving the block does not touch the inner (de)serializer."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


class GenericSerializerAdapter(_AdapterContext, Serializer, Generic[S]):
    """Serializer that forwards every call to `inner`, subclasses override only what they change."""

    def __init__(self, serializer: S) -> None:
        self.inner = serializer

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        self.inner.write_bytes(data)


class GenericDeserializerAdapter(_AdapterContext, Deserializer, Generic[D]):
    """Deserializer that forwards every call to `inner`, subclasses override only what they change."""

    def __init__(self, deserializer: D) -> None:
        self.inner = deserializer

    @override
    def finalize(self) -> Result[None, SerializationError]:
        return self.inner.finalize()

    @override
    def read_byte(self) -> Result[int, ReadError]:
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Result[Buffer, ReadError]:
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Result[Buffer, ReadError]:
        return self.inner.read_all()
