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

from typing import TypeVar

from typing_extensions import override

from leb128codec.serialization.deserializer import Deserializer
from leb128codec.serialization.exceptions import OutOfDataError, ReadError, SerializationError
from leb128codec.serialization.serializer import Serializer
from leb128codec.utils.result import Err, Ok, Result, propagate_result

from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter, GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(SerializationError):
    """ The adapted (de)serializer reached its byte budget.

    The inner (de)serializer is left at an arbitrary point of the data, the whole operation has to be considered failed
    and the adapter should not be used anymore.
    """


class _ByteBudget:
    __slots__ = ('left',)

    def __init__(self, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.left = max_bytes

    def take(self, size: int) -> bool:
        """Spend `size` bytes, returns False when the budget is exceeded (and stays so)."""
        self.left -= size
        return self.left >= 0


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """Serializer that raises `MaxBytesExceededError` instead of writing past `max_bytes`."""

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._budget = _ByteBudget(max_bytes)

    @override
    def write_byte(self, data: int) -> None:
        if not self._budget.take(1):
            raise MaxBytesExceededError
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        if not self._budget.take(len(view)):
            raise MaxBytesExceededError
        self.inner.write_bytes(view)


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    """Deserializer that returns `Err(MaxBytesExceededError())` instead of reading past `max_bytes`."""

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        super().__init__(deserializer)
        self._budget = _ByteBudget(max_bytes)

    @override
    def read_byte(self) -> Result[int, ReadError]:
        if not self._budget.take(1):
            return Err(MaxBytesExceededError())
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Result[Buffer, ReadError]:
        if n >= 0 and not self._budget.take(n):
            return Err(MaxBytesExceededError())
        return self.inner.read_bytes(n, exact=exact)

    @propagate_result
    @override
    def read_all(self) -> Result[Buffer, ReadError]:
        # read what the budget allows, then make sure nothing is left
        data = self.inner.read_bytes(max(self._budget.left, 0), exact=False).unwrap_or_propagate()
        self._budget.take(len(memoryview(data)))
        match self.inner.read_byte():
            case Ok(_):
                return Err(MaxBytesExceededError())
            case Err(OutOfDataError()):
                return Ok(data)
            case err:
                return err
