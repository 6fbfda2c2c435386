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


from typing import Iterable

from typing_extensions import override

from ..utils.result import Err, Ok, Result, as_result, propagate_result
from .deserializer import Deserializer
from .exceptions import BadDataError, OutOfDataError, ReadError

_END = object()


class IterDeserializer(Deserializer):
    """Deserializer that pulls bytes one at a time from any iterable of ints, a generator for instance.

    An `OSError` raised by the iterable is returned as `Err` holding that same exception, like `StreamDeserializer`.

    >>> de = Deserializer.build_iter_deserializer(iter([0xac, 0x02, 0x7e]))
    >>> de.read_leb128_unsigned(width=16)
    Ok(DecodeResult(value=300, consumed=2))
    >>> de.read_leb128_signed(width=8)
    Ok(DecodeResult(value=-2, consumed=1))
    >>> de.read_byte()
    Err(OutOfDataError('not enough bytes to read'))
    """

    def __init__(self, data: Iterable[int]) -> None:
        self._iter = iter(data)
        self._next = as_result(OSError)(next)

    @propagate_result
    @override
    def read_byte(self) -> Result[int, ReadError]:
        byte = self._next(self._iter, _END).unwrap_or_propagate()
        if byte is _END:
            return Err(OutOfDataError('not enough bytes to read'))
        if not isinstance(byte, int) or not 0 <= byte <= 0xff:
            return Err(BadDataError(f'{byte!r} is not a byte value'))
        return Ok(byte)
