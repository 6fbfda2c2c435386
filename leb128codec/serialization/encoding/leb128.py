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
This module implements LEB128 for signed and unsigned integers of a fixed width.

LEB128 or Little Endian Base 128 is a variable-length code compression used to store integers in a small number of
bytes. LEB128 is used in the DWARF debug file format and the WebAssembly binary encoding for all integer literals.

References:
- https://en.wikipedia.org/wiki/LEB128
- https://dwarfstd.org/doc/DWARF5.pdf
- https://webassembly.github.io/spec/core/binary/values.html#integers

This module implements LEB128 encoding/decoding using the standard 1-byte block split into 1-bit for continuation and
7-bits for data, least significant group first. Values are bound to a width (8, 16, 32, 64 or 128 bits), encoding a
value out of range is a caller error, decoding bytes that do not fit the width is reported as `ValueOverflowError`.

>>> se = Serializer.build_bytes_serializer()
>>> se.write_bytes(b'test')  # writes 74657374
>>> encode_leb128(se, 0, width=32, signed=True)  # writes 00
>>> encode_leb128(se, 624485, width=32, signed=False)  # writes e58e26
>>> encode_leb128(se, -123456, width=32, signed=True)  # writes c0bb78
>>> bytes(se.finalize()).hex()
'7465737400e58e26c0bb78'

>>> data = bytes.fromhex('00 e58e26 c0bb78 74657374')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_leb128(de, width=32, signed=True)  # reads 00
Ok(DecodeResult(value=0, consumed=1))
>>> decode_leb128(de, width=32, signed=False)  # reads e58e26
Ok(DecodeResult(value=624485, consumed=3))
>>> decode_leb128(de, width=32, signed=True)  # reads c0bb78
Ok(DecodeResult(value=-123456, consumed=3))
>>> bytes(de.read_all().unwrap())  # reads 74657374
b'test'

>>> decode_leb128(Deserializer.build_bytes_deserializer(bytes.fromhex('ffff7f')), width=8, signed=False)
Err(ValueOverflowError('more than 2 groups for a 8-bit integer'))
>>> decode_leb128(Deserializer.build_bytes_deserializer(bytes.fromhex('80')), width=8, signed=False)
Err(OutOfDataError('not enough bytes to read'))
"""

from typing import NamedTuple

from leb128codec.serialization.deserializer import Deserializer
from leb128codec.serialization.exceptions import NonCanonicalError, ReadError, ValueOverflowError
from leb128codec.serialization.serializer import Serializer
from leb128codec.utils.result import Err, Ok, Result, propagate_result
from leb128codec.width import Width

CONTINUATION_BIT = 0b1000_0000
PAYLOAD_MASK = 0b0111_1111
SIGN_BIT = 0b0100_0000


class DecodeResult(NamedTuple):
    value: int
    # number of bytes read from the source, always the full encoding of `value`
    consumed: int


class _Groups(NamedTuple):
    accumulator: int
    shift: int
    last_byte: int


def encoded_size(value: int, *, signed: bool) -> int:
    """ Number of bytes of the canonical encoding of `value`.

    >>> [encoded_size(n, signed=False) for n in (0, 127, 128, 16383, 16384)]
    [1, 1, 2, 2, 3]
    >>> [encoded_size(n, signed=True) for n in (0, -1, 63, 64, -64, -65)]
    [1, 1, 1, 2, 1, 2]
    """
    if signed:
        # magnitude bits plus one sign bit
        bits = (value if value >= 0 else ~value).bit_length() + 1
    else:
        if value < 0:
            raise ValueError('cannot size value <0 as unsigned')
        bits = value.bit_length()
    return max(1, -(-bits // 7))


def _write_groups(serializer: Serializer, value: int, *, signed: bool) -> None:
    while True:
        byte = value & PAYLOAD_MASK
        # arithmetic shift, sign-extends negative values
        value >>= 7
        if signed:
            last = (value == 0 and (byte & SIGN_BIT) == 0) or (value == -1 and (byte & SIGN_BIT) != 0)
        else:
            last = value == 0
        if last:
            serializer.write_byte(byte)
            break
        serializer.write_byte(byte | CONTINUATION_BIT)


def encode_uleb128(serializer: Serializer, value: int, *, width: Width | int) -> None:
    """ Encodes an unsigned integer of the given width using ULEB128.

    Raises ValueError if the value is negative or does not fit the width, nothing is written in that case.
    """
    Width.parse(width).check_range(value, signed=False)
    _write_groups(serializer, value, signed=False)


def encode_sleb128(serializer: Serializer, value: int, *, width: Width | int) -> None:
    """ Encodes a signed integer of the given width using SLEB128.

    The last group is the first one whose bit 6 already predicts every higher bit, which makes the output minimal.
    """
    Width.parse(width).check_range(value, signed=True)
    _write_groups(serializer, value, signed=True)


def encode_leb128(serializer: Serializer, value: int, *, width: Width | int, signed: bool) -> None:
    """ Encodes an integer using LEB128.

    Caller must explicitly choose `signed=True` or `signed=False`.

    This module's docstring has more details on LEB128 and examples.
    """
    if signed:
        encode_sleb128(serializer, value, width=width)
    else:
        encode_uleb128(serializer, value, width=width)


@propagate_result
def _read_groups(deserializer: Deserializer, width: Width) -> Result[_Groups, ReadError]:
    """Read groups until one has the continuation bit clear, reading at most `width.max_groups` bytes."""
    accumulator = 0
    shift = 0
    for _ in range(width.max_groups):
        byte = deserializer.read_byte().unwrap_or_propagate()
        accumulator |= (byte & PAYLOAD_MASK) << shift
        shift += 7
        if (byte & CONTINUATION_BIT) == 0:
            return Ok(_Groups(accumulator, shift, byte))
    return Err(ValueOverflowError(f'more than {width.max_groups} groups for a {width.value}-bit integer'))


def _check_canonical(value: int, consumed: int, *, signed: bool) -> Result[None, ReadError]:
    expected = encoded_size(value, signed=signed)
    if consumed != expected:
        return Err(NonCanonicalError(f'value {value} uses {consumed} bytes but fits in {expected}'))
    return Ok(None)


@propagate_result
def decode_uleb128(
    deserializer: Deserializer,
    *,
    width: Width | int,
    strict: bool = False,
) -> Result[DecodeResult, ReadError]:
    """ Decodes a ULEB128-encoded integer of the given width.

    With `strict=True` encodings padded with redundant zero groups are rejected.
    """
    width = Width.parse(width)
    value, shift, _ = _read_groups(deserializer, width).unwrap_or_propagate()
    consumed = shift // 7
    if value > width.upper_bound(signed=False):
        return Err(ValueOverflowError(f'value does not fit in an unsigned {width.value}-bit integer'))
    if strict:
        _check_canonical(value, consumed, signed=False).unwrap_or_propagate()
    return Ok(DecodeResult(value, consumed))


@propagate_result
def decode_sleb128(
    deserializer: Deserializer,
    *,
    width: Width | int,
    strict: bool = False,
) -> Result[DecodeResult, ReadError]:
    """ Decodes a SLEB128-encoded integer of the given width.

    The groups are collected exactly like the unsigned case, then the value is sign-extended from bit 6 of the last
    group. With `strict=True` encodings padded with redundant sign groups are rejected.
    """
    width = Width.parse(width)
    value, shift, last_byte = _read_groups(deserializer, width).unwrap_or_propagate()
    consumed = shift // 7
    if (last_byte & SIGN_BIT) != 0:
        value |= -(1 << shift)
    if not width.fits(value, signed=True):
        return Err(ValueOverflowError(f'value does not fit in a signed {width.value}-bit integer'))
    if strict:
        _check_canonical(value, consumed, signed=True).unwrap_or_propagate()
    return Ok(DecodeResult(value, consumed))


def decode_leb128(
    deserializer: Deserializer,
    *,
    width: Width | int,
    signed: bool,
    strict: bool = False,
) -> Result[DecodeResult, ReadError]:
    """ Decodes a LEB128-encoded integer.

    Caller must explicitly choose `signed=True` or `signed=False`.

    Exactly the bytes of one value are consumed, so consecutive values can be decoded from the same deserializer. This
    module's docstring has more details on LEB128 and examples.
    """
    if signed:
        return decode_sleb128(deserializer, width=width, strict=strict)
    return decode_uleb128(deserializer, width=width, strict=strict)
