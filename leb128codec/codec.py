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
High-level LEB128 functions: integers to `bytes` and bytes (or any byte source) back to integers.

Widths, strictness and byte budgets default to the global settings when a call does not pass them. The settings are
only loaded when one of these defaults is needed.

>>> encode_unsigned(624485, width=32).hex()
'e58e26'
>>> encode_signed(-123456, width=32).hex()
'c0bb78'
>>> decode_unsigned(bytes.fromhex('e58e26') + b'test', width=32)
Ok(DecodeResult(value=624485, consumed=3))
>>> decode_signed(bytes.fromhex('c0bb78'), width=32)
Ok(DecodeResult(value=-123456, consumed=3))

Consecutive values are decoded from a shared deserializer:

>>> de = Deserializer.build_bytes_deserializer(encode_unsigned(300, width=16) + encode_signed(-2, width=16))
>>> decode_unsigned(de, width=16).unwrap()
DecodeResult(value=300, consumed=2)
>>> decode_signed(de, width=16).unwrap()
DecodeResult(value=-2, consumed=1)
"""

from typing import TypeAlias

from structlog import get_logger

from leb128codec.conf import get_global_settings
from leb128codec.serialization import Deserializer, ReadError, Serializer
from leb128codec.serialization.adapters import MaxBytesExceededError
from leb128codec.serialization.encoding.leb128 import DecodeResult, decode_leb128, encode_leb128
from leb128codec.serialization.types import Buffer
from leb128codec.utils.result import Result
from leb128codec.width import Width

logger = get_logger()

# A decoding source: raw bytes (anything `memoryview()` accepts) or an already built deserializer.
Source: TypeAlias = Buffer | Deserializer


def _resolve_width(width: Width | int | None) -> Width:
    return get_global_settings().default_width if width is None else Width.parse(width)


def _encode(value: int, *, width: Width | int | None, max_bytes: int | None, signed: bool) -> bytes:
    resolved_width = _resolve_width(width)
    if max_bytes is None:
        max_bytes = get_global_settings().DEFAULT_MAX_BYTES
    serializer = Serializer.build_bytes_serializer()
    try:
        encode_leb128(serializer.with_optional_max_bytes(max_bytes), value, width=resolved_width, signed=signed)
    except MaxBytesExceededError as e:
        raise ValueError(f'cannot encode more than {max_bytes} bytes') from e
    return bytes(serializer.finalize())


def encode_signed(value: int, *, width: Width | int | None = None, max_bytes: int | None = None) -> bytes:
    """
    Receive a signed integer and return its SLEB128-encoded bytes.

    Raises ValueError if the value does not fit the width or the encoding is longer than `max_bytes`.

    >>> encode_signed(0) == bytes([0x00])
    True
    >>> encode_signed(-1) == bytes([0x7F])
    True
    >>> encode_signed(-128, width=8) == bytes([0x80, 0x7F])
    True
    """
    return _encode(value, width=width, max_bytes=max_bytes, signed=True)


def encode_unsigned(value: int, *, width: Width | int | None = None, max_bytes: int | None = None) -> bytes:
    """
    Receive an unsigned integer and return its ULEB128-encoded bytes.

    Raises ValueError if the value does not fit the width or the encoding is longer than `max_bytes`.

    >>> encode_unsigned(0) == bytes([0x00])
    True
    >>> encode_unsigned(255, width=8) == bytes([0xFF, 0x01])
    True
    """
    return _encode(value, width=width, max_bytes=max_bytes, signed=False)


def _decode(
    source: Source,
    *,
    width: Width | int | None,
    strict: bool | None,
    max_bytes: int | None,
    signed: bool,
) -> Result[DecodeResult, ReadError]:
    resolved_width = _resolve_width(width)
    if strict is None:
        strict = get_global_settings().STRICT_DECODING
    if max_bytes is None:
        max_bytes = get_global_settings().DEFAULT_MAX_BYTES
    if isinstance(source, Deserializer):
        deserializer = source
    else:
        deserializer = Deserializer.build_bytes_deserializer(source)
    result = decode_leb128(
        deserializer.with_optional_max_bytes(max_bytes),
        width=resolved_width,
        signed=signed,
        strict=strict,
    )
    return result.inspect_err(
        lambda e: logger.debug('leb128 decode failed', error=repr(e), width=resolved_width.value, signed=signed)
    )


def decode_signed(
    source: Source,
    *,
    width: Width | int | None = None,
    strict: bool | None = None,
    max_bytes: int | None = None,
) -> Result[DecodeResult, ReadError]:
    """
    Decode one SLEB128-encoded signed integer from the start of `source`.

    Returns `Ok(DecodeResult(value, consumed))`, or `Err` with exactly one error: `ValueOverflowError`,
    `OutOfDataError`, `NonCanonicalError` (strict only), `MaxBytesExceededError` or the `OSError` of the source.

    >>> decode_signed(bytes([0x7F]))
    Ok(DecodeResult(value=-1, consumed=1))
    >>> decode_signed(bytes([0xFF, 0x00]), width=8)
    Ok(DecodeResult(value=127, consumed=2))
    >>> decode_signed(bytes([0xFF, 0x01]), width=8)
    Err(ValueOverflowError('value does not fit in a signed 8-bit integer'))
    """
    return _decode(source, width=width, strict=strict, max_bytes=max_bytes, signed=True)


def decode_unsigned(
    source: Source,
    *,
    width: Width | int | None = None,
    strict: bool | None = None,
    max_bytes: int | None = None,
) -> Result[DecodeResult, ReadError]:
    """
    Decode one ULEB128-encoded unsigned integer from the start of `source`.

    >>> decode_unsigned(bytes([0x80, 0x01]))
    Ok(DecodeResult(value=128, consumed=2))
    >>> decode_unsigned(bytes([0x80, 0x00]), strict=True)
    Err(NonCanonicalError('value 0 uses 2 bytes but fits in 1'))
    >>> decode_unsigned(bytes([0xE5, 0x8E, 0x26]), max_bytes=2)
    Err(MaxBytesExceededError())
    """
    return _decode(source, width=width, strict=strict, max_bytes=max_bytes, signed=False)
