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

import pytest

from leb128codec import (
    DecodeResult,
    Deserializer,
    MaxBytesExceededError,
    NonCanonicalError,
    OutOfDataError,
    ValueOverflowError,
    Width,
    decode_signed,
    decode_unsigned,
    encode_signed,
    encode_unsigned,
)
from leb128codec.utils.result import Ok


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (2, bytes([2])),
        (-2, bytes([0x7e])),
        (63, bytes([63])),
        (64, bytes([64 + 0x80, 0x00])),
        (-64, bytes([64])),
        (-65, bytes([0xbf, 0x7f])),
        (127, bytes([127 + 0x80, 0])),
        (-127, bytes([1 + 0x80, 0x7f])),
        (128, bytes([0 + 0x80, 1])),
        (-128, bytes([0 + 0x80, 0x7f])),
        (129, bytes([1 + 0x80, 1])),
        (-129, bytes([0x7f + 0x80, 0x7e])),
    ],
)
def test_dwarf_examples_signed(value: int, expected: bytes) -> None:
    """
    Examples from the DWARF 5 standard, section 7.6, table 7.8.
    https://dwarfstd.org/doc/DWARF5.pdf
    """
    assert encode_signed(value) == expected
    assert decode_signed(expected) == Ok(DecodeResult(value, len(expected)))


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (2, bytes([2])),
        (63, bytes([63])),
        (64, bytes([64])),
        (127, bytes([127])),
        (128, bytes([0 + 0x80, 1])),
        (129, bytes([1 + 0x80, 1])),
        (12857, bytes([57 + 0x80, 100])),
    ],
)
def test_dwarf_examples_unsigned(value: int, expected: bytes) -> None:
    """
    Examples from the DWARF 5 standard, section 7.6, table 7.7.
    https://dwarfstd.org/doc/DWARF5.pdf
    """
    assert encode_unsigned(value) == expected
    assert decode_unsigned(expected) == Ok(DecodeResult(value, len(expected)))


@pytest.mark.parametrize(
    ['value', 'width', 'expected'],
    [
        (0, 8, '00'),
        (255, 8, 'ff01'),
        (65535, 16, 'ffff03'),
        (2**32 - 1, 32, 'ffffffff0f'),
        (2**64 - 1, 64, 'ffffffffffffffffff01'),
        (2**128 - 1, 128, 'ff' * 18 + '03'),
    ],
)
def test_unsigned_width_extremes(value: int, width: int, expected: str) -> None:
    encoded = encode_unsigned(value, width=width)
    assert encoded.hex() == expected
    assert len(encoded) <= Width(width).max_groups
    assert decode_unsigned(encoded, width=width, strict=True).unwrap().value == value


@pytest.mark.parametrize(
    ['value', 'width', 'expected'],
    [
        (-1, 8, '7f'),
        (127, 8, 'ff00'),
        (-128, 8, '807f'),
        (-(2**15), 16, '80807e'),
        (2**31 - 1, 32, 'ffffffff07'),
        (-(2**31), 32, '8080808078'),
        (2**63 - 1, 64, 'ffffffffffffffffff00'),
        (-(2**63), 64, '8080808080808080807f'),
        (-(2**127), 128, '80' * 18 + '7e'),
    ],
)
def test_signed_width_extremes(value: int, width: int, expected: str) -> None:
    encoded = encode_signed(value, width=width)
    assert encoded.hex() == expected
    assert len(encoded) <= Width(width).max_groups
    assert decode_signed(encoded, width=width, strict=True).unwrap().value == value


def test_zero_and_minus_one() -> None:
    assert encode_unsigned(0) == b'\x00'
    assert encode_signed(0) == b'\x00'
    assert encode_signed(-1) == b'\x7f'
    assert decode_signed(b'\x7f') == Ok(DecodeResult(-1, 1))


def test_decode_ignores_trailing_bytes() -> None:
    assert decode_unsigned(bytes.fromhex('e58e26') + b'test', width=32) == Ok(DecodeResult(624485, 3))


def test_sequential_values_from_one_deserializer() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0xac, 0x02, 0x7e]))
    assert decode_unsigned(de, width=16) == Ok(DecodeResult(300, 2))
    assert decode_signed(de, width=16) == Ok(DecodeResult(-2, 1))
    assert isinstance(decode_signed(de, width=16).unwrap_err(), OutOfDataError)


def test_too_many_groups_overflow() -> None:
    err = decode_unsigned(bytes([0xff, 0xff, 0x7f]), width=8).unwrap_err()
    assert isinstance(err, ValueOverflowError)
    assert isinstance(err, OverflowError)
    assert str(err) == 'more than 2 groups for a 8-bit integer'


@pytest.mark.parametrize(
    ['data', 'width', 'signed'],
    [
        (bytes([0x80, 0x02]), 8, False),
        (bytes([0xff, 0x03]), 8, False),
        (bytes([0xff, 0x01]), 8, True),
        (bytes([0x80, 0x7e]), 8, True),
        (bytes([0xff, 0xff, 0x04]), 16, False),
        (bytes([0xff] * 9 + [0x02]), 64, False),
        (bytes([0x80] * 9 + [0x7e]), 64, True),
        (bytes([0xff] * 18 + [0x04]), 128, False),
    ],
)
def test_value_out_of_width_overflow(data: bytes, width: int, signed: bool) -> None:
    decode = decode_signed if signed else decode_unsigned
    err = decode(data, width=width).unwrap_err()
    assert isinstance(err, ValueOverflowError)
    kind = 'signed' if signed else 'unsigned'
    assert str(err).startswith('value does not fit in a') and f'{kind} {width}-bit' in str(err)


def test_truncated() -> None:
    assert isinstance(decode_unsigned(bytes([0x80]), width=8).unwrap_err(), OutOfDataError)
    assert isinstance(decode_signed(b'').unwrap_err(), OutOfDataError)


def test_decode_accepts_bytes_like_sources() -> None:
    data = bytes.fromhex('c0bb78')
    for source in (data, bytearray(data), memoryview(data)):
        assert decode_signed(source, width=32) == Ok(DecodeResult(-123456, 3))


@pytest.mark.parametrize(
    ['data', 'signed', 'value'],
    [
        (bytes([0x80, 0x00]), False, 0),
        (bytes([0x81, 0x80, 0x00]), False, 1),
        (bytes([0xff, 0x7f]), True, -1),
        (bytes([0x80, 0x00]), True, 0),
        (bytes([0xc0, 0x00]), True, 64),
        (bytes([0xff, 0x00]), True, 127),
    ],
)
def test_padded_encodings(data: bytes, signed: bool, value: int) -> None:
    decode = decode_signed if signed else decode_unsigned
    # padded encodings are accepted unless decoding is strict
    result = decode(data, width=32)
    assert result == Ok(DecodeResult(value, len(data)))
    canonical_len = len(encode_signed(value) if signed else encode_unsigned(value))
    if canonical_len == len(data):
        assert decode(data, width=32, strict=True) == result
    else:
        err = decode(data, width=32, strict=True).unwrap_err()
        assert isinstance(err, NonCanonicalError)
        assert str(err) == f'value {value} uses {len(data)} bytes but fits in {canonical_len}'


@pytest.mark.parametrize(
    ['value', 'width', 'message'],
    [
        (256, 8, '256 is above upper bound of unsigned 8-bit integers'),
        (-1, 64, '-1 is below lower bound of unsigned 64-bit integers'),
        (2**64, 64, '18446744073709551616 is above upper bound of unsigned 64-bit integers'),
    ],
)
def test_encode_unsigned_out_of_range(value: int, width: int, message: str) -> None:
    with pytest.raises(ValueError) as e:
        encode_unsigned(value, width=width)
    assert str(e.value) == message


@pytest.mark.parametrize(
    ['value', 'width', 'message'],
    [
        (128, 8, '128 is above upper bound of signed 8-bit integers'),
        (-129, 8, '-129 is below lower bound of signed 8-bit integers'),
        (2**127, 128, f'{2**127} is above upper bound of signed 128-bit integers'),
    ],
)
def test_encode_signed_out_of_range(value: int, width: int, message: str) -> None:
    with pytest.raises(ValueError) as e:
        encode_signed(value, width=width)
    assert str(e.value) == message


def test_encode_non_integers() -> None:
    with pytest.raises(TypeError):
        encode_unsigned(1.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encode_signed(True)


def test_unsupported_width() -> None:
    with pytest.raises(ValueError) as e:
        encode_unsigned(1, width=24)
    assert str(e.value) == 'unsupported width: 24 (supported: 8, 16, 32, 64, 128)'
    with pytest.raises(ValueError):
        decode_signed(b'\x00', width=7)


@pytest.mark.parametrize(
    ['value', 'max_bytes'],
    [
        (2, 0),
        (-2, 0),
        (63, 0),
        (-64, 0),
        (-65, 1),
        (64, 1),
        (127, 1),
        (-127, 1),
        (128, 1),
        (-128, 1),
        (129, 1),
        (-129, 1),
        (-8192, 1),
        (8191, 1),
        (8192, 2),
        (-8193, 2),
    ],
)
def test_encode_max_bytes_dwarf_examples_signed(value: int, max_bytes: int) -> None:
    with pytest.raises(ValueError) as e:
        encode_signed(value, max_bytes=max_bytes)
    assert str(e.value) == f'cannot encode more than {max_bytes} bytes'
    assert isinstance(e.value.__cause__, MaxBytesExceededError)


@pytest.mark.parametrize(
    ['value', 'max_bytes'],
    [
        (2, 0),
        (64, 0),
        (65, 0),
        (127, 0),
        (128, 1),
        (129, 1),
        (16383, 1),
        (16384, 2),
    ],
)
def test_encode_max_bytes_dwarf_examples_unsigned(value: int, max_bytes: int) -> None:
    with pytest.raises(ValueError) as e:
        encode_unsigned(value, max_bytes=max_bytes)
    assert str(e.value) == f'cannot encode more than {max_bytes} bytes'


@pytest.mark.parametrize(
    ['buf', 'max_bytes'],
    [
        (bytes([2]), 0),
        (bytes([0x7e]), 0),
        (bytes([127 + 0x80, 0]), 1),
        (bytes([1 + 0x80, 0x7f]), 1),
        (bytes([0 + 0x80, 1]), 1),
        (bytes([0 + 0x80, 0x7f]), 1),
        (bytes([1 + 0x80, 1]), 1),
        (bytes([0x7f + 0x80, 0x7e]), 1),
    ],
)
def test_decode_max_bytes_dwarf_examples_signed(buf: bytes, max_bytes: int) -> None:
    assert isinstance(decode_signed(buf, max_bytes=max_bytes).unwrap_err(), MaxBytesExceededError)
    assert decode_signed(buf, max_bytes=max_bytes + 1).is_ok()


@pytest.mark.parametrize(
    ['buf', 'max_bytes'],
    [
        (bytes([2]), 0),
        (bytes([63]), 0),
        (bytes([64]), 0),
        (bytes([127]), 0),
        (bytes([0 + 0x80, 1]), 1),
        (bytes([1 + 0x80, 1]), 1),
        (bytes([0xff, 0x7f]), 1),
        (bytes([0x80, 0x80, 0x01]), 2),
    ],
)
def test_decode_max_bytes_dwarf_examples_unsigned(buf: bytes, max_bytes: int) -> None:
    assert isinstance(decode_unsigned(buf, max_bytes=max_bytes).unwrap_err(), MaxBytesExceededError)
    assert decode_unsigned(buf, max_bytes=max_bytes + 1).is_ok()
