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

from leb128codec.width import Width


def _do_round_trip_test_with_size(n: int, encoded_size: int, signed: bool, width: Width = Width.W128) -> None:
    from leb128codec.serialization import Deserializer, Serializer
    from leb128codec.serialization.encoding.leb128 import decode_leb128, encode_leb128
    se = Serializer.build_bytes_serializer()
    encode_leb128(se, n, width=width, signed=signed)
    encoded_n = bytes(se.finalize())
    assert len(encoded_n) == encoded_size
    de = Deserializer.build_bytes_deserializer(encoded_n)
    assert decode_leb128(de, width=width, signed=signed, strict=True).unwrap() == (n, encoded_size)
    assert de.is_empty()


def _narrowest_width(n: int, signed: bool) -> Width:
    return next(width for width in Width if width.fits(n, signed=signed))


EXAMPLES_SIGNED_BY_SIZE = {
    1: [
        0,
        1,
        2,
        3,
        4,
        50,
        62,
        63,
        -1,
        -2,
        -3,
        -63,
        -64,
    ],
    2: [
        64,
        65,
        66,
        127,
        128,
        1000,
        3001,
        8190,
        8191,
        -65,
        -66,
        -67,
        -128,
        -3000,
        -8191,
        -8192,
    ],
    3: [
        8192,
        8193,
        9000,
        32767,
        100000,
        1048574,
        1048575,
        -8193,
        -8194,
        -32768,
        -100000,
        -1048575,
        -1048576,
    ],
}

EXAMPLES_UNSIGNED_BY_SIZE = {
    1: [
        0,
        1,
        2,
        3,
        4,
        50,
        63,
        64,
        65,
        126,
        127,
    ],
    2: [
        128,
        129,
        255,
        1000,
        3001,
        8190,
        8191,
        8192,
        16382,
        16383,
    ],
    3: [
        16384,
        65535,
        100000,
        1048574,
        1048575,
        1048576,
        2097150,
        2097151,
    ],
}


def gen_signed_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_SIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases, 18 groups is the most a signed 128-bit value takes
    for size in range(4, 19):
        n_pos_lo = (1 << (7 * (size - 1) - 1))
        n_pos_hi = (1 << (7 * size - 1)) - 1
        n_neg_lo = -(1 << (7 * size - 1))
        n_neg_hi = -(1 << (7 * (size - 1) - 1)) - 1
        test_cases.append((n_pos_lo, size))
        test_cases.append((n_pos_hi, size))
        test_cases.append((n_neg_lo, size))
        test_cases.append((n_neg_hi, size))
    # the extremes of every width
    for width in Width:
        test_cases.append((width.upper_bound(signed=True), width.max_groups))
        test_cases.append((width.lower_bound(signed=True), width.max_groups))
    return test_cases


def gen_unsigned_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_UNSIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases
    for size in range(4, 19):
        n_lo = 1 << (7 * (size - 1))
        n_hi = (1 << (7 * size)) - 1
        test_cases.append((n_lo, size))
        test_cases.append((n_hi, size))
    for width in Width:
        test_cases.append((width.upper_bound(signed=False), width.max_groups))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_signed_test_cases())
def test_signed_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, True)


@pytest.mark.parametrize('n, encoded_size', gen_unsigned_test_cases())
def test_unsigned_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, False)


@pytest.mark.parametrize('n, encoded_size', gen_signed_test_cases())
def test_signed_round_trip_with_narrowest_width(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, True, _narrowest_width(n, True))


@pytest.mark.parametrize('n, encoded_size', gen_unsigned_test_cases())
def test_unsigned_round_trip_with_narrowest_width(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, False, _narrowest_width(n, False))


@pytest.mark.parametrize('n, encoded_size', gen_signed_test_cases())
def test_encoded_size_signed(n, encoded_size):
    from leb128codec.serialization.encoding.leb128 import encoded_size as size_of
    assert size_of(n, signed=True) == encoded_size


@pytest.mark.parametrize('n, encoded_size', gen_unsigned_test_cases())
def test_encoded_size_unsigned(n, encoded_size):
    from leb128codec.serialization.encoding.leb128 import encoded_size as size_of
    assert size_of(n, signed=False) == encoded_size


def test_encoded_size_rejects_negative_unsigned():
    from leb128codec.serialization.encoding.leb128 import encoded_size
    with pytest.raises(ValueError) as e:
        encoded_size(-1, signed=False)
    assert str(e.value) == 'cannot size value <0 as unsigned'


def test_encode_out_of_range_writes_nothing():
    from leb128codec.serialization import Serializer
    from leb128codec.serialization.encoding.leb128 import encode_leb128
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_leb128(se, 256, width=8, signed=False)
    with pytest.raises(ValueError):
        encode_leb128(se, 128, width=8, signed=True)
    assert se.cur_pos() == 0
    assert bytes(se.finalize()) == b''
