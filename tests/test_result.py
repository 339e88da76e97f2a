import pytest

from metasmt.result import ResultWrapper


def check_xxx(rw):
    assert rw.tribool() is None
    assert bool(rw) is False
    assert str(rw) == "XXX"
    assert rw.to_int(32, signed=True) == 0
    assert rw.to_int(32) == 0
    assert rw.to_int(64) == 0
    assert rw.to_bits() == [False, False, False]
    assert rw.to_tribools() == [None, None, None]
    assert rw.to_int(8) == 0
    assert rw.to_int(8, signed=True) == 0


def check_0_in_8bit(rw):
    assert rw.tribool() is False
    assert bool(rw) is False
    assert str(rw) == "00000000"
    assert rw.to_int(32, signed=True) == 0
    assert rw.to_int(32) == 0
    assert rw.to_int(64) == 0
    assert rw.to_bits() == [False] * 8
    assert rw.to_tribools() == [False] * 8
    assert rw.to_int(8) == 0
    assert rw.to_int(8, signed=True) == 0


def check_1_in_8bit(rw):
    expected = [True] + [False] * 7
    assert rw.tribool() is True
    assert bool(rw) is True
    assert str(rw) == "00000001"
    assert rw.to_int(32, signed=True) == 1
    assert rw.to_int(32) == 1
    assert rw.to_int(64) == 1
    assert rw.to_bits() == expected
    assert rw.to_tribools() == expected
    assert rw.to_int(8) == 1
    assert rw.to_int(8, signed=True) == 1


def check_128_in_8bit(rw):
    expected = [False] * 7 + [True]
    assert rw.tribool() is True
    assert bool(rw) is True
    assert str(rw) == "10000000"
    assert rw.to_bits() == expected
    assert rw.to_tribools() == expected
    assert rw.to_int(8) == 128
    assert rw.to_int(8, signed=True) == -128
    assert rw.to_int(32, signed=True) == -128
    assert rw.to_int(32) == 128
    assert rw.to_int(64) == 128


def check_13_in_8bit(rw):
    expected = [True, False, True, True, False, False, False, False]
    assert rw.tribool() is True
    assert bool(rw) is True
    assert str(rw) == "00001101"
    assert rw.to_bits() == expected
    assert rw.to_tribools() == expected
    assert rw.to_int(8) == 13
    assert rw.to_int(8, signed=True) == 13
    assert rw.to_int(32, signed=True) == 13
    assert rw.to_int(32) == 13
    assert rw.to_int(64) == 13


def check_true(rw):
    assert rw.tribool() is True
    assert bool(rw) is True
    assert str(rw) == "1"
    assert rw.to_bits() == [True]
    assert rw.to_tribools() == [True]
    assert rw.to_int(32, signed=True) == -1
    assert rw.to_int(32) == 1
    assert rw.to_int(64) == 1
    assert rw.to_int(8) == 1
    assert rw.to_int(8, signed=True) == -1


def check_false(rw):
    assert rw.tribool() is False
    assert bool(rw) is False
    assert str(rw) == "0"
    assert rw.to_bits() == [False]
    assert rw.to_tribools() == [False]
    assert rw.to_int(8) == 0
    assert rw.to_int(8, signed=True) == 0
    assert rw.to_int(32, signed=True) == 0
    assert rw.to_int(32) == 0
    assert rw.to_int(64) == 0


def test_from_string():
    rw = ResultWrapper("1101")
    assert str(rw) == "1101"
    assert rw.to_int(32) == 13
    assert rw.to_int(64) == 13
    assert int(rw) == 13
    assert rw.to_int(32, signed=True) == -3

    check_1_in_8bit(ResultWrapper("00000001"))
    check_128_in_8bit(ResultWrapper("10000000"))
    check_13_in_8bit(ResultWrapper("00001101"))
    check_0_in_8bit(ResultWrapper("00000000"))
    check_true(ResultWrapper("1"))
    check_false(ResultWrapper("0"))
    check_xxx(ResultWrapper("XXX"))
    check_xxx(ResultWrapper("xxx"))
    check_xxx(ResultWrapper("XxX"))
    check_xxx(ResultWrapper("xXx"))


def test_from_bool():
    check_true(ResultWrapper(ResultWrapper(True)))
    check_false(ResultWrapper(ResultWrapper(False)))


@pytest.mark.parametrize(
    "text, expected",
    [("1", True), ("0", False), ("X", None), ("x", None)],
)
def test_tribool_from_string_and_char(text, expected):
    assert ResultWrapper(text).tribool() is expected


def test_minus_one_from_string4():
    assert ResultWrapper("1111").to_int(32, signed=True) == -1


def test_minus_one_from_string8():
    assert ResultWrapper("11111111").to_int(8, signed=True) == -1


def test_minus_one_from_string32():
    assert ResultWrapper("1" * 32).to_int(32, signed=True) == -1


def test_from_bitset_value():
    rw = ResultWrapper(255, 8)
    assert rw.to_int(32) == 255
    assert rw.to_int(64) == 255

    check_1_in_8bit(ResultWrapper(1, 8))
    check_128_in_8bit(ResultWrapper(128, 8))
    check_13_in_8bit(ResultWrapper(13, 8))
    check_0_in_8bit(ResultWrapper(0, 8))
    check_true(ResultWrapper(1, 1))
    check_false(ResultWrapper(0, 1))


def test_minus_one_from_bitset_value():
    assert ResultWrapper(-1, 8).to_int(32, signed=True) == -1


def test_negative_from_bitset_value():
    assert ResultWrapper(-65, 8).to_int(32, signed=True) == -65


def test_from_vector_bool():
    vec = [False] * 8
    vec[0] = True
    check_1_in_8bit(ResultWrapper(vec))

    vec[0] = False
    vec[7] = True
    check_128_in_8bit(ResultWrapper(vec))

    vec[0] = True
    vec[2] = True
    vec[3] = True
    vec[7] = False
    check_13_in_8bit(ResultWrapper(vec))

    check_0_in_8bit(ResultWrapper([False] * 8))
    check_true(ResultWrapper([True]))
    check_false(ResultWrapper([False]))


def test_from_vector_tribool():
    vec = [False] * 8
    vec[0] = True
    check_1_in_8bit(ResultWrapper(vec))

    vec[0] = False
    vec[7] = True
    check_128_in_8bit(ResultWrapper(vec))

    vec[0] = True
    vec[2] = True
    vec[3] = True
    vec[7] = False
    check_13_in_8bit(ResultWrapper(vec))
    check_true(ResultWrapper([True]))
    check_false(ResultWrapper([False]))

    check_xxx(ResultWrapper([None, None, None]))


def test_from_integral_value_and_width():
    check_1_in_8bit(ResultWrapper(1, 8))
    check_128_in_8bit(ResultWrapper(128, 8))
    check_13_in_8bit(ResultWrapper(13, 8))
    check_0_in_8bit(ResultWrapper(0, 8))
    check_true(ResultWrapper(1, 1))
    check_false(ResultWrapper(0, 1))


UINT64_MAX = 2**64 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT32_MIN = -(2**31)


@pytest.mark.parametrize(
    "value, width, expected",
    [
        (UINT64_MAX, 64, "1" * 64),
        (UINT32_MAX, 64, "0" * 32 + "1" * 32),
        (UINT64_MAX, 32, "1" * 32),
        (INT64_MIN, 64, "1" + "0" * 63),
        (INT32_MIN, 64, "1" * 33 + "0" * 31),
        (INT64_MIN, 32, "0" * 32),
    ],
)
def test_from_integer_string_and_bits(value, width, expected):
    rw = ResultWrapper(value, width)
    assert str(rw) == expected
    bits = [c == "1" for c in reversed(expected)]
    assert rw.to_bits() == bits
    assert rw.to_tribools() == bits


def test_from_uint64_max_in_64_bits():
    rw = ResultWrapper(UINT64_MAX, 64)
    assert rw.tribool() is True
    assert bool(rw) is True
    assert rw.to_int(16) == 0xFFFF
    assert rw.to_int(32) == UINT32_MAX
    assert rw.to_int(64) == UINT64_MAX


def test_from_uint32_max_in_64_bits():
    rw = ResultWrapper(UINT32_MAX, 64)
    assert rw.tribool() is True
    assert rw.to_int(16) == 0xFFFF
    assert rw.to_int(32) == UINT32_MAX
    assert rw.to_int(64) == UINT32_MAX


def test_from_int64_min_in_64_bits():
    rw = ResultWrapper(INT64_MIN, 64)
    assert rw.tribool() is True
    assert rw.to_int(64, signed=True) == INT64_MIN


def test_from_int32_min_in_64_bits():
    rw = ResultWrapper(INT32_MIN, 64)
    assert bool(rw) is True
    assert rw.to_int(32, signed=True) == INT32_MIN
    assert rw.to_int(64, signed=True) == INT32_MIN


def test_default_is_dont_care():
    rw = ResultWrapper()
    assert str(rw) == "X"
    assert rw.tribool() is None
    assert bool(rw) is False


def test_throw_if_x():
    with pytest.raises(ValueError):
        ResultWrapper("10X").throw_if_x()
    rw = ResultWrapper("101")
    assert rw.throw_if_x() is rw


def test_rand_x_fills_unknown_bits():
    rw = ResultWrapper("X1").rand_x(lambda: True)
    assert rw.to_int() == 3
    assert bool(ResultWrapper("X").rand_x(lambda: True)) is True
    assert bool(ResultWrapper("X").rand_x(lambda: False)) is False


def test_rand_x_reset_to_zero_fill():
    rw = ResultWrapper("X1").rand_x(lambda: True).rand_x()
    assert rw.to_int() == 1


def test_integer_needs_width():
    with pytest.raises(TypeError):
        ResultWrapper(5)


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        ResultWrapper(5, -1)


def test_unsupported_value_rejected():
    with pytest.raises(TypeError):
        ResultWrapper(1.5)


def test_to_int_rejects_non_positive_bits():
    with pytest.raises(ValueError):
        ResultWrapper("1").to_int(0)