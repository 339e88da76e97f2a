from metasmt.types import ArrayType, Boolean


def test_boolean_prints():
    assert str(Boolean()) == "Boolean"


def test_booleans_are_equal():
    first = Boolean()
    second = Boolean()
    assert first == second
    assert len({first, second}) == 1


def test_boolean_differs_from_array():
    assert not (Boolean() == ArrayType(8, 4))
    assert not (ArrayType(8, 4) == Boolean())


def test_array_prints_widths():
    assert str(ArrayType(8, 4)) == "Array [8,4]"


def test_array_equality_compares_widths():
    assert ArrayType(8, 4) == ArrayType(8, 4)
    assert not (ArrayType(8, 4) == ArrayType(4, 8))
    assert not (ArrayType(8, 4) == ArrayType(8, 5))


def test_array_keeps_fields():
    array = ArrayType(elem_width=16, index_width=3)
    assert array.elem_width == 16
    assert array.index_width == 3