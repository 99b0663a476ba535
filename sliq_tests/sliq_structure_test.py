from dataclasses import dataclass

import suite
from dgen import from_schema
from sliq import P, empty, repeat

assert_that = suite.assert_that
assert_equal = suite.assert_equal

numbers = P([1, 2, 3, 4, 5])


@dataclass
class Point:
    x: int = 0
    y: int = 0


# chunk()

@suite.test("chunk splits into fixed-size groups with a shorter tail")
def test_chunk_basic():
    assert_equal(numbers.group.chunk(2).to.list(), [[1, 2], [3, 4], [5]])
    assert_equal(numbers.group.chunk(5).to.list(), [[1, 2, 3, 4, 5]])
    assert_equal(numbers.group.chunk(10).to.list(), [[1, 2, 3, 4, 5]])


@suite.test("chunk with a non-positive size or empty input is empty")
def test_chunk_degenerate():
    assert_equal(numbers.group.chunk(0).to.list(), [])
    assert_equal(numbers.group.chunk(-3).to.list(), [])
    assert_equal(empty().group.chunk(2).to.list(), [])


@suite.test("concatenating chunks rebuilds the input")
def test_chunk_concat_roundtrip():
    data = from_schema({'n': {'_qen_provider': 'int'}}, seed=9).take(17).to.list()
    for size in (1, 2, 3, 7, 17, 30):
        chunks = P(data).group.chunk(size).to.list()
        head, *rest = chunks
        assert_equal(P(head).set.concat(*rest).to.list(), data, f"size {size}")
        assert_that(all(len(c) == size for c in chunks[:-1]), f"full chunks for size {size}")


# compact()

@suite.test("compact removes zero values of each type")
def test_compact_mixed():
    data = P([0, 1, '', 'a', None, False, True, [], [0], {}, 0.0, 2.5])
    assert_equal(data.edit.compact().to.list(), [1, 'a', True, [0], 2.5])


@suite.test("compact on homogeneous numbers")
def test_compact_numeric():
    assert_equal(P([0, 1, 0, 2, 3, 0]).edit.compact().to.list(), [1, 2, 3])
    assert_equal(P([0.0, 1.5, -0.0]).edit.compact().to.list(), [1.5])
    result = P([0, 7]).edit.compact().to.list()
    assert_that(all(type(x) is int for x in result), "ints stay python ints")


@suite.test("compact treats default-constructed objects as zero")
def test_compact_objects():
    data = P([Point(), Point(1, 0), Point(0, 0), Point(0, 2)])
    assert_equal(data.edit.compact().to.list(), [Point(1, 0), Point(0, 2)])


@suite.test("compact with an explicit zero")
def test_compact_explicit_zero():
    assert_equal(P([-1, 0, None, -1, 3]).edit.compact(zero=-1).to.list(), [0, None, 3])


# concat()

@suite.test("concat joins several sequences without touching them")
def test_concat():
    a, b, c = [1, 2], [3], [4, 5]
    assert_equal(P(a).set.concat(b, c).to.list(), [1, 2, 3, 4, 5])
    assert_equal((a, b, c), ([1, 2], [3], [4, 5]), "inputs are unchanged")
    assert_equal(P(a).set.concat().to.list(), [1, 2], "no extra sequences")
    assert_equal(empty().set.concat([], [1]).to.list(), [1])


# replace() / replace_all() / repeat()

@suite.test("replace honours the replacement budget")
def test_replace():
    data = [1, 2, 1, 1, 3]
    assert_equal(P(data).edit.replace(1, 9, 2).to.list(), [9, 2, 9, 1, 3], "first two only")
    assert_equal(P(data).edit.replace(1, 9, 0).to.list(), data, "zero replaces nothing")
    assert_equal(P(data).edit.replace(1, 9, -1).to.list(), [9, 2, 9, 9, 3], "negative replaces all")
    assert_equal(P(data).edit.replace(1, 9, 10).to.list(), [9, 2, 9, 9, 3], "budget larger than matches")
    assert_equal(data, [1, 2, 1, 1, 3], "input is unchanged")


@suite.test("replace_all replaces every occurrence")
def test_replace_all():
    assert_equal(P(['a', 'b', 'a']).edit.replace_all('a', 'z').to.list(), ['z', 'b', 'z'])
    assert_equal(P([1, 2]).edit.replace_all(5, 0).to.list(), [1, 2])


@suite.test("repeat builds n copies")
def test_repeat():
    assert_equal(repeat('x', 3).to.list(), ['x', 'x', 'x'])
    assert_equal(repeat('x', 0).to.list(), [])
    assert_equal(repeat('x', -2).to.list(), [], "negative counts are empty")


# delete_at()

@suite.test("delete_at removes a half-open range")
def test_delete_at_range():
    assert_equal(numbers.edit.delete_at(1, 3).to.list(), [1, 4, 5])
    assert_equal(numbers.edit.delete_at(0).to.list(), [2, 3, 4, 5], "default end removes one item")
    assert_equal(numbers.edit.delete_at(4).to.list(), [1, 2, 3, 4], "last item")


@suite.test("delete_at clamps end and ignores invalid ranges")
def test_delete_at_bounds():
    assert_equal(numbers.edit.delete_at(3, 99).to.list(), [1, 2, 3], "end clamped to length")
    assert_equal(numbers.edit.delete_at(-1).to.list(), [1, 2, 3, 4, 5], "negative start is a no-op")
    assert_equal(numbers.edit.delete_at(5).to.list(), [1, 2, 3, 4, 5], "start at length is a no-op")
    assert_equal(numbers.edit.delete_at(2, 2).to.list(), [1, 2, 3, 4, 5], "empty range is a no-op")
    assert_equal(numbers.edit.delete_at(3, 1).to.list(), [1, 2, 3, 4, 5], "reversed range is a no-op")
    assert_equal(numbers.to.list(), [1, 2, 3, 4, 5], "the source enumerable is untouched")


# drop() / drop_right()

@suite.test("drop and drop_right remove items from either end")
def test_drop():
    assert_equal(numbers.edit.drop(2).to.list(), [3, 4, 5])
    assert_equal(numbers.edit.drop_right(2).to.list(), [1, 2, 3])
    assert_equal(numbers.edit.drop(5).to.list(), [])
    assert_equal(numbers.edit.drop_right(7).to.list(), [])


@suite.test("non-positive drop counts return the enumerable itself")
def test_drop_non_positive():
    assert_that(numbers.edit.drop(0) is numbers, "drop(0)")
    assert_that(numbers.edit.drop_right(-1) is numbers, "drop_right(-1)")


# drop_while() / drop_right_while()

@suite.test("drop_while removes the matching prefix only")
def test_drop_while():
    data = P([1, 2, 5, 1, 2])
    assert_equal(data.edit.drop_while(lambda x: x < 3).to.list(), [5, 1, 2])
    assert_equal(data.edit.drop_while(lambda x: True).to.list(), [])
    assert_equal(data.edit.drop_while(lambda x: False).to.list(), [1, 2, 5, 1, 2])


@suite.test("drop_right_while removes the matching suffix only")
def test_drop_right_while():
    data = P([1, 2, 5, 1, 2])
    assert_equal(data.edit.drop_right_while(lambda x: x < 3).to.list(), [1, 2, 5])
    assert_equal(data.edit.drop_right_while(lambda x: True).to.list(), [])
    assert_equal(empty().edit.drop_right_while(lambda x: True).to.list(), [])


if __name__ == "__main__":
    suite.main(title="sliq structure test")
