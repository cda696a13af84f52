import math
import string
import numpy as np
import suite
from seqops import functions as fn
from seqops import Sequence, S, s, TypeMismatch, LengthMismatch, IndexOutOfRange, PathNotFound

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


@test("map over a plain list")
def test_fn_map():
    assert_that(fn.map([9, 16, 25], math.sqrt).to.list() == [3, 4, 5], "square roots")
    assert_that(isinstance(fn.map([], str), Sequence), "returns a sequence")


@test("keep and discard over a range")
def test_fn_keep_discard():
    assert_that(fn.keep(range(11, 21), lambda x: x % 2 == 0).to.list() == [12, 14, 16, 18, 20], "evens")
    assert_that(fn.discard(range(11, 21), lambda x: x % 2 == 0).to.list() == [11, 13, 15, 17, 19], "odds")
    assert_that(fn.discard([1, 2], fn.negate(lambda x: x > 1)).to.list() == [2], "negate")


@test("map2 and pmap")
def test_fn_map2():
    assert_that(fn.map2([1, 2, 3], [1, 2, 3], pow).to.list() == [1, 4, 27], "powers")
    assert_that(fn.pmap([[1, 2], [3, 4], [5, 6]], lambda a, b, c: a * b * c).to.list() == [15, 48], "products")
    assert_that(fn.pmap([[1, 2]], lambda a: -a).to.list() == [-1, -2], "a single sequence")
    with raises(ValueError, "at least one sequence"):
        fn.pmap([], lambda *xs: xs)


@test("errors surface at the call")
def test_fn_eager_errors():
    with raises(LengthMismatch):
        fn.map2([1, 2, 3], [1, 2], pow)
    with raises(TypeMismatch):
        fn.map_typed([1, 2], str, int)
    with raises(TypeMismatch):
        fn.modify([1], float)
    with raises(IndexOutOfRange):
        fn.modify_at(range(3), [4], abs)
    with raises(LengthMismatch):
        fn.transpose([[1], [1, 2]])
    with raises(TypeMismatch):
        fn.flatten([[1], ['a']], 'int')
    with raises(PathNotFound):
        fn.pluck({'a': 1}, 'b')


@test("short factory aliases")
def test_factory_aliases():
    assert_that(s([1, 2]).to.list() == S([1, 2]).to.list() == [1, 2], "s and S build the same sequence")


@test("imap with names from a dict")
def test_fn_imap():
    result = fn.imap({'x': 1, 'y': 2}, lambda v, k: k * v).to.list()
    assert_that(result == ['x', 'yy'], f"got {result}")


@test("pluck letters")
def test_fn_pluck():
    letters = {'lowers': list(string.ascii_lowercase), 'uppers': list(string.ascii_uppercase)}
    assert_that(fn.pluck(letters, 'lowers', 2) == 'b', "second lowercase letter")


@test("aggregate predicates")
def test_fn_predicates():
    assert_that(fn.every([], lambda x: False), "vacuous truth")
    assert_that(not fn.some([], lambda x: True), "nothing on empty")
    assert_that(fn.none([1, 3], lambda x: x % 2 == 0), "no evens")
    assert_that(fn.has_element(['a', 'b'], 'b'), "membership")
    assert_that(fn.detect([3, 8, 9], lambda x: x > 5) == 8, "first match")
    assert_that(fn.detect_index([3, 8, 9], lambda x: x > 5) == 2, "first match position")
    assert_that(fn.detect_index([3, 8, 9], lambda x: x > 50) == 0, "not found")


@test("modify family")
def test_fn_modify():
    assert_that(fn.modify_if([1, -2, 3], lambda x: x < 0, abs).to.list() == [1, 2, 3], "modify_if")
    zeroed = fn.modify_at(range(11, 21), [1, 3, 5], lambda x: 0).to.list()
    assert_that(zeroed == [0, 12, 0, 14, 0, 16, 17, 18, 19, 20], f"modify_at: {zeroed}")
    first = fn.modify_at(list(range(11, 21)), np.int64(1), lambda x: 0).to.list()
    assert_that(first[0] == 0 and first[1:] == list(range(12, 21)), f"numpy position: {first}")


@test("reshaping and reducing")
def test_fn_reshape_reduce():
    assert_that(fn.flatten([[1, 2], [3]]).to.list() == [1, 2, 3], "flatten")
    assert_that(fn.transpose([[1, 2], [3, 4]]).to.plain() == [[1, 3], [2, 4]], "transpose")
    assert_that(fn.reduce([1, 2, 3], lambda a, b: a * b) == 6, "reduce")
    assert_that(fn.reduce([], lambda a, b: a * b, 1) == 1, "reduce with initial")
    assert_that(fn.accumulate([1, 2, 3], lambda a, b: a + b).to.list() == [1, 3, 6], "accumulate")
    assert_that(fn.compact([None, 1, []]).to.list() == [1], "compact")


@test("compose runs left to right")
def test_fn_compose():
    inc_then_double = fn.compose(lambda x: x + 1, lambda x: x * 2)
    assert_that(inc_then_double(3) == 8, "(3 + 1) * 2")
    first_name = fn.compose('names', 1)
    assert_that(first_name({'names': ['ann']}) == 'ann', "extractors compose too")
    add = fn.partial(lambda a, b: a + b, 10)
    assert_that(fn.map([1, 2], add).to.list() == [11, 12], "partial application")


@test("walk returns its input")
def test_fn_walk():
    seen = []
    result = fn.walk([1, 2], seen.append)
    assert_that(seen == [1, 2] and result.to.list() == [1, 2], "side effects run eagerly")


if __name__ == "__main__":
    suite.run(title="seqops free functions test suite")
