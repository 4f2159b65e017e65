import suite
from seqgen import from_schema
from linqlite import L, operations as ops

assert_that = suite.assert_that

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 5}),
    'name': 'word',
    'city': {'_gen': 'choice', 'from': ['ny', 'la', 'chi']},
}


def mod3(x):
    # deliberately collides: 1, 4, 7 share a key
    return x % 3


# --- distinct ---

@suite.test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    assert_that(list(ops.distinct([1, 2, 1, 3, 2, 4])) == [1, 2, 3, 4], "first occurrences in order")
    assert_that(list(ops.distinct([])) == [], "distinct of empty is empty")
    assert_that(list(ops.distinct([5, 5, 5])) == [5], "all-equal collapses to one")


@suite.test("distinct with a comparer works on unhashable records")
def test_distinct_comparer():
    people = from_schema(person_schema, seed=42).take(20)
    unique = list(ops.distinct(people, lambda a, b: a['city'] == b['city']))
    cities = [p['city'] for p in unique]
    assert_that(len(cities) == len(set(cities)), f"each city should appear once: {cities}")
    assert_that(len(cities) <= 3, "there are only three cities")


@suite.test("distinct and distinct_hash agree when the hash is injective")
def test_distinct_agreement():
    samples = [[], [1], [3, 1, 3, 2, 1], [0, 0, 0, 9, 8, 9, -1, -1], list(range(10)) * 2]
    for data in samples:
        by_comparer = list(ops.distinct(data))
        by_hash = list(ops.distinct_hash(data, lambda x: x))
        assert_that(by_comparer == by_hash, f"variants disagree on {data}: {by_comparer} vs {by_hash}")


@suite.test("the default hash keeps values whose builtin hashes collide")
def test_default_hash_keeps_distinct_values():
    # hash(-1) == hash(-2) in cpython, and 2**61 - 1 hashes like 0
    assert_that(list(ops.distinct_hash([-1, -2])) == [-1, -2], "-1 and -2 are different values")
    assert_that(list(ops.distinct_hash([0, 2 ** 61 - 1])) == [0, 2 ** 61 - 1], "0 and 2**61-1 are different values")
    assert_that(list(ops.except_hash([-2], [-1])) == [-2], "-1 should not exclude -2")
    assert_that(list(ops.intersect_hash([-2], [-1])) == [], "-1 and -2 have nothing in common")
    assert_that(list(ops.union_hash([-1], [-2])) == [-1, -2], "union keeps both")


@suite.test("distinct and distinct_hash agree with the default hash")
def test_distinct_agreement_default_hash():
    data = [3, -1, -2, 3, -2, 0, 2 ** 61 - 1, -1]
    assert_that(list(ops.distinct(data)) == list(ops.distinct_hash(data)), "default variants should agree")


@suite.test("distinct_hash coalesces colliding hashes")
def test_distinct_hash_collision():
    result = list(ops.distinct_hash([1, 4, 2, 7, 3], mod3))
    assert_that(result == [1, 2, 3], f"4 and 7 collide with 1 and should vanish: {result}")


@suite.test("distinct state is per traversal")
def test_distinct_retraversal():
    stage = ops.distinct([1, 1, 2])
    assert_that(list(stage) == [1, 2] and list(stage) == [1, 2], "seen list should not leak between traversals")


# --- except ---

@suite.test("except_ keeps elements of first missing from second")
def test_except():
    assert_that(list(ops.except_([1, 2, 3, 4], [2, 4])) == [1, 3], "should remove 2 and 4")
    assert_that(list(ops.except_([1, 2], [])) == [1, 2], "nothing to exclude")
    assert_that(list(ops.except_hash([1, 2, 3, 4], [2, 4])) == [1, 3], "hash variant should agree")


@suite.test("except_hash excludes anything sharing a hash")
def test_except_hash_collision():
    assert_that(list(ops.except_hash([1, 2, 3, 4, 5], [4], mod3)) == [2, 3, 5], "1 collides with 4")


# --- intersect ---

@suite.test("intersect keeps first-sequence order")
def test_intersect():
    assert_that(list(ops.intersect([4, 2, 3, 1], [1, 2, 3, 4])) == [4, 2, 3, 1], "order from first")
    assert_that(list(ops.intersect([1, 2, 3], [7, 8])) == [], "no common elements")
    assert_that(list(ops.intersect_hash([1, 2, 3, 4], [2, 4, 6])) == [2, 4], "hash variant should agree")


@suite.test("intersect with a case-insensitive comparer")
def test_intersect_comparer():
    result = list(ops.intersect(['Apple', 'pear', 'FIG'], ['fig', 'apple'], lambda a, b: a.lower() == b.lower()))
    assert_that(result == ['Apple', 'FIG'], f"unexpected intersection: {result}")


# --- union ---

@suite.test("union yields first then unseen elements of second")
def test_union():
    assert_that(list(ops.union([3, 1, 2], [2, 4, 1])) == [3, 1, 2, 4], "first order then new from second")
    assert_that(list(ops.union([1, 1], [1])) == [1], "duplicates inside first are removed too")
    assert_that(list(ops.union([], [1, 2])) == [1, 2], "empty first gives second")
    assert_that(list(ops.union_hash([3, 1, 2], [2, 4, 1])) == [3, 1, 2, 4], "hash variant should agree")


@suite.test("union does not pull second before first is exhausted")
def test_union_lazy_second():
    pulled = []

    def second():
        pulled.append(True)
        yield 99

    iterator = iter(ops.union([1, 2], second()))
    assert_that(next(iterator) == 1 and next(iterator) == 2, "first sequence comes first")
    assert_that(pulled == [], "second should not be touched yet")
    assert_that(next(iterator) == 99, "then second")


@suite.test("set methods accept wrappers as the other sequence")
def test_set_methods_unwrap():
    other = L([2, 3]).select(lambda x: x)
    assert_that(L([1, 2, 3]).except_(other).to_list() == [1], "except_ with a wrapper")
    assert_that(L([1, 2, 3]).intersect_hash(other).to_list() == [2, 3], "intersect_hash with a wrapper")
    assert_that(L([1]).union(other).to_list() == [1, 2, 3], "union with a wrapper")


if __name__ == "__main__":
    suite.main(title="linqlite set operations test")
