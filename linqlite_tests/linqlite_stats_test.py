import math
import suite
from seqgen import from_schema
from linqlite import L, MIN_SENTINEL, MAX_SENTINEL, EmptySequenceError, operations as ops

assert_that = suite.assert_that
assert_raises = suite.assert_raises

product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 50}),
    'price': ('pyint', {'min_value': 5, 'max_value': 500}),
    'category': {'_gen': 'choice', 'from': ['electronics', 'books', 'clothing']},
}


@suite.test("sum accumulates in order, 0 on empty")
def test_sum():
    assert_that(ops.sum([1, 2, 3, 4]) == 10, "sum of ints")
    assert_that(ops.sum([]) == 0, "empty sum is 0")
    assert_that(ops.sum([{'v': 2}, {'v': 5}], lambda d: d['v']) == 7, "sum with selector")


@suite.test("the default selector coerces numeric strings")
def test_sum_default_coercion():
    assert_that(ops.sum(['1', '2.5']) == 3.5, "strings are coerced with float()")
    assert_raises(ValueError, ops.sum, ['one'])


@suite.test("average divides by count, nan on empty")
def test_average():
    assert_that(ops.average([1, 2, 3, 4]) == 2.5, "average of 1..4")
    assert_that(math.isnan(ops.average([])), "empty average is nan")


@suite.test("max and min with selectors")
def test_max_min():
    assert_that(ops.max([3, 9, 1]) == 9, "max")
    assert_that(ops.min([3, 9, 1]) == 1, "min")
    assert_that(ops.max([-5, -2, -9]) == -2, "max of negatives")
    assert_that(ops.min(['bb', 'a', 'ccc'], len) == 1, "min with selector returns the projected value")


@suite.test("max and min of an empty sequence return the seed sentinels")
def test_max_min_empty_sentinels():
    assert_that(ops.max([], lambda x: x) == MIN_SENTINEL, "max of empty is MIN_SENTINEL")
    assert_that(ops.min([], lambda x: x) == MAX_SENTINEL, "min of empty is MAX_SENTINEL")
    assert_that(MIN_SENTINEL == -math.inf, "MIN_SENTINEL is negative infinity")
    assert_that(MAX_SENTINEL == math.inf, "MAX_SENTINEL is positive infinity")


@suite.test("infinite inputs come back as themselves")
def test_max_min_infinities():
    assert_that(ops.max([-math.inf]) == -math.inf, "max of -inf is -inf")
    assert_that(ops.min([math.inf]) == math.inf, "min of inf is inf")
    assert_that(ops.min_max([math.inf, -math.inf]) == (-math.inf, math.inf), "min_max keeps both infinities")
    assert_that(ops.max([-math.inf, -5]) == -5, "a finite value beats -inf")


@suite.test("nan propagates through max, min and min_max")
def test_max_min_nan():
    assert_that(math.isnan(ops.max([math.nan])), "max of nan is nan")
    assert_that(math.isnan(ops.max([1, math.nan, 3])), "nan sticks in max")
    assert_that(math.isnan(ops.min([math.nan, 0])), "nan sticks in min")
    low, high = ops.min_max([2, math.nan])
    assert_that(math.isnan(low) and math.isnan(high), "nan sticks in both extremes")


@suite.test("strict max and min raise on empty")
def test_max_min_strict():
    assert_raises(EmptySequenceError, ops.max, [], strict=True)
    assert_raises(EmptySequenceError, ops.min, [], strict=True)
    assert_raises(EmptySequenceError, ops.min_max, [], strict=True)
    assert_that(ops.max([4], strict=True) == 4, "strict with data behaves normally")


@suite.test("min_max in one pass")
def test_min_max():
    result = ops.min_max([4, -1, 7, 3])
    assert_that(result == (-1, 7), f"unexpected min_max: {result}")
    assert_that(result.min == -1 and result.max == 7, "named fields")
    empty_result = ops.min_max([])
    assert_that(empty_result == (MAX_SENTINEL, MIN_SENTINEL), "empty min_max keeps both seeds")


@suite.test("min_max pulls the source once")
def test_min_max_single_pass():
    traversals = []

    class Source:
        def __iter__(self):
            traversals.append(1)
            return iter([2, 8, 5])

    assert_that(ops.min_max(Source()) == (2, 8), "values")
    assert_that(len(traversals) == 1, "one traversal")


@suite.test("stats over generated records")
def test_stats_records():
    products = from_schema(product_schema, seed=11).take(25)
    prices = products.select(lambda p: p['price']).to_list()
    assert_that(products.sum(lambda p: p['price']) == sum(prices), "sum matches builtin")
    assert_that(products.max(lambda p: p['price']) == max(prices), "max matches builtin")
    assert_that(products.min(lambda p: p['price']) == min(prices), "min matches builtin")
    assert_that(math.isclose(products.average(lambda p: p['price']), sum(prices) / len(prices)), "average")


@suite.test("wrapper stats forward the strict flag")
def test_wrapper_strict():
    assert_that(L([]).max() == MIN_SENTINEL, "non-strict by default")
    assert_raises(EmptySequenceError, L([]).where(lambda x: True).min, strict=True)


if __name__ == "__main__":
    suite.main(title="linqlite stats operations test")
