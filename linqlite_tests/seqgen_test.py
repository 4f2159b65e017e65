import suite
from seqgen import from_schema, RecordGenerator
from linqlite import Enumerable

assert_that = suite.assert_that
assert_raises = suite.assert_raises

schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10}),
    'name': 'word',
    'team': {'_gen': 'choice', 'from': ['red', 'blue']},
    'alias': {'_gen': 'ref', 'key': 'name'},
    'version': {'_gen': 'literal', 'value': 2},
    'note': 'not a faker provider',
}


@suite.test("take returns an Enumerable of records")
def test_take_returns_enumerable():
    records = from_schema(schema, seed=1).take(4)
    assert_that(isinstance(records, Enumerable), "take should wrap the records")
    assert_that(records.count() == 4, "four records")


@suite.test("fields follow their specs")
def test_field_specs():
    for record in from_schema(schema, seed=3).take(10):
        assert_that(1 <= record['id'] <= 10, f"id out of range: {record['id']}")
        assert_that(record['team'] in ('red', 'blue'), f"unexpected team: {record['team']}")
        assert_that(record['alias'] == record['name'], "ref copies an earlier field")
        assert_that(record['version'] == 2, "literal value")
        assert_that(record['note'] == 'not a faker provider', "unknown strings are literals")


@suite.test("records are stable across traversals")
def test_stable_traversal():
    records = from_schema(schema, seed=5).take(3)
    assert_that(records.to_list() == records.to_list(), "generated once, read many times")


@suite.test("the same seed reproduces the same choices")
def test_seed_reproducible():
    first = from_schema(schema, seed=9).take(5).select(lambda r: r['team']).to_list()
    second = from_schema(schema, seed=9).take(5).select(lambda r: r['team']).to_list()
    assert_that(first == second, f"choices should repeat: {first} vs {second}")


@suite.test("bad generator configs raise ValueError")
def test_bad_configs():
    generator = RecordGenerator(seed=0)
    assert_raises(ValueError, generator.create, {'x': {'_gen': 'ref', 'key': 'missing'}})
    assert_raises(ValueError, generator.create, {'x': {'_gen': 'literal'}})
    assert_raises(ValueError, generator.create, {'x': {'_gen': 'nope'}})
    assert_raises(ValueError, generator.create, {'x': ('no_such_provider_xyz', {})})


if __name__ == "__main__":
    suite.main(title="seqgen record generator test")
