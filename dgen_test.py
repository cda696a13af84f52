import suite
from dgen import from_schema, Generator
from seqops import Sequence

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'first_name',
    'team': {'_provider': 'choice', 'from': ['red', 'blue']},
    'label': {'_provider': 'ref', 'key': 'name'},
    'scores': {'_provider': 'sequence', 'count': 3, 'item': ('pyint', {'min_value': 0, 'max_value': 10})},
    'kind': {'_provider': 'literal', 'value': 'player'},
}


@test("take generates a sequence of records")
def test_take():
    players = from_schema(schema, seed=1).take(5)
    assert_that(isinstance(players, Sequence), "should return a sequence")
    assert_that(len(players) == 5, "five records")
    assert_that(players.every(lambda p: p['team'] in ('red', 'blue')), "choice respected")
    assert_that(players.every(lambda p: p['label'] == p['name']), "refs resolve to earlier fields")
    assert_that(players.every(lambda p: len(p['scores']) == 3), "nested sequence length")
    assert_that(players.every(lambda p: p['kind'] == 'player'), "literal value")


@test("seeded generators are reproducible")
def test_seeded():
    first = from_schema(schema, seed=99).take(3).to.list()
    second = from_schema(schema, seed=99).take(3).to.list()
    assert_that(first == second, "same seed, same records")


@test("take_named names records by a field")
def test_take_named():
    players = from_schema(schema, seed=5).take_named(4, 'id')
    assert_that(len(players) == 4, "four records")
    assert_that(players.every(lambda p: isinstance(p['id'], int)), "records intact")
    assert_that(len(set(players.names())) == 4, "names are unique")


@test("unknown providers are rejected")
def test_unknown_provider():
    with raises(ValueError, "unknown _provider"):
        Generator(seed=0).create({'_provider': 'nope'})
    with raises(ValueError, "not found"):
        Generator(seed=0).create({'_provider': 'ref', 'key': 'missing'})


if __name__ == "__main__":
    suite.run(title="dgen test suite")
