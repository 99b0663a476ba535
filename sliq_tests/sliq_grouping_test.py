from collections import Counter

import suite
from dgen import from_schema
from sliq import P, empty

assert_that = suite.assert_that
assert_equal = suite.assert_equal

employee_schema = {
    'name': 'first_name',
    'team': {'_qen_provider': 'choice', 'from': ['core', 'infra', 'data', 'web']},
    'level': {'_qen_provider': 'int', 'min': 1, 'max': 5},
}


# equal() / equal_with()

@suite.test("equal compares length and items in order")
def test_equal():
    assert_that(P([1, 2, 3]).to.equal([1, 2, 3]), "same items")
    assert_that(not P([1, 2, 3]).to.equal([3, 2, 1]), "order matters")
    assert_that(not P([1, 2]).to.equal([1, 2, 3]), "length matters")
    assert_that(empty().to.equal([]), "empty sequences are equal")


@suite.test("equal is reflexive and symmetric")
def test_equal_properties():
    people = from_schema(employee_schema, seed=4).take(15).to.list()
    others = from_schema(employee_schema, seed=5).take(15).to.list()
    assert_that(P(people).to.equal(people), "reflexive")
    assert_equal(P(people).to.equal(others), P(others).to.equal(people), "symmetric")


@suite.test("equal_with compares across types through a comparator")
def test_equal_with():
    assert_that(P([1, 2, 3]).to.equal_with(['1', '2', '3'], lambda a, b: str(a) == b), "int vs str")
    assert_that(not P([1, 2]).to.equal_with(['1', '3'], lambda a, b: str(a) == b), "second pair differs")
    assert_that(not P([1]).to.equal_with(['1', '1'], lambda a, b: True), "length is checked first")


# partition_by()

@suite.test("partition_by splits into matching and non-matching items")
def test_partition_by():
    matching, rest = P([1, 2, 3, 4, 5, 6]).group.partition_by(lambda i, x: x % 3 == 0)
    assert_equal(matching, [3, 6])
    assert_equal(rest, [1, 2, 4, 5])


@suite.test("partition_by passes the index")
def test_partition_by_index():
    evens, odds = P(['a', 'b', 'c']).group.partition_by(lambda i, x: i % 2 == 0)
    assert_equal((evens, odds), (['a', 'c'], ['b']))


@suite.test("partition_by on empty input yields two empty lists")
def test_partition_by_empty():
    assert_equal(empty().group.partition_by(lambda i, x: True), ([], []))


@suite.test("partition_by preserves the multiset and the relative order")
def test_partition_by_properties():
    people = from_schema(employee_schema, seed=12).take(30).to.list()
    senior, junior = P(people).group.partition_by(lambda i, p: p['level'] >= 3)
    assert_equal(len(senior) + len(junior), len(people))
    keyed = lambda ps: Counter((p['name'], p['team'], p['level']) for p in ps)
    assert_equal(keyed(senior) + keyed(junior), keyed(people), "multiset union")

    # interleaving both sides by original position rebuilds the input
    flags = [p['level'] >= 3 for p in people]
    senior_iter, junior_iter = iter(senior), iter(junior)
    rebuilt = [next(senior_iter) if flag else next(junior_iter) for flag in flags]
    assert_equal(rebuilt, people)


# group_with()

@suite.test("group_with groups by key keeping input order")
def test_group_with():
    groups = P([1, 2, 3, 4]).group.group_with(lambda x: x % 2 == 0)
    assert_equal(groups, {True: [2, 4], False: [1, 3]})


@suite.test("group_with on records")
def test_group_with_records():
    people = from_schema(employee_schema, seed=30).take(40)
    by_team = people.group.group_with(lambda p: p['team'])
    assert_that(set(by_team) <= {'core', 'infra', 'data', 'web'}, "keys are teams")
    assert_equal(sum(len(members) for members in by_team.values()), 40, "no item is lost")
    for team, members in by_team.items():
        assert_that(all(m['team'] == team for m in members), f"{team} only holds its members")
        expected = [p for p in people.to.list() if p['team'] == team]
        assert_equal(members, expected, f"{team} keeps input order")


@suite.test("group_with on empty input is an empty mapping")
def test_group_with_empty():
    assert_equal(empty().group.group_with(lambda x: x), {})


if __name__ == "__main__":
    suite.main(title="sliq grouping test")
