import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import ballotcount.util
from ballotcount.vote import RankedBallot


def test_sorted_votes():
    votes = {'A': 1, 'B': 3, 'C': 2}
    assert ballotcount.util.sorted_votes(votes) == [('B', 3), ('C', 2), ('A', 1)]
    assert ballotcount.util.sorted_votes(votes, descending=False)[0] == ('A', 1)


def test_frequencies():
    assert ballotcount.util.frequencies(iter('ABAC')) == {'A': 2, 'B': 1, 'C': 1}
    assert ballotcount.util.frequencies([]) == {}


def test_replayable():
    votes = [['A'], ['B']]
    assert ballotcount.util.replayable(votes) is votes
    stream = iter(votes)
    replayed = ballotcount.util.replayable(stream)
    assert replayed == tuple(votes)
    assert list(replayed) == list(replayed)
    assert ballotcount.util.replayable(x for x in 'AB') == ('A', 'B')


def test_ranked_payloads():
    votes = [RankedBallot('AB'), ['C', 'A'], 'BA']
    assert ballotcount.util.ranked_payloads(votes) == (
        ('A', 'B'), ('C', 'A'), ('B', 'A')
    )


@pytest.mark.parametrize(('ranking', 'excluded', 'result'), [
    (('A', 'B', 'C'), set(), 'A'),
    (('A', 'B', 'C'), {'A'}, 'B'),
    (('A', 'B', 'C'), {'A', 'B'}, 'C'),
    (('A', 'B', 'C'), {'A', 'B', 'C'}, None),
    ((), set(), None),
])
def test_first_remaining(ranking, excluded, result):
    assert ballotcount.util.first_remaining(ranking, excluded) == result


def test_first_included():
    assert ballotcount.util.first_included(('C', 'B', 'A'), {'A', 'B'}) == 'B'
    assert ballotcount.util.first_included(('C', ), {'A', 'B'}) is None


@pytest.mark.parametrize(('tally', 'groups'), [
    ({'A': 3}, (['A'], 3, ['A'], 3)),
    ({'A': 3, 'B': 1, 'C': 2}, (['B'], 1, ['A'], 3)),
    ({'A': 1, 'B': 3, 'C': 1, 'D': 3}, (['A', 'C'], 1, ['B', 'D'], 3)),
])
def test_extreme_groups(tally, groups):
    assert ballotcount.util.extreme_groups(tally) == groups
