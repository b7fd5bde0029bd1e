import sys
import os
import itertools

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import ballotcount.evaluate.core
from ballotcount.evaluate.core import (
    Tie, EmptyInputError, InvalidArgument, all_max_scores, tally_scores,
    winner_or_tie, check_range
)
from ballotcount.vote import PluralityBallot


@pytest.mark.parametrize('abstract_cls', [
    ballotcount.evaluate.core.Evaluator,
    ballotcount.evaluate.core.ScoringEvaluator,
])
def test_abstract(abstract_cls):
    with pytest.raises(TypeError):
        eval = abstract_cls()


@pytest.mark.parametrize(('scores', 'winners'), [
    ([('A', 1)], {'A'}),
    ([('A', 1), ('B', 1), ('A', 1)], {'A'}),
    ([('A', 1), ('B', 1)], {'A', 'B'}),
    ([('A', 2), ('B', 1), ('B', 1)], {'A', 'B'}),
    ([('A', 0), ('B', 0)], {'A', 'B'}),
    ([('A', 1), ('A', 0)], {'A'}),
    ([('A', -1), ('B', -2)], {'A'}),
    ([('A', 0.5), ('B', 0.25), ('B', 0.25), ('C', 0.75)], {'C'}),
])
def test_all_max_scores(scores, winners):
    assert all_max_scores(scores) == winners


def test_all_max_scores_leader_loses():
    assert all_max_scores([('A', 5), ('B', 3), ('A', -3)]) == {'B'}
    assert all_max_scores([('A', 5), ('B', 5), ('A', -1)]) == {'B'}


def test_all_max_scores_single_pass():
    consumed = []

    def scores():
        for cand in 'ABCAB':
            consumed.append(cand)
            yield cand, 1

    assert all_max_scores(scores()) == {'A', 'B'}
    assert consumed == list('ABCAB')


def test_tally_scores_totals():
    totals, winners = tally_scores([('A', 2), ('B', 3), ('A', 2)])
    assert totals == {'A': 4, 'B': 3}
    assert winners == {'A'}


def test_all_max_scores_empty():
    with pytest.raises(EmptyInputError):
        all_max_scores([])
    with pytest.raises(EmptyInputError):
        all_max_scores(iter([]))


def test_winner_or_tie():
    assert winner_or_tie([]) is None
    assert winner_or_tie(['A']) == 'A'
    tie = winner_or_tie(['A', 'B'])
    assert isinstance(tie, Tie)
    assert tie == {'A', 'B'}
    assert Tie.any(tie)
    assert not Tie.any('A')


def test_tie_repr():
    assert repr(Tie(['B', 'A'])) == "Tie({'A', 'B'})"


@pytest.mark.parametrize(('votes', 'winner'), [
    (['A', 'A', 'A', 'B', 'B'], 'A'),
    (['A', 'A', 'B', 'B'], Tie(['A', 'B'])),
    ([1, 2, 2], 2),
    ([('x', 1), ('x', 1), ('y', 2)], ('x', 1)),
])
def test_plurality(votes, winner):
    assert ballotcount.evaluate.core.Plurality().evaluate(votes) == winner


def test_plurality_stream():
    votes = itertools.islice(itertools.cycle('ABC'), 999)
    assert ballotcount.evaluate.core.Plurality().evaluate(votes) == set('ABC')


def test_plurality_ballots():
    votes = [PluralityBallot('A'), PluralityBallot('B'), PluralityBallot('A')]
    assert ballotcount.evaluate.core.Plurality().evaluate(votes) == 'A'


def test_plurality_empty():
    with pytest.raises(EmptyInputError):
        ballotcount.evaluate.core.Plurality().evaluate([])


def test_check_range():
    check_range(50, 'p', 50, 100)
    check_range(100, 'p', 0, 100, min_inclusive=False)
    with pytest.raises(InvalidArgument):
        check_range(0, 'p', 0, 100, min_inclusive=False)
    with pytest.raises(InvalidArgument):
        check_range(100.5, 'p', 0, 100)
    with pytest.raises(InvalidArgument):
        check_range('50', 'p', 0, 100)


def test_errors_are_value_errors():
    assert issubclass(InvalidArgument, ValueError)
    assert issubclass(EmptyInputError, ValueError)
