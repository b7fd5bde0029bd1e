import sys
import os
from fractions import Fraction

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import ballotcount.evaluate.cardinal
from ballotcount.evaluate.core import EmptyInputError, Tie
from ballotcount.vote import ScoreBallot

SCORE = ballotcount.evaluate.cardinal.ScoreVoting()
MJ = ballotcount.evaluate.cardinal.MajorityJudgement()

# Tennessee capital election example, ballots in score form
TENNESSEE_SCORES = (
    [{'M': 10, 'N': 4, 'C': 2, 'K': 0}] * 42
    + [{'M': 0, 'N': 10, 'C': 4, 'K': 2}] * 26
    + [{'M': 0, 'N': 6, 'C': 10, 'K': 6}] * 15
    + [{'M': 0, 'N': 5, 'C': 7, 'K': 10}] * 17
)


def test_score():
    votes = [
        {'A': 5, 'B': 4, 'C': 1},
        {'A': 1, 'B': 4, 'C': 1},
    ]
    assert SCORE.totals(votes) == {'A': 6, 'B': 8, 'C': 2}
    assert SCORE.evaluate(votes) == 'B'


def test_score_tie():
    votes = [
        {'A': 5, 'B': 5, 'C': 1},
        {'A': 5, 'B': 5, 'C': 1},
    ]
    assert SCORE.evaluate(votes) == Tie('AB')


def test_score_sums_not_means():
    # A has the lower mean but the higher sum, being scored twice
    votes = [{'A': 3}, {'A': 3, 'B': 5}]
    assert SCORE.evaluate(votes) == 'A'


def test_score_tennessee():
    assert SCORE.evaluate(TENNESSEE_SCORES) == 'N'


def test_score_ballots_stream():
    votes = (
        ScoreBallot(scores) for scores in [{'A': 1, 'B': 2}, {'A': 2, 'B': 2}]
    )
    assert SCORE.evaluate(votes) == 'B'


def test_score_empty():
    with pytest.raises(EmptyInputError):
        SCORE.evaluate([])


@pytest.mark.parametrize(('values', 'result'), [
    ([3], 3),
    ([1, 5, 3], 3),
    ([4, 1, 2, 3], Fraction(5, 2)),
    ([4, 3], Fraction(7, 2)),
    ([1.0, 2.0], 1.5),
    ([2, 2], 2),
])
def test_median(values, result):
    assert ballotcount.evaluate.cardinal.median(values) == result


def test_median_empty():
    with pytest.raises(EmptyInputError):
        ballotcount.evaluate.cardinal.median([])


def test_majority_judgement():
    votes = [
        {'A': 4, 'B': 3, 'C': 1},
        {'A': 4, 'B': 3, 'C': 2},
        {'A': 2, 'B': 0, 'C': 3},
        {'A': 2, 'B': 3, 'C': 4},
        {'A': 1, 'B': 0, 'C': 2},
    ]
    assert MJ.medians(votes) == {'A': 2, 'B': 3, 'C': 2}
    assert MJ.evaluate(votes) == 'B'
    # would be A under score voting
    assert SCORE.evaluate(votes) == 'A'


def test_majority_judgement_tie():
    votes = [
        {'A': 4, 'B': 4, 'C': 1},
        {'A': 4, 'B': 4, 'C': 2},
    ]
    assert MJ.medians(votes)['C'] == Fraction(3, 2)
    assert MJ.evaluate(votes) == Tie('AB')


def test_majority_judgement_unscored_ignored():
    votes = [{'A': 1, 'B': 2}, {'A': 1}, {'A': 1}]
    assert MJ.scores(votes) == {'A': [1, 1, 1], 'B': [2]}
    assert MJ.evaluate(votes) == 'B'


def test_majority_judgement_stream():
    votes = iter([ScoreBallot({'A': 1, 'B': 3}), ScoreBallot({'A': 2, 'B': 3})])
    assert MJ.evaluate(votes) == 'B'


def test_majority_judgement_empty():
    with pytest.raises(EmptyInputError):
        MJ.evaluate([])
    with pytest.raises(EmptyInputError):
        MJ.evaluate([{}, {}])
