'''Counting functions, one per voting system.

Each function builds the corresponding evaluator from the
:mod:`ballotcount.evaluate` subpackage and counts the ballots with it.
All of them return the winning candidate, a :class:`Tie` of the candidates
sharing the win, or None if nobody wins.
'''

from numbers import Number
from typing import Any, Iterable

from ballotcount.evaluate.core import Plurality, Result, Tie
from ballotcount.evaluate.threshold import Quota
from ballotcount.evaluate.positional import BordaCount, DowdallCount
from ballotcount.evaluate.approval import Approval
from ballotcount.evaluate.cardinal import ScoreVoting, MajorityJudgement
from ballotcount.evaluate.sequential import (
    InstantRunoff, Coombs, PluralityWithRunoff
)


def plurality(ballots: Iterable[Any]) -> Result:
    '''Grant the win to the candidate with the most votes.

    >>> plurality(['A', 'A', 'A', 'B', 'B'])
    'A'
    >>> plurality(['A', 'A', 'B', 'B']) == {'A', 'B'}
    True
    '''
    return Plurality().evaluate(ballots)


def quota(ballots: Iterable[Any], q: Number) -> Result:
    '''Elect every candidate receiving at least the quota of votes.

    The quota `q` is a percentage if greater than one, a fraction otherwise.

    >>> quota(['A', 'A', 'B'], 60)
    'A'
    >>> quota(['A', 'A', 'B'], 0.30) == {'A', 'B'}
    True
    >>> quota(['A', 'A', 'B'], 70) is None
    True
    '''
    return Quota(q).evaluate(ballots)


def plurality_with_runoff(ballots: Iterable[Any]) -> Result:
    '''Hold a runoff among the best candidates if nobody has a majority.

    >>> plurality_with_runoff([['A'], ['A'], ['A'], ['B'], ['B'],
    ...                        ['C', 'B'], ['D', 'B']])
    'B'
    '''
    return PluralityWithRunoff().evaluate(ballots)


def instant_runoff(ballots: Iterable[Any],
                   win_percentage: Number = 50.0,
                   ) -> Result:
    '''Eliminate the weakest candidates until somebody has a majority.

    >>> instant_runoff([['A', 'C'], ['B', 'C'], ['C'], ['C']])
    'C'
    '''
    return InstantRunoff(win_percentage).evaluate(ballots)


def coombs(ballots: Iterable[Any]) -> Result:
    '''Eliminate the most disliked candidates until somebody has a majority.

    >>> coombs([['A', 'B'], ['B', 'C'], ['C', 'A']]) is None
    True
    '''
    return Coombs().evaluate(ballots)


def borda(ballots: Iterable[Any], starting_at: int = 1) -> Result:
    '''Grant points to ranked candidates, one more for each higher rank.

    >>> borda([['A', 'B', 'C'], ['B', 'C', 'A']])
    'B'
    '''
    return BordaCount(starting_at).evaluate(ballots)


def dowdall(ballots: Iterable[Any]) -> Result:
    '''Grant 1/n points to the n-th ranked candidate on every ballot.

    >>> dowdall([['A', 'B', 'C'], ['B', 'C', 'A']])
    'B'
    '''
    return DowdallCount().evaluate(ballots)


def approval(ballots: Iterable[Any]) -> Result:
    '''Grant the win to the candidate approved by the most voters.

    >>> approval([['A', 'B'], ['B', 'C']])
    'B'
    '''
    return Approval().evaluate(ballots)


def score(ballots: Iterable[Any]) -> Result:
    '''Grant the win to the candidate with the highest summed score.

    >>> score([{'A': 5, 'B': 4, 'C': 1}, {'A': 1, 'B': 4, 'C': 1}])
    'B'
    '''
    return ScoreVoting().evaluate(ballots)


def majority_judgement(ballots: Iterable[Any]) -> Result:
    '''Grant the win to the candidate with the highest median score.'''
    return MajorityJudgement().evaluate(ballots)
