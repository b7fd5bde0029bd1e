'''General vote counting machinery.

Hosts the tally engine shared by all the single-pass counters, the result
conventions, the error classes and the plurality evaluator.
'''

import abc
from typing import Any, Iterable, Tuple, Dict, FrozenSet, Union, Optional
from numbers import Number

from ballotcount.vote import Candidate, payload
from ballotcount.persist import simple_serialization


class VotingSystemError(Exception):
    '''A voting system with a valid setup ended up in an unresolvable state.'''
    pass


class InvalidArgument(ValueError):
    '''A counting parameter is outside of its permitted range.'''
    pass


class EmptyInputError(ValueError):
    '''There is nothing to count.'''
    pass


class Tie(frozenset):
    '''Candidates tied for a win.

    This object, a subclass of ``frozenset``, is produced by counters when
    two or more candidates share the best result. It compares equal to
    any set containing the same candidates, so the order in which the tied
    candidates were found is irrelevant.
    '''
    def __repr__(self) -> str:
        return 'Tie({' + ', '.join(
            sorted(repr(cand) for cand in self)
        ) + '})'

    @staticmethod
    def any(result: Any) -> bool:
        '''Return True if the counting result is a tie, False otherwise.'''
        return isinstance(result, Tie)


Result = Union[Candidate, Tie, None]


def winner_or_tie(winners: Iterable[Candidate]) -> Result:
    '''Shape a group of winners into a counting result.

    :returns: None if there are no winners, the winner itself if there is
        exactly one, and a :class:`Tie` of all of them otherwise.
    '''
    winners = list(winners)
    if not winners:
        return None
    elif len(winners) == 1:
        return winners[0]
    else:
        return Tie(winners)


def tally_scores(scores: Iterable[Tuple[Candidate, Number]]
                 ) -> Tuple[Dict[Candidate, Number], FrozenSet[Candidate]]:
    '''Accumulate candidate scores and find all candidates with the maximum.

    The input is traversed exactly once, so it can be an arbitrary (lazily
    produced) iterable. A running maximum is maintained along with all the
    candidates currently tied at it. Only when a tied leader loses points
    (on a negative score) is the maximum recomputed from the totals once
    the input is exhausted.

    :param scores: Pairs of candidates and the scores they gained.
    :returns: A 2-tuple with the total score of each candidate and the set
        of candidates sharing the maximum total.
    :raises EmptyInputError: If there are no scores.
    '''
    totals = {}
    leaders = {}
    max_score = None
    stale = False
    for cand, score in scores:
        new_score = totals.get(cand, 0) + score
        totals[cand] = new_score
        if max_score is None or new_score > max_score:
            leaders = {cand: True}
            max_score = new_score
        elif new_score == max_score:
            leaders[cand] = True
        elif cand in leaders:
            stale = True
    if max_score is None:
        raise EmptyInputError('no votes to count')
    if stale:
        max_score = max(totals.values())
        return totals, frozenset(
            cand for cand, total in totals.items() if total == max_score
        )
    return totals, frozenset(leaders)


def all_max_scores(scores: Iterable[Tuple[Candidate, Number]]
                   ) -> FrozenSet[Candidate]:
    '''Return all candidates that share the maximum total score.

    A single forward pass over the scores is made; see :func:`tally_scores`.

    :param scores: Pairs of candidates and the scores they gained.
    :raises EmptyInputError: If there are no scores.
    '''
    return tally_scores(scores)[1]


class Evaluator(metaclass=abc.ABCMeta):
    '''Count ballots and determine the winner.

    A root abstract base class for all counters.
    '''
    @abc.abstractmethod
    def evaluate(self, votes: Iterable[Any]) -> Result:
        '''Count votes and determine the winner.

        :param votes: Ballots of the type accepted by the evaluator, either
            as ballot objects or as raw votes.
        :returns: The winning candidate, a :class:`Tie` of the candidates
            sharing the win, or None if nobody wins.
        '''
        raise NotImplementedError


class ScoringEvaluator(Evaluator):
    '''An evaluator electing the candidates with the highest total score.

    Subclasses define how a single vote is turned into candidate scores;
    the totals are accumulated by :func:`tally_scores` in one pass over the
    votes, so the votes can be streamed.
    '''
    @abc.abstractmethod
    def vote_scores(self, vote: Any) -> Iterable[Tuple[Candidate, Number]]:
        '''Return the scores a single raw vote grants to candidates.'''
        raise NotImplementedError

    def scores(self, votes: Iterable[Any]) -> Iterable[Tuple[Candidate, Number]]:
        for vote in votes:
            yield from self.vote_scores(payload(vote))

    def totals(self, votes: Iterable[Any]) -> Dict[Candidate, Number]:
        '''Return the total score of each candidate.'''
        return tally_scores(self.scores(votes))[0]

    def evaluate(self, votes: Iterable[Any]) -> Result:
        '''Select the candidate with the highest total score.

        :param votes: Ballots, possibly a single-use stream.
        :raises EmptyInputError: If no candidate gained any score.
        '''
        return winner_or_tie(all_max_scores(self.scores(votes)))


@simple_serialization
class Plurality(ScoringEvaluator):
    '''Plurality voting (first-past-the-post). Elects the most voted for.

    Each ballot is a vote for a single candidate; the candidate with the
    most votes wins, ties are returned as :class:`Tie`.
    '''
    def vote_scores(self, vote: Candidate) -> Iterable[Tuple[Candidate, int]]:
        return ((vote, 1), )


def check_range(value: Number,
                name: str,
                min_value: Optional[Number] = None,
                max_value: Optional[Number] = None,
                min_inclusive: bool = True,
                ) -> None:
    '''Check that a parameter value lies within the given bounds.

    :raises InvalidArgument: If it does not.
    '''
    if not isinstance(value, Number):
        raise InvalidArgument(f'{name} must be a number, got {value!r}')
    too_low = min_value is not None and (
        value < min_value if min_inclusive else value <= min_value
    )
    too_high = max_value is not None and value > max_value
    if too_low or too_high:
        lower = '[' if min_inclusive else '('
        raise InvalidArgument(
            f'{name} must be within {lower}{min_value}, {max_value}],'
            f' got {value!r}'
        )
