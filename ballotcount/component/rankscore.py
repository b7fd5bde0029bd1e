'''Objects to assign scores to ranks in positional systems such as Borda.

A rank scorer returns a list of numerical scores to be assigned to the ranks
of a single ranked ballot, given the number of candidates that ballot ranks.
This is the essence of the Borda count and its relatives.
'''

import abc
from fractions import Fraction
from typing import List
from numbers import Number

from ballotcount.persist import simple_serialization
from ballotcount.evaluate.core import InvalidArgument


class RankScorer(metaclass=abc.ABCMeta):
    '''An abstract base class for rank scorers.

    Rank scorers must provide a `scores()` method that returns a list of scores
    based on the number of ranks given.
    '''
    @abc.abstractmethod
    def scores(self, n_ranked: int) -> List[Number]:
        raise NotImplementedError


@simple_serialization
class Borda(RankScorer):
    '''Borda rank scorer.

    Assigns `starting_at` points to the candidate ranked last on the ballot
    and one point more for each higher rank, so only the candidates actually
    ranked on a ballot gain points from it.

    :param starting_at: The score of the candidate ranked last; 0 or 1.
        Since the choice shifts the total of every candidate by the same
        amount per ballot, it never changes the winner.
    :raises InvalidArgument: If starting_at is not 0 or 1.
    '''

    def __init__(self, starting_at: int = 1):
        if starting_at not in (0, 1) or isinstance(starting_at, bool):
            raise InvalidArgument(
                f'starting_at must be 0 or 1, got {starting_at!r}'
            )
        self.starting_at = starting_at

    def scores(self, n_ranked: int) -> List[int]:
        '''Return the scores for n_ranked ranks.

        This gives (n_ranked - rank - 1 + starting_at) for ranks running
        from 0 (best rank) to n_ranked - 1.
        '''
        top_score = n_ranked - 1 + self.starting_at
        return [top_score - rank for rank in range(n_ranked)]


@simple_serialization
class Dowdall(RankScorer):
    '''Dowdall (Nauru) rank scorer.

    Assigns the numbers of the harmonic series (1, 1/2, 1/3...) to
    progressively lower ranks.
    '''

    def scores(self, n_ranked: int) -> List[Fraction]:
        '''Return the scores for the first n_ranked ranks.

        This gives `1 / (rank + 1)` for ranks running
        from 0 (best rank) to n_ranked.
        '''
        return [Fraction(1, rank + 1) for rank in range(n_ranked)]
