'''Positional voting systems: candidates score points by ranks on ballots.

The points per rank are determined by a rank scorer from
:mod:`ballotcount.component.rankscore`; the candidate with the highest
point total wins.
'''

from typing import Iterable, Tuple, Union
from numbers import Number

import ballotcount.component.rankscore
from ballotcount.component.rankscore import RankScorer
from ballotcount.evaluate.core import ScoringEvaluator, InvalidArgument
from ballotcount.vote import Candidate, RankedVoteType
from ballotcount.persist import simple_serialization


RANK_SCORERS = {
    'borda': ballotcount.component.rankscore.Borda,
    'dowdall': ballotcount.component.rankscore.Dowdall,
}


@simple_serialization
class Positional(ScoringEvaluator):
    '''Elect the candidate with the most points gained by ballot positions.

    :param rank_scorer: A rank scorer object, or the name of one of the
        builtin scorers (``'borda'`` or ``'dowdall'``).
    :raises InvalidArgument: If the scorer name is unknown.
    '''
    def __init__(self, rank_scorer: Union[RankScorer, str]):
        if isinstance(rank_scorer, str):
            if rank_scorer.lower() not in RANK_SCORERS:
                raise InvalidArgument(
                    f'unknown rank scorer {rank_scorer!r}, must be one of '
                    + ', '.join(sorted(RANK_SCORERS))
                )
            rank_scorer = RANK_SCORERS[rank_scorer.lower()]()
        self.rank_scorer = rank_scorer

    def vote_scores(self,
                    vote: RankedVoteType,
                    ) -> Iterable[Tuple[Candidate, Number]]:
        ranking = tuple(vote)
        return zip(ranking, self.rank_scorer.scores(len(ranking)))


@simple_serialization
class BordaCount(Positional):
    '''Borda count.

    The candidate ranked last on a ballot ranking n candidates gets
    starting_at points, the candidate ranked first gets n - 1 + starting_at.

    :param starting_at: Score of the last ranked candidate, 0 or 1.
    '''
    def __init__(self, starting_at: int = 1):
        super().__init__(ballotcount.component.rankscore.Borda(starting_at))

    @property
    def starting_at(self) -> int:
        return self.rank_scorer.starting_at


@simple_serialization
class DowdallCount(Positional):
    '''Dowdall system. The n-th ranked candidate on a ballot gets 1/n points.'''
    def __init__(self):
        super().__init__(ballotcount.component.rankscore.Dowdall())
