'''Approval voting evaluators.

In approval voting, each voter selects all the candidates they approve of,
without ordering them. Every approval counts as one vote.
'''

from typing import Any, Iterable, Tuple

from ballotcount.evaluate.core import ScoringEvaluator
from ballotcount.vote import Candidate
from ballotcount.persist import simple_serialization


def unique(candidates: Iterable[Candidate]) -> Iterable[Candidate]:
    '''Yield every candidate once, preserving the order of first appearance.'''
    seen = set()
    for cand in candidates:
        if cand not in seen:
            seen.add(cand)
            yield cand


@simple_serialization
class Approval(ScoringEvaluator):
    '''Approval voting. Elects the candidate approved by most voters.

    Ballots are collections of approved candidates; a candidate listed
    several times on a single ballot is approved only once.
    '''
    def vote_scores(self, vote: Any) -> Iterable[Tuple[Candidate, int]]:
        return ((cand, 1) for cand in unique(vote))
