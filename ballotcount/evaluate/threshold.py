'''Threshold (quota) plurality evaluators.

These evaluators do not look for the single candidate with the most votes;
they elect every candidate whose share of the votes reaches a given quota.
It is a normal outcome for such an evaluator to elect nobody.
'''

import collections
import logging
from fractions import Fraction
from typing import Any, Dict, Iterable
from numbers import Number

from ballotcount.evaluate.core import (
    Evaluator, EmptyInputError, Result, winner_or_tie, check_range
)
from ballotcount.vote import Candidate, payload
from ballotcount.persist import simple_serialization

logger = logging.getLogger(__name__)


def vote_shares(votes: Iterable[Any]) -> Dict[Candidate, Fraction]:
    '''Return the exact fraction of votes each candidate received.

    The votes are traversed once.

    :raises EmptyInputError: If there are no votes.
    '''
    counts = collections.Counter(payload(vote) for vote in votes)
    total = sum(counts.values())
    if not total:
        raise EmptyInputError('no votes to count')
    return {cand: Fraction(n_votes, total) for cand, n_votes in counts.items()}


@simple_serialization
class Quota(Evaluator):
    '''Quota plurality. Elects all candidates with enough of the vote.

    A candidate is elected if their share of the votes is at least the
    quota. Several candidates can thus be elected (returned as a tie), or
    none at all.

    :param q: The quota. Values greater than one are interpreted as
        a percentage, others as a fraction of the votes.
    :raises InvalidArgument: If q is not within (0, 100].
    '''
    def __init__(self, q: Number):
        check_range(q, 'q', 0, 100, min_inclusive=False)
        self.q = q

    @property
    def quota_fraction(self) -> Fraction:
        '''The quota as an exact fraction of the votes.

        Floats are taken at their decimal value, so that 0.1 means
        exactly one tenth.
        '''
        if isinstance(self.q, float):
            quota = Fraction(str(self.q))
        else:
            quota = Fraction(self.q)
        if quota > 1:
            return quota / 100
        else:
            return quota

    def evaluate(self, votes: Iterable[Any]) -> Result:
        '''Select all candidates reaching the quota.

        :param votes: Plurality ballots, possibly a single-use stream.
        :returns: None if no candidate reaches the quota.
        :raises EmptyInputError: If there are no votes.
        '''
        quota = self.quota_fraction
        shares = vote_shares(votes)
        elected = [cand for cand, share in shares.items() if share >= quota]
        logger.debug('vote shares %s against quota %s', shares, quota)
        return winner_or_tie(elected)
