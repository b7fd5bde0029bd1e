"""Cardinal voting systems - systems that use score votes.

Each voter assigns a numeric score to some candidates. The score ballots are
represented as mappings of candidates to scores (or as
:class:`ballotcount.vote.ScoreBallot` objects).
"""
import collections
from fractions import Fraction
from typing import Any, List, Dict, Iterable, Tuple
from numbers import Number

from ballotcount.evaluate.core import (
    Evaluator, ScoringEvaluator, EmptyInputError, Result, winner_or_tie
)
from ballotcount.vote import Candidate, ScoreVoteType, payload
from ballotcount.persist import simple_serialization


@simple_serialization
class ScoreVoting(ScoringEvaluator):
    """Score voting (range voting). Elects the candidate with the best score.

    The scores each candidate received are summed, not averaged. When every
    ballot scores every candidate, the number of scores is the same for all
    candidates and the order of the sums equals the order of the means.
    A candidate left out by some ballots is thus disadvantaged compared to
    a true average.
    """
    def vote_scores(self,
                    vote: ScoreVoteType,
                    ) -> Iterable[Tuple[Candidate, Number]]:
        return vote.items()


def median(values: List[Number]) -> Number:
    """Return the median of the values.

    For an even number of values, this is the mean of the two middle ones,
    computed exactly for rational values.

    :raises EmptyInputError: If there are no values.
    """
    if not values:
        raise EmptyInputError('median of no values')
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    lower, upper = ordered[mid - 1], ordered[mid]
    if isinstance(lower, float) or isinstance(upper, float):
        return (lower + upper) / 2
    return Fraction(lower + upper) / 2


@simple_serialization
class MajorityJudgement(Evaluator):
    """Majority Judgement, a median-based cardinal voting system.

    The candidate with the highest median score wins; candidates with equal
    medians are tied, no further tiebreaking is performed. Only the scores
    actually given count towards a candidate's median.

    The ballots are traversed once but all the scores need to be held in
    memory until the medians can be determined.
    """
    def scores(self, votes: Iterable[Any]) -> Dict[Candidate, List[Number]]:
        """Collect the scores given to each candidate."""
        scores = collections.defaultdict(list)
        for vote in votes:
            for cand, score in payload(vote).items():
                scores[cand].append(score)
        return dict(scores)

    def medians(self, votes: Iterable[Any]) -> Dict[Candidate, Number]:
        """Return the median score of each candidate."""
        return {
            cand: median(cand_scores)
            for cand, cand_scores in self.scores(votes).items()
        }

    def evaluate(self, votes: Iterable[Any]) -> Result:
        """Select the candidate with the highest median score.

        :param votes: Score ballots, possibly a single-use stream.
        :raises EmptyInputError: If no candidate was scored.
        """
        medians = self.medians(votes)
        if not medians:
            raise EmptyInputError('no votes to count')
        top = max(medians.values())
        return winner_or_tie(
            cand for cand, cand_median in medians.items() if cand_median == top
        )
