'''Evaluators that operate sequentially on ranked votes.

This hosts the elimination systems - instant-runoff voting
(:class:`InstantRunoff`) and the Coombs method (:class:`Coombs`) - and the
two-round system (:class:`PluralityWithRunoff`). All of them count the same
ranked ballots repeatedly, narrowing down the set of candidates in contention
with every round, so they need the whole ballot collection; single-use
iterables are materialized up front.

Each of them provides a ``rounds()`` generator yielding a :class:`Round`
record per count, for inspection of the intermediate results.
'''
import abc
import logging
from fractions import Fraction
from typing import (
    Any, Dict, FrozenSet, Iterable, Iterator, NamedTuple, Optional, Tuple
)
from numbers import Number

import ballotcount.util
from ballotcount.evaluate.core import (
    Evaluator, EmptyInputError, VotingSystemError, Result, winner_or_tie,
    check_range,
)
from ballotcount.vote import Candidate, RankedVoteType
from ballotcount.persist import simple_serialization

logger = logging.getLogger(__name__)

MAJORITY = Fraction(1, 2)


class Round(NamedTuple):
    '''The state of a single count of a sequential evaluation.

    :param number: 1-indexed number of the count.
    :param tally: First preference votes for candidates in contention.
    :param excluded: Candidates out of contention during this count.
    :param elected: Candidates that won on this count; empty if nobody did.
    :param eliminated: Candidates eliminated after this count.
    :param last_tally: Last preference votes (Coombs method only).
    '''
    number: int
    tally: Dict[Candidate, int]
    excluded: FrozenSet[Candidate]
    elected: FrozenSet[Candidate] = frozenset()
    eliminated: FrozenSet[Candidate] = frozenset()
    last_tally: Optional[Dict[Candidate, int]] = None


class SequentialEvaluator(Evaluator):
    '''An evaluator counting the ranked ballots in several rounds.'''

    @abc.abstractmethod
    def rounds(self, votes: Iterable[Any]) -> Iterator[Round]:
        '''Yield the successive counts of the evaluation.

        The last count yielded determines the result.
        '''
        raise NotImplementedError

    def evaluate(self, votes: Iterable[Any]) -> Result:
        '''Count the ranked votes round by round until a decision is reached.

        :param votes: Ranked ballots. Any iterable is accepted; single-use
            ones are materialized first.
        :returns: The winner, or None if nobody wins.
        :raises EmptyInputError: If there are no votes.
        :raises VotingSystemError: If no count was performed.
        '''
        final = None
        for final in self.rounds(votes):
            pass
        if final is None:
            raise VotingSystemError(f'{type(self).__name__} performed no count')
        return winner_or_tie(final.elected)


def _prepare(votes: Iterable[Any]) -> Tuple[RankedVoteType, ...]:
    rankings = ballotcount.util.ranked_payloads(
        ballotcount.util.replayable(votes)
    )
    if not rankings:
        raise EmptyInputError('no votes to count')
    return rankings


def _has_majority(n_votes: int, total: int, percentage: Number) -> bool:
    return Fraction(n_votes, total) * 100 > percentage


class EliminationEvaluator(SequentialEvaluator):
    '''An evaluator eliminating candidates until one of them wins.'''

    @abc.abstractmethod
    def next_count(self,
                   rankings: Tuple[RankedVoteType, ...],
                   excluded: FrozenSet[Candidate],
                   number: int,
                   ) -> Round:
        '''Perform a single count with the excluded candidates eliminated.'''
        raise NotImplementedError

    def rounds(self, votes: Iterable[Any]) -> Iterator[Round]:
        rankings = _prepare(votes)
        excluded = frozenset()
        number = 1
        while True:
            current = self.next_count(rankings, excluded, number)
            yield current
            if not current.eliminated:
                return
            excluded = excluded | current.eliminated
            number += 1


@simple_serialization
class InstantRunoff(EliminationEvaluator):
    '''Instant-runoff voting (IRV, alternative vote, Hare rule).

    First preference votes are counted. If the leading candidate has more
    than the required percentage of them, they win. Otherwise, the candidate
    with the fewest first preference votes is eliminated and the votes are
    counted again, each ballot now counting for its most preferred candidate
    not yet eliminated. Ballots with all their candidates eliminated are
    exhausted and do not count towards the total anymore.

    If several candidates are tied for the fewest votes, all of them are
    eliminated in the same round. Since the winning percentage is at least
    50, two candidates can never win together.

    :param win_percentage: Percentage of the counted votes a candidate must
        exceed to win.
    :raises InvalidArgument: If the percentage is not within [50, 100].
    '''
    def __init__(self, win_percentage: Number = 50.0):
        check_range(win_percentage, 'win_percentage', 50, 100)
        self.win_percentage = win_percentage

    def next_count(self,
                   rankings: Tuple[RankedVoteType, ...],
                   excluded: FrozenSet[Candidate],
                   number: int,
                   ) -> Round:
        '''Perform a single count with the given candidates eliminated.'''
        tally = ballotcount.util.frequencies(
            cand for cand in (
                ballotcount.util.first_remaining(ranking, excluded)
                for ranking in rankings
            )
            if cand is not None
        )
        if not tally:
            logger.info('all votes exhausted, no winner')
            return Round(number, tally, excluded)
        logger.info('count %d: %s', number, tally)
        worst, worst_votes, best, best_votes = \
            ballotcount.util.extreme_groups(tally)
        total = sum(tally.values())
        if _has_majority(best_votes, total, self.win_percentage):
            logger.info('%s elected with %d of %d votes',
                        best, best_votes, total)
            return Round(number, tally, excluded, elected=frozenset(best))
        logger.info('eliminating %s with %d votes', worst, worst_votes)
        return Round(number, tally, excluded, eliminated=frozenset(worst))


@simple_serialization
class Coombs(EliminationEvaluator):
    '''Coombs method.

    Like instant-runoff voting, but instead of the candidate with the fewest
    first preferences, the candidate with the most last preferences is
    eliminated in each round (all of them, if several are tied). A candidate
    wins once they are ranked first on more than half of the ballots still
    ranking any candidate in contention.

    If all the candidates end up eliminated, nobody wins.
    '''
    def next_count(self,
                   rankings: Tuple[RankedVoteType, ...],
                   excluded: FrozenSet[Candidate],
                   number: int,
                   ) -> Round:
        '''Perform a single count with the given candidates eliminated.'''
        remaining = [
            ranking for ranking in (
                tuple(cand for cand in ranking if cand not in excluded)
                for ranking in rankings
            )
            if ranking
        ]
        if not remaining:
            logger.info('all candidates eliminated, no winner')
            return Round(number, {}, excluded)
        tally = ballotcount.util.frequencies(
            ranking[0] for ranking in remaining
        )
        logger.info('count %d: %s', number, tally)
        best, best_votes = ballotcount.util.extreme_groups(tally)[2:]
        if Fraction(best_votes, len(remaining)) > MAJORITY:
            logger.info('%s elected with %d of %d votes',
                        best, best_votes, len(remaining))
            return Round(number, tally, excluded, elected=frozenset(best))
        last_tally = ballotcount.util.frequencies(
            ranking[-1] for ranking in remaining
        )
        worst, worst_votes = ballotcount.util.extreme_groups(last_tally)[2:]
        logger.info('eliminating %s with %d last preferences',
                    worst, worst_votes)
        return Round(
            number, tally, excluded,
            eliminated=frozenset(worst),
            last_tally=last_tally,
        )


@simple_serialization
class PluralityWithRunoff(SequentialEvaluator):
    '''Two-round system evaluated on ranked ballots.

    If a candidate has more than half of the first preference votes, they
    win outright. Otherwise, the candidates tied for the first place and
    those tied for the second place advance to a runoff, where every ballot
    counts for its most preferred advancing candidate (ballots ranking none
    of them are not counted). A candidate with more than half of the runoff
    votes wins; if there is none, nobody wins.

    Empty ballots count towards the first round total as abstentions.
    '''
    def rounds(self, votes: Iterable[Any]) -> Iterator[Round]:
        rankings = _prepare(votes)
        tally = ballotcount.util.frequencies(
            ranking[0] for ranking in rankings if ranking
        )
        logger.info('first round: %s', tally)
        if not tally:
            yield Round(1, tally, frozenset())
            return
        ordered = ballotcount.util.sorted_votes(tally)
        top_votes = ordered[0][1]
        if Fraction(top_votes, len(rankings)) > MAJORITY:
            logger.info('%s elected in first round', ordered[0][0])
            yield Round(1, tally, frozenset(), elected=frozenset([
                ordered[0][0]
            ]))
            return
        runners_up = [n_votes for _, n_votes in ordered if n_votes < top_votes]
        pool_threshold = runners_up[0] if runners_up else top_votes
        pool = frozenset(
            cand for cand, n_votes in ordered if n_votes >= pool_threshold
        )
        eliminated = frozenset(tally) - pool
        logger.info('runoff between %s', pool)
        yield Round(1, tally, frozenset(), eliminated=eliminated)
        runoff_tally = ballotcount.util.frequencies(
            cand for cand in (
                ballotcount.util.first_included(ranking, pool)
                for ranking in rankings
            )
            if cand is not None
        )
        logger.info('runoff: %s', runoff_tally)
        winner, winner_votes = ballotcount.util.sorted_votes(runoff_tally)[0]
        total = sum(runoff_tally.values())
        if Fraction(winner_votes, total) > MAJORITY:
            logger.info('%s elected in runoff', winner)
            yield Round(2, runoff_tally, eliminated,
                        elected=frozenset([winner]))
        else:
            logger.info('no runoff majority, no winner')
            yield Round(2, runoff_tally, eliminated)
