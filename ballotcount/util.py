'''Various utility functions for other modules of Ballotcount.

There should normally be no need to use these functions directly.
'''

import operator
import collections
import collections.abc
from typing import Any, List, Tuple, Dict, Iterable, Collection, Optional
from numbers import Number

from ballotcount.vote import Candidate, RankedVoteType, payload


def sorted_votes(votes: Dict[Any, Number],
                 descending: bool = True,
                 ) -> List[Tuple[Any, Number]]:
    '''Return votes items sorted by value.'''
    return list(sorted(
        votes.items(),
        key=operator.itemgetter(1),
        reverse=descending
    ))


def frequencies(items: Iterable[Any]) -> Dict[Any, int]:
    '''Count occurrences of every item, consuming the iterable once.'''
    return dict(collections.Counter(items))


def replayable(votes: Iterable[Any]) -> Collection[Any]:
    '''Return votes as a collection that can be traversed repeatedly.

    Lists, tuples and other sized collections are returned as they are;
    iterators, generators and other single-use sources are materialized
    into a tuple, consuming them once.
    '''
    if isinstance(votes, collections.abc.Collection) \
            and not isinstance(votes, collections.abc.Iterator):
        return votes
    return tuple(votes)


def ranked_payloads(votes: Iterable[Any]) -> Tuple[RankedVoteType, ...]:
    '''Materialize ranked votes as tuples of candidates, unwrapping ballots.'''
    return tuple(tuple(payload(vote)) for vote in votes)


def first_remaining(ranking: RankedVoteType,
                    excluded: Collection[Candidate],
                    ) -> Optional[Candidate]:
    '''Return the most preferred candidate of a ranking not in excluded.

    :returns: None if the ranking contains excluded candidates only.
    '''
    for cand in ranking:
        if cand not in excluded:
            return cand
    return None


def first_included(ranking: RankedVoteType,
                   included: Collection[Candidate],
                   ) -> Optional[Candidate]:
    '''Return the most preferred candidate of a ranking that is in included.'''
    for cand in ranking:
        if cand in included:
            return cand
    return None


def extreme_groups(tally: Dict[Candidate, Number]
                   ) -> Tuple[List[Candidate], Number, List[Candidate], Number]:
    '''Find the candidates tied for the fewest and the most votes.

    Traverses the tally once.

    :param tally: A nonempty mapping of candidates to their vote counts.
    :returns: A 4-tuple of the candidates with the fewest votes, that number
        of votes, the candidates with the most votes and that number.
    '''
    lowest, lowest_val, highest, highest_val = [], None, [], None
    for cand, n_votes in tally.items():
        if highest_val is None or n_votes > highest_val:
            highest, highest_val = [cand], n_votes
        elif n_votes == highest_val:
            highest.append(cand)
        if lowest_val is None or n_votes < lowest_val:
            lowest, lowest_val = [cand], n_votes
        elif n_votes == lowest_val:
            lowest.append(cand)
    return lowest, lowest_val, highest, highest_val
