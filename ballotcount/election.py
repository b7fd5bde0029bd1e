'''Elections collecting validated ballots.

An :class:`Election` holds the set of candidates standing and the ballots
cast so far. Casting a ballot never modifies an election; it produces a new
one with the ballot added, provided that the ballot passes all of the
election's validators:

-   all the ballots in an election are of the same type,
-   no two ballots share an identifier,
-   every candidate named by a ballot stands in the election.

Refusing a ballot is an expected outcome, so it is reported through
a :class:`CastResult` rather than raised. The ballots of an election can be
handed directly to any counting function accepting their type::

    result = Election(['A', 'B']).cast(PluralityBallot('A'))
    if result.ok:
        winner = ballotcount.plurality(result.election.ballots)
'''

import abc
import logging
from typing import Any, Iterable, Iterator, FrozenSet, Optional, Tuple

from ballotcount.vote import (
    Ballot, BALLOT_TYPES, Candidate, CastError, VoteError, VoteTypeError,
    DuplicateVoteError, CandidateNotInElectionError,
)

logger = logging.getLogger(__name__)


class BallotValidator(metaclass=abc.ABCMeta):
    '''Validate that a ballot can be added to an election.

    Base class, not intended for direct use.
    '''
    @abc.abstractmethod
    def validate(self, election: 'Election', ballot: Ballot) -> None:
        '''Check if the ballot can join the ballots already cast.

        :raises VoteError: If it cannot.
        '''
        raise NotImplementedError


class BallotTypeValidator(BallotValidator):
    '''Require a ballot object of the type of the first ballot cast.'''

    def validate(self, election: 'Election', ballot: Ballot) -> None:
        '''Check the ballot type.

        :raises VoteTypeError: If the ballot is not a ballot object or its
            type differs from the type of the ballots already cast.
        '''
        if not isinstance(ballot, BALLOT_TYPES):
            raise VoteTypeError(type(ballot))
        expected = election.ballot_type
        if expected is not None and type(ballot) is not expected:
            raise VoteTypeError(type(ballot), expected)


class UniqueIdValidator(BallotValidator):
    '''Require the ballot identifier not to be used yet.'''

    def validate(self, election: 'Election', ballot: Ballot) -> None:
        '''Check the ballot identifier.

        :raises DuplicateVoteError: If a ballot with the same identifier has
            already been cast.
        '''
        if ballot.id in election.ballot_ids:
            raise DuplicateVoteError(ballot.id)


class CandidateValidator(BallotValidator):
    '''Require the ballot to name only candidates standing in the election.'''

    def validate(self, election: 'Election', ballot: Ballot) -> None:
        '''Check the candidates named by the ballot.

        :raises CandidateNotInElectionError: If any of them does not stand.
        '''
        unknown = frozenset(ballot.candidates()) - election.candidates
        if unknown:
            raise CandidateNotInElectionError(unknown)


VALIDATORS = (BallotTypeValidator(), UniqueIdValidator(), CandidateValidator())


class CastResult:
    '''The outcome of casting a ballot in an election.

    :param election: The election with the ballot added, or the original
        election if the ballot was refused.
    :param error: The reason for refusing the ballot; None if it was
        accepted.
    '''
    __slots__ = ('election', 'error')

    def __init__(self,
                 election: 'Election',
                 error: Optional[CastError] = None,
                 ):
        self.election = election
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f'CastResult(ok, {self.election!r})'
        else:
            return f'CastResult({self.error.name})'


class Election:
    '''A single election: candidates standing and ballots cast.

    Elections are immutable; :meth:`cast` produces new elections.

    :param candidates: The candidates standing. Repeated candidates collapse.
    '''
    __slots__ = ('_candidates', '_ballots', '_ballot_ids')

    def __init__(self, candidates: Iterable[Candidate]):
        self._candidates = frozenset(candidates)
        self._ballots = ()
        self._ballot_ids = frozenset()

    @classmethod
    def new(cls, candidates: Iterable[Candidate]) -> 'Election':
        '''Create an empty election with the given candidates standing.'''
        return cls(candidates)

    @classmethod
    def _with_ballots(cls,
                      candidates: FrozenSet[Candidate],
                      ballots: Tuple[Ballot, ...],
                      ballot_ids: FrozenSet[Any],
                      ) -> 'Election':
        election = cls(candidates)
        election._ballots = ballots
        election._ballot_ids = ballot_ids
        return election

    @property
    def candidates(self) -> FrozenSet[Candidate]:
        return self._candidates

    @property
    def ballots(self) -> Tuple[Ballot, ...]:
        '''Ballots cast, the most recent first.'''
        return self._ballots

    @property
    def ballot_ids(self) -> FrozenSet[Any]:
        return self._ballot_ids

    @property
    def ballot_type(self) -> Optional[type]:
        '''The type of the ballots cast; None if there are none yet.'''
        if self._ballots:
            return type(self._ballots[-1])
        return None

    def __len__(self) -> int:
        return len(self._ballots)

    def __iter__(self) -> Iterator[Ballot]:
        return iter(self._ballots)

    def __repr__(self) -> str:
        return (
            'Election({' + ', '.join(sorted(map(repr, self._candidates)))
            + f'}}, n_ballots={len(self._ballots)})'
        )

    def validate(self, ballot: Ballot) -> None:
        '''Check that the ballot can be cast in the election.

        The checks are done in order: ballot type, identifier, candidates.

        :raises VoteError: If the ballot cannot be cast.
        '''
        for validator in VALIDATORS:
            validator.validate(self, ballot)

    def cast(self, ballot: Ballot) -> CastResult:
        '''Cast a ballot.

        :param ballot: A ballot object.
        :returns: A successful result holding a new election with the ballot
            added, or a failed result holding this election and the reason
            for refusal.
        '''
        try:
            self.validate(ballot)
        except VoteError as err:
            logger.debug('ballot %r refused: %s',
                         getattr(ballot, 'id', ballot), err)
            return CastResult(self, err.reason)
        return CastResult(self._with_ballots(
            self._candidates,
            (ballot, ) + self._ballots,
            self._ballot_ids | {ballot.id},
        ))

    def cast_all(self, ballots: Iterable[Ballot]) -> CastResult:
        '''Cast several ballots in turn.

        Stops at the first ballot refused.

        :returns: The result of the last cast performed; a successful result
            holding this election if there were no ballots.
        '''
        result = CastResult(self)
        for ballot in ballots:
            result = result.election.cast(ballot)
            if not result.ok:
                break
        return result
