'''Ballot types and vote errors.

A ballot is a single voter's submitted preference. Ballotcount recognizes
four mutually exclusive ballot types:

-   **Plurality** ballots - a voter votes for a single candidate. Represented
    by :class:`PluralityBallot`, or by the candidate object itself.
-   **Approval** ballots - a voter selects a number of candidates and votes
    for them equally. Represented by :class:`ApprovalBallot`, or by any
    iterable of candidates (duplicates count once).
-   **Ranked** ballots - a voter orders a number of candidates from most to
    least preferred. Represented by :class:`RankedBallot`, or by a sequence
    of candidate objects. Candidates left out are not preferred to any
    ranked candidate.
-   **Score** ballots - a voter assigns a numeric score to a number of
    candidates. Represented by :class:`ScoreBallot`, or by a mapping of
    candidates to scores.

Candidates can be any hashable objects such as strings or integers; they
are only ever compared for equality.

The counting functions accept both the ballot objects and the raw
representations; :func:`payload` unwraps the former into the latter.
Ballot objects additionally carry an identifier, which lets an
:class:`ballotcount.election.Election` reject duplicate ballots.

Vote errors are raised by the election ballot validators. Each of them
carries a :class:`CastError` reason that the election reports to the caller
instead of raising.
'''

import abc
import enum
import types
import uuid
from typing import Any, Hashable, List, FrozenSet, Mapping, Sequence, Optional
from numbers import Number


Candidate = Hashable

SimpleVoteType = Candidate
ApprovalVoteType = FrozenSet[Candidate]
RankedVoteType = Sequence[Candidate]
ScoreVoteType = Mapping[Candidate, Number]


class CastError(enum.Enum):
    '''Reason for an election refusing to accept a ballot.'''
    WRONG_VOTE_TYPE = 'wrong_vote_type'
    DUPLICATE_VOTE = 'duplicate_vote'
    CANDIDATE_NOT_IN_ELECTION = 'candidate_not_in_election'


class VoteError(Exception, metaclass=abc.ABCMeta):
    '''A ballot is invalid given the election state.'''
    reason: CastError


class VoteTypeError(VoteError):
    '''A ballot is of a different type than the ballots already cast.

    :param vtype: Ballot type detected as invalid.
    :param expected: Ballot type that was expected.
    '''
    reason = CastError.WRONG_VOTE_TYPE

    def __init__(self, vtype: type, expected: type = None):
        self.vtype = vtype
        self.expected = expected
        message = f'invalid ballot type: {vtype.__name__}'
        if expected:
            message += f', must be {expected.__name__}'
        super().__init__(message)


class DuplicateVoteError(VoteError):
    '''A ballot with the same identifier has already been cast.

    :param ballot_id: The repeated identifier.
    '''
    reason = CastError.DUPLICATE_VOTE

    def __init__(self, ballot_id: Any):
        self.ballot_id = ballot_id
        super().__init__(f'ballot {ballot_id!r} already cast')


class CandidateNotInElectionError(VoteError):
    '''A ballot names candidates not standing in the election.

    :param candidates: The offending candidates.
    '''
    reason = CastError.CANDIDATE_NOT_IN_ELECTION

    def __init__(self, candidates: FrozenSet[Candidate]):
        self.candidates = candidates
        super().__init__(
            'candidates not in election: '
            + ', '.join(sorted(repr(cand) for cand in candidates))
        )


def new_ballot_id() -> str:
    '''Return a fresh random ballot identifier.'''
    return uuid.uuid4().hex


class Ballot(metaclass=abc.ABCMeta):
    '''A single cast ballot. Base class, not intended for direct use.

    Ballots are immutable; their type never changes after creation.

    :param id: Identifier of the ballot, unique within an election.
        A random one is generated if not given.
    '''
    __slots__ = ('_id', )

    def __init__(self, id: Optional[Hashable] = None):
        self._id = new_ballot_id() if id is None else id

    @property
    def id(self) -> Hashable:
        return self._id

    @property
    @abc.abstractmethod
    def content(self) -> Any:
        '''The raw vote accepted by the counting functions.'''
        raise NotImplementedError

    @abc.abstractmethod
    def candidates(self) -> List[Candidate]:
        '''Return all candidates named by the ballot, in no particular order.'''
        raise NotImplementedError

    def __eq__(self, other: Any) -> bool:
        return (
            type(self) is type(other)
            and self._id == other._id
            and self.content == other.content
        )

    def __hash__(self) -> int:
        return hash((type(self), self._id))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.content!r}, id={self._id!r})'


class PluralityBallot(Ballot):
    '''A vote for a single candidate.'''
    __slots__ = ('_choice', )

    def __init__(self, choice: Candidate, id: Optional[Hashable] = None):
        super().__init__(id)
        self._choice = choice

    @property
    def choice(self) -> Candidate:
        return self._choice

    @property
    def content(self) -> Candidate:
        return self._choice

    def candidates(self) -> List[Candidate]:
        return [self._choice]


class ApprovalBallot(Ballot):
    '''An equal vote for each of a set of approved candidates.

    Repeated candidates collapse into a single approval.
    '''
    __slots__ = ('_choices', )

    def __init__(self, choices, id: Optional[Hashable] = None):
        super().__init__(id)
        self._choices = frozenset(choices)

    @property
    def choices(self) -> FrozenSet[Candidate]:
        return self._choices

    @property
    def content(self) -> FrozenSet[Candidate]:
        return self._choices

    def candidates(self) -> List[Candidate]:
        return list(self._choices)


class RankedBallot(Ballot):
    '''A ranking of candidates from the most to the least preferred.'''
    __slots__ = ('_choices', )

    def __init__(self, choices, id: Optional[Hashable] = None):
        super().__init__(id)
        self._choices = tuple(choices)

    @property
    def choices(self) -> RankedVoteType:
        return self._choices

    @property
    def content(self) -> RankedVoteType:
        return self._choices

    def candidates(self) -> List[Candidate]:
        return list(self._choices)


class ScoreBallot(Ballot):
    '''A numeric score for each of a number of candidates.'''
    __slots__ = ('_scores', )

    def __init__(self,
                 scores: ScoreVoteType,
                 id: Optional[Hashable] = None,
                 ):
        super().__init__(id)
        self._scores = types.MappingProxyType(dict(scores))

    @property
    def scores(self) -> ScoreVoteType:
        return self._scores

    @property
    def content(self) -> ScoreVoteType:
        return self._scores

    def candidates(self) -> List[Candidate]:
        return list(self._scores.keys())


BALLOT_TYPES = (PluralityBallot, ApprovalBallot, RankedBallot, ScoreBallot)


def payload(vote: Any) -> Any:
    '''Unwrap a ballot object into its raw vote; leave raw votes unchanged.'''
    if isinstance(vote, Ballot):
        return vote.content
    return vote
