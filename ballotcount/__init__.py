"""Ballotcount - a library for counting votes.

Ballotcount determines the winners of single-winner elections under a number
of well known voting systems:

-   plurality, with a quota or with a runoff,
-   instant-runoff voting and the Coombs method,
-   the Borda count and the Dowdall system,
-   approval voting, score voting and majority judgement.

Candidates can be any hashable objects, for example names or ID numbers.
Ballots are plain Python values - a candidate, a collection of approved
candidates, a ranking (sequence of candidates from the most preferred) or
a mapping of candidates to scores - or the ballot objects from the ``vote``
module that carry an identifier.

    >>> import ballotcount
    >>> ballotcount.instant_runoff([['A', 'B'], ['B', 'C'], ['C'], ['C']])
    'C'

The counting functions return the winner, a ``Tie`` of all the winners if
several candidates share the best result, or None if nobody wins. The
single-pass systems (all but the runoff and elimination systems) consume the
ballots exactly once, so they can be given a stream of ballots.

The :mod:`election` module collects validated ballots for a single election;
the evaluators in the :mod:`evaluate` subpackage are the configurable
objects behind the counting functions.
"""

from ballotcount.count import *    # noqa
