'''Evaluate the results of the elections.

All evaluators take an iterable of ballots in their ``evaluate()`` method and
return the winning candidate. If several candidates share the win,
a :class:`core.Tie` object containing all of them is returned; if nobody
wins, the result is None.

*Single-pass* evaluators (plurality, quota, positional, approval and
cardinal systems) traverse the ballots once, so any iterable, including
a generator, can be counted. *Sequential* evaluators (instant runoff, Coombs,
plurality with runoff) count the ballots repeatedly and materialize
single-use iterables first.

None of the evaluators validate ballots; use an
:class:`ballotcount.election.Election` for that.
'''

from ballotcount.evaluate.core import *    # noqa
