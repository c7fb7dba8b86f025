"""
Batch correlation

A server may return batch outcomes in any order and may answer calls it could
not parse with id-less errors. ``correlate`` matches outcomes to the submitted
calls by identifier, never by position.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from seam_rpc.protocol.types import BatchResponse, MethodCall, Outcome, Response


@dataclass
class Correlation:
    """Outcomes aligned with the calls that produced them

    Attributes:
        pairs: One (call, outcome) pair per submitted call, in submission
            order; outcome is None when the server sent nothing for the call
        orphans: Outcomes that match no submitted call (id-less errors,
            unknown ids, duplicate replies)
    """
    pairs: List[Tuple[MethodCall, Optional[Outcome]]] = field(default_factory=list)
    orphans: List[Outcome] = field(default_factory=list)

    def outcomes(self) -> List[Optional[Outcome]]:
        return [outcome for _, outcome in self.pairs]

    def missing(self) -> List[MethodCall]:
        return [call for call, outcome in self.pairs if outcome is None]

    @property
    def complete(self) -> bool:
        return not self.orphans and all(outcome is not None for _, outcome in self.pairs)


def correlate(calls: Iterable[MethodCall], response: Response) -> Correlation:
    """Match a response to the calls that were submitted

    Args:
        calls: Calls in submission order
        response: Single or batch response returned by the executor

    Returns:
        Correlation: Per-call outcomes in submission order plus orphans
    """
    calls = list(calls)
    if isinstance(response, BatchResponse):
        received = list(response.outcomes)
    else:
        received = [response.outcome]

    by_id: Dict[object, Outcome] = {}
    orphans: List[Outcome] = []
    submitted_ids = {call.id for call in calls}

    for outcome in received:
        if outcome.id is None or outcome.id not in submitted_ids or outcome.id in by_id:
            orphans.append(outcome)
            continue
        by_id[outcome.id] = outcome

    return Correlation(
        pairs=[(call, by_id.get(call.id)) for call in calls],
        orphans=orphans,
    )
