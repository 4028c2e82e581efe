"""
Deterministic Overlap Resolver.

Reduces the aggregated candidate list to non-overlapping entities with fixed
priority rules:
1. Leftmost start wins
2. Same start → longest span wins
3. Same length → labeled (keyword-confirmed) wins
4. Still tied → earlier matcher in aggregation order wins

Once a span is committed it is never revised: a later candidate that starts
inside it is discarded, even when it extends past its end.
"""
import logging
from typing import List

from azner.models.entity import Entity
from azner.postprocessing.redaction import redact_for_log

logger = logging.getLogger(__name__)


def resolve_overlaps(entities: List[Entity]) -> List[Entity]:
    """
    Resolve overlapping candidates with a single greedy left-to-right sweep.

    Args:
        entities: All candidates in aggregation order (may overlap).

    Returns:
        Non-overlapping entities sorted by start offset.
    """
    if len(entities) <= 1:
        return list(entities)

    # Sort by start, then longest first, then labeled first, then by
    # position in the aggregated list (matcher priority)
    ranked = sorted(
        enumerate(entities),
        key=lambda item: (
            item[1].start,
            -item[1].span_length(),
            not item[1].labeled,
            item[0],
        ),
    )

    resolved: List[Entity] = []

    for _, entity in ranked:
        # Candidates arrive by start, so only the last committed span can
        # intersect; partial overlap and containment are both discarded.
        if resolved and entity.overlaps(resolved[-1]):
            logger.debug(
                "Discarded %s %s [%d,%d], overlaps committed span ending at %d",
                entity.type.value,
                redact_for_log(entity.report_text()),
                entity.start,
                entity.end,
                resolved[-1].end,
            )
            continue
        resolved.append(entity)

    resolved.sort(key=lambda e: e.start)
    return resolved
