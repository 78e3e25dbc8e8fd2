import logging
from typing import List, Sequence, Tuple

from .location import SourceLocationResolver
from .models import CharRange, Correction, CorrectionEdit, RuleState
from .suppression import SuppressionFilter

logger = logging.getLogger(__name__)


def apply_corrections(
    contents: str,
    edits: Sequence[CorrectionEdit],
    resolver: SourceLocationResolver,
    suppression: SuppressionFilter,
    rule_id: str,
    replacement: str,
) -> Tuple[str, List[Correction]]:
    """Replace every edit's span with `replacement`.

    Edits are resolved and filtered before anything is mutated, then applied from
    the end of the file towards the start so that pending ranges, which all lie
    earlier in the file, keep their offsets. Each correction is located at its
    range in the original contents. Corrections come back in application order
    (last offset first).
    """
    ranges: List[CharRange] = []
    for edit in edits:
        char_range = resolver.char_range(edit.start, edit.end)
        if char_range is None:
            logger.debug("Dropping %s edit with unresolvable span %d-%d", rule_id, edit.start, edit.end)
            continue
        state = suppression.rule_state(char_range, rule_id)
        if state is not RuleState.ENABLED:
            logger.debug("Skipping %s edit at %d: rule %s", rule_id, char_range.start, state.value)
            continue
        ranges.append(char_range)

    corrections = []
    for char_range in sorted(ranges, key=lambda r: r.start, reverse=True):
        location = resolver.location(char_range.start)
        if location is None:
            continue
        contents = contents[:char_range.start] + replacement + contents[char_range.end:]
        corrections.append(Correction(rule_id=rule_id, location=location))

    return contents, corrections
