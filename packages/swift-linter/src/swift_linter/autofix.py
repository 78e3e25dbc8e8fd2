import logging
from typing import Dict, List, Sequence

from .models import Correction
from .rules.base import BaseRule, CorrectableRule
from .swift_file import SwiftFile

logger = logging.getLogger(__name__)


class AutoFixEngine:
    """Automatically fix linting issues using the correctable rules"""

    def __init__(self, rules: Sequence[BaseRule]):
        self._fixers: Dict[str, CorrectableRule] = {
            rule.rule_id: rule for rule in rules if isinstance(rule, CorrectableRule)
        }

    def can_fix(self, rule_id: str) -> bool:
        return rule_id in self._fixers

    def apply_fixes(self, file: SwiftFile) -> List[Correction]:
        """Run each correctable rule once against the file's current contents"""
        corrections: List[Correction] = []
        for rule_id, rule in self._fixers.items():
            applied = rule.correct(file)
            if applied:
                logger.debug("%s applied %d correction(s) to %s", rule_id, len(applied), file.path)
            corrections.extend(applied)
        return corrections
