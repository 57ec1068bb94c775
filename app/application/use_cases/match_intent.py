from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from app.domain.entities.keyword_rule import KeywordRule


@dataclass(frozen=True)
class MatchResult:
    rule: KeywordRule
    source: str  # "numeric", "keyword" or "default"

    @property
    def matched(self) -> bool:
        return self.source != "default"


class KeywordMatcherUseCase:
    """First-match-wins keyword matcher over already normalized text."""

    def __init__(
        self,
        rules: Sequence[KeywordRule],
        numeric_shortcuts: Mapping[str, KeywordRule],
        default_rule: KeywordRule,
    ) -> None:
        self._rules = tuple(rules)
        self._numeric_shortcuts = dict(numeric_shortcuts)
        self._default_rule = default_rule

    def execute(self, normalized_text: str) -> MatchResult:
        # Numbers are compared exactly so "1" never collides with keywords containing digits.
        shortcut = self._numeric_shortcuts.get(normalized_text)
        if shortcut is not None:
            return MatchResult(rule=shortcut, source="numeric")

        if normalized_text:
            for rule in self._rules:
                if any(keyword in normalized_text for keyword in rule.keywords):
                    return MatchResult(rule=rule, source="keyword")

        return MatchResult(rule=self._default_rule, source="default")
