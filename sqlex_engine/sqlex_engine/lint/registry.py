"""Rule registry for discovering and managing lint rule implementations.

Provides a central registry where lint rules are registered and looked up
by their rule id.
"""

from __future__ import annotations

import logging

from sqlex_engine.lint.base import BaseLintRule

logger = logging.getLogger(__name__)


class LintRuleRegistry:
    """Registry for lint rule implementations.

    Maintains a mapping of rule id to :class:`BaseLintRule` instance.  The
    :class:`Linter` uses this to discover which rules are available.
    """

    def __init__(self) -> None:
        self._rules: dict[str, BaseLintRule] = {}

    def register(self, rule: BaseLintRule) -> None:
        """Register a rule implementation.

        Raises
        ------
        ValueError
            If a rule with the same ``rule_id`` is already registered.
        """
        if rule.rule_id in self._rules:
            raise ValueError(
                f"Lint rule {rule.rule_id} is already registered. "
                f"Unregister the existing rule first."
            )
        self._rules[rule.rule_id] = rule
        logger.debug("Registered lint rule: %s", rule.rule_id)

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry.

        Raises
        ------
        KeyError
            If the rule is not registered.
        """
        if rule_id not in self._rules:
            raise KeyError(f"Lint rule {rule_id} is not registered.")
        del self._rules[rule_id]
        logger.debug("Unregistered lint rule: %s", rule_id)

    def get(self, rule_id: str) -> BaseLintRule | None:
        """Look up a rule by id.  Returns ``None`` if it is not registered."""
        return self._rules.get(rule_id)

    def get_all(self) -> list[BaseLintRule]:
        """Return all registered rules, sorted by rule id."""
        return [self._rules[rule_id] for rule_id in sorted(self._rules)]

    def get_ids(self) -> list[str]:
        """Return all registered rule ids, sorted."""
        return sorted(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: str) -> bool:
        return rule_id in self._rules
