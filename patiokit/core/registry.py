"""Rule registry — stores part rules and resolves their run order.

Rules run in assembly order: lowest priority first, registration order
between equal priorities. A rule that declares dependencies is held back
until every selected dependency has run. The standard registries also
require each dependency to be registered with a lower priority, so the
declared priorities already describe the build sequence.
"""

from __future__ import annotations
import logging
from typing import Any

from patiokit.models import GenerationOptions
from patiokit.rules.base import PartRule

logger = logging.getLogger(__name__)


class RuleRegistryError(ValueError):
    """Raised for an inconsistent rule set: unknown or out-of-order dependencies, or cycles."""


class RuleRegistry:
    """Central registry for the part rules of one product line."""

    def __init__(self) -> None:
        self._rules: dict[str, PartRule] = {}

    def register(self, rule: PartRule) -> None:
        """Register a rule; a rule with the same id is replaced in place."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> PartRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[PartRule]:
        return list(self._rules.values())

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def problems(self) -> list[str]:
        """Describe every dependency that is missing or does not run earlier."""
        found: list[str] = []
        for rule in self._rules.values():
            for dep_id in rule.dependencies:
                dep = self._rules.get(dep_id)
                if dep is None:
                    found.append(f"{rule.get_id()} depends on unregistered rule {dep_id}")
                elif dep.priority >= rule.priority:
                    found.append(
                        f"{rule.get_id()} (priority {rule.priority}) depends on "
                        f"{dep_id} (priority {dep.priority})"
                    )
        return found

    def validate(self) -> None:
        problems = self.problems()
        if problems:
            raise RuleRegistryError("; ".join(problems))

    def get_applicable_rules(self, context: Any) -> list[PartRule]:
        """Rules selected by the context's options that apply, in run order."""
        selected = [
            rule for rule in self._rules.values()
            if _is_selected(rule.get_id(), context.options) and rule.applies(context)
        ]
        return self._run_order(selected)

    def _run_order(self, rules: list[PartRule]) -> list[PartRule]:
        position = {rule_id: i for i, rule_id in enumerate(self._rules)}
        pending = sorted(rules, key=lambda r: (r.priority, position[r.get_id()]))
        present = {r.get_id() for r in pending}
        done: set[str] = set()
        ordered: list[PartRule] = []

        while pending:
            # Dependencies that were filtered out or do not apply are ignored
            ready = next(
                (
                    i for i, rule in enumerate(pending)
                    if all(d in done or d not in present for d in rule.dependencies)
                ),
                None,
            )
            if ready is None:
                ids = ", ".join(r.get_id() for r in pending)
                raise RuleRegistryError(f"Dependency cycle among rules: {ids}")
            rule = pending.pop(ready)
            done.add(rule.get_id())
            ordered.append(rule)

        logger.debug("Rule order: %s", [r.get_id() for r in ordered])
        return ordered


def _is_selected(rule_id: str, options: GenerationOptions) -> bool:
    if options.enabled_rules and rule_id not in options.enabled_rules:
        return False
    return rule_id not in options.disabled_rules


def create_default_registry() -> RuleRegistry:
    """Registry with every patio roof rule, in assembly order."""
    from patiokit.rules.site.surroundings import GroundRule, HouseWallRule
    from patiokit.rules.frame.posts import BasePlateRule, ColumnRule, WallBracketRule
    from patiokit.rules.frame.beams import PerimeterBeamRule, PurlinRule
    from patiokit.rules.roof.flat import FlatRoofRule
    from patiokit.rules.roof.gable import GableRoofRule
    from patiokit.rules.roof.skyline import SkylineRoofRule
    from patiokit.rules.accessories.drainage import GutterRule
    from patiokit.rules.accessories.fixtures import (
        DesignerBeamRule, LightRule, FanRule, DecorativeColumnRule,
    )

    return _build_registry(
        GroundRule(),
        HouseWallRule(),
        BasePlateRule(),
        ColumnRule(),
        WallBracketRule(),
        PerimeterBeamRule(),
        PurlinRule(),
        FlatRoofRule(),
        GableRoofRule(),
        SkylineRoofRule(),
        GutterRule(),
        DesignerBeamRule(),
        LightRule(),
        FanRule(),
        DecorativeColumnRule(),
    )


def create_deck_registry() -> RuleRegistry:
    """Registry with every deck rule, from the footings up."""
    from patiokit.rules.deck.substructure import (
        DeckGroundRule, DeckPostRule, BearerRule, JoistRule,
    )
    from patiokit.rules.deck.surface import BoardRule, StairRule
    from patiokit.rules.deck.railings import RailingRule, GlassPanelRule

    return _build_registry(
        DeckGroundRule(),
        DeckPostRule(),
        BearerRule(),
        JoistRule(),
        BoardRule(),
        StairRule(),
        RailingRule(),
        GlassPanelRule(),
    )


def _build_registry(*rules: PartRule) -> RuleRegistry:
    registry = RuleRegistry()
    for rule in rules:
        registry.register(rule)
    registry.validate()
    return registry
