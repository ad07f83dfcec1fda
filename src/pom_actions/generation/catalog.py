"""Action catalog for lookup and registration of action rules."""

import logging
from typing import Dict, List, Optional

from ..models.generation_models import ActionRule

logger = logging.getLogger(__name__)

# Names taken by the generated method and its implementation
RESERVED_PARAMETERS = frozenset({"self", "session", "page"})


class ActionCatalog:
    """
    Registry of the actions a page object field may request.

    PATTERN: Name -> rule registry, extended without touching orchestration
    CRITICAL: lookup() is pure; unknown names return None
    GOTCHA: The default catalog is shared; copy() it before customizing
    """

    def __init__(self, rules: Optional[List[ActionRule]] = None):
        """
        Initialize the catalog.

        Args:
            rules: Optional initial rules, registered in order
        """
        self._rules: Dict[str, ActionRule] = {}
        for rule in rules or []:
            self.register(rule)

    def register(self, rule: ActionRule) -> None:
        """
        Register an action rule.

        Args:
            rule: Rule to register

        Raises:
            ValueError: If the action name is already registered or is not
                a valid identifier, or a parameter name is reserved or repeated
        """
        if not rule.name.isidentifier():
            raise ValueError(f"Action name '{rule.name}' is not a valid identifier")

        if rule.name in self._rules:
            raise ValueError(
                f"Action '{rule.name}' is already registered. "
                "Use a unique name for each action."
            )

        seen = set()
        for parameter in rule.parameters:
            if parameter.name in RESERVED_PARAMETERS:
                raise ValueError(
                    f"Action '{rule.name}' uses reserved parameter name '{parameter.name}'"
                )
            if not parameter.name.isidentifier() or parameter.name in seen:
                raise ValueError(
                    f"Action '{rule.name}' has invalid or duplicate parameter "
                    f"'{parameter.name}'"
                )
            seen.add(parameter.name)

        self._rules[rule.name] = rule
        logger.debug(f"Registered action: {rule.name} ({rule.method_template})")

    def unregister(self, action_name: str) -> None:
        """
        Unregister an action rule.

        Args:
            action_name: Name of action to remove
        """
        if action_name in self._rules:
            del self._rules[action_name]
            logger.debug(f"Unregistered action: {action_name}")
        else:
            logger.warning(f"Action '{action_name}' not found in catalog")

    def lookup(self, action_name: str) -> Optional[ActionRule]:
        """
        Look up the rule for an action name.

        Args:
            action_name: Action name requested by a field

        Returns:
            ActionRule or None if the action is not supported
        """
        return self._rules.get(action_name)

    def has_action(self, action_name: str) -> bool:
        return action_name in self._rules

    def list_actions(self) -> List[str]:
        """List supported action names, sorted."""
        return sorted(self._rules)

    def list_rules(self) -> List[ActionRule]:
        return [self._rules[name] for name in self.list_actions()]

    def copy(self) -> "ActionCatalog":
        """Return an independent catalog holding the same rules."""
        return ActionCatalog(list(self._rules.values()))

    def __contains__(self, action_name: object) -> bool:
        return action_name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


_default_catalog: Optional[ActionCatalog] = None


def default_catalog() -> ActionCatalog:
    """Get the shared catalog populated with the built-in actions."""
    global _default_catalog
    if _default_catalog is None:
        from .actions import builtin_rules

        _default_catalog = ActionCatalog(builtin_rules())
    return _default_catalog
