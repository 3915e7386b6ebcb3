"""
Hook Registry - Read-only lookup of hook configurations.

The registry is built once at startup and handed to the orchestrator.
It is never mutated afterwards, so concurrent requests read it without
locking.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Optional

from .exceptions import ConfigurationError, HookNotFoundError
from .models import Hook


logger = logging.getLogger(__name__)


class HookRegistry:
    """
    Immutable mapping from hook id to Hook, with a designated default.

    Usage:
        registry = HookRegistry(hooks, default_hook_id="post")
        hook = registry.lookup("comment")
        default = registry.lookup()
    """

    def __init__(
        self,
        hooks: Iterable[Hook],
        default_hook_id: str,
    ) -> None:
        by_id: dict[str, Hook] = {}
        for hook in hooks:
            if hook.hook_id in by_id:
                raise ConfigurationError(
                    f"Duplicate hook id: {hook.hook_id}",
                    hook_id=hook.hook_id,
                    stage="configuration",
                )
            by_id[hook.hook_id] = hook

        if not by_id:
            raise ConfigurationError("No hooks configured", stage="configuration")
        if default_hook_id not in by_id:
            raise ConfigurationError(
                f"Default hook '{default_hook_id}' is not registered",
                hook_id=default_hook_id,
                stage="configuration",
            )

        self._hooks = MappingProxyType(by_id)
        self._default_hook_id = default_hook_id
        logger.info(
            f"Hook registry loaded: {len(by_id)} hooks, default '{default_hook_id}'"
        )

    @property
    def default_hook_id(self) -> str:
        return self._default_hook_id

    @property
    def hook_ids(self) -> list[str]:
        return list(self._hooks.keys())

    def lookup(self, hook_id: Optional[str] = None) -> Hook:
        """
        Resolve a hook id.

        Omitted (None or empty) selects the default hook.

        Raises:
            HookNotFoundError: hook_id is supplied but not registered
        """
        if not hook_id:
            return self._hooks[self._default_hook_id]

        hook = self._hooks.get(hook_id)
        if hook is None:
            raise HookNotFoundError(
                f"Hook '{hook_id}' is not registered",
                hook_id=hook_id,
                stage="lookup",
            )
        return hook

    def __contains__(self, hook_id: object) -> bool:
        return hook_id in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)
