"""
Per-slide activation hooks.

A hook is a nullary callable run the first time a slide becomes visible,
typically to build charts that need a laid-out container. Hooks are looked
up by slide index:

1. the explicit mapping filled through ``ActivationHookRegistry.register``;
2. the naming convention handled by ``resolve_by_convention``: a callable
   ``activate_slide_<N>`` in the fallback namespace, or a shared dispatcher
   ``init_charts_for_slide(index)`` bound to the index;
3. nothing, in which case activation is a no-op.
"""

from functools import partial
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Set

from loguru import logger

ActivationHook = Callable[[], Any]

HOOK_NAME_TEMPLATE = "activate_slide_{index}"
DISPATCHER_NAME = "init_charts_for_slide"


def conventional_hook_name(index: int) -> str:
    """Name a per-slide hook is expected to have under the naming convention."""
    return HOOK_NAME_TEMPLATE.format(index=index)


def resolve_by_convention(namespace: Any, index: int) -> Optional[ActivationHook]:
    """
    Lowest-priority hook lookup by name.

    Args:
        namespace: A module, object or mapping holding hook callables
        index: Slide index

    Returns:
        A nullary callable, or None if the namespace has no matching hook
    """
    if namespace is None:
        return None

    def _lookup(name: str) -> Any:
        if isinstance(namespace, Mapping):
            return namespace.get(name)
        return getattr(namespace, name, None)

    hook = _lookup(conventional_hook_name(index))
    if callable(hook):
        return hook

    dispatcher = _lookup(DISPATCHER_NAME)
    if callable(dispatcher):
        return partial(dispatcher, index)
    return None


class ActivationHookRegistry:
    """Explicit index-to-hook mapping with an optional by-name fallback."""

    def __init__(self, hooks: Optional[Mapping[int, ActivationHook]] = None, fallback_namespace: Any = None):
        self._hooks: Dict[int, ActivationHook] = {}
        self.fallback_namespace = fallback_namespace
        for index, hook in (hooks or {}).items():
            self.register(index, hook)

    def register(self, index: int, hook: ActivationHook) -> None:
        """Register (or replace) the hook for a slide."""
        if not callable(hook):
            raise TypeError(f"Activation hook for slide {index} is not callable: {hook!r}")
        self._hooks[int(index)] = hook
        logger.debug(f"Registered activation hook for slide {index}")

    def registered_indices(self) -> FrozenSet[int]:
        return frozenset(self._hooks)

    def resolve(self, index: int) -> Optional[ActivationHook]:
        """Find the hook for a slide, explicit mapping first."""
        hook = self._hooks.get(index)
        if hook is not None:
            return hook
        return resolve_by_convention(self.fallback_namespace, index)


class ActivationTracker:
    """Slide indices whose hook has already run automatically. Only grows."""

    def __init__(self, activated: Iterable[int] = ()):
        self._activated: Set[int] = set(activated)

    def __contains__(self, index: int) -> bool:
        return index in self._activated

    def __len__(self) -> int:
        return len(self._activated)

    def mark(self, index: int) -> None:
        self._activated.add(index)

    def snapshot(self) -> FrozenSet[int]:
        return frozenset(self._activated)
