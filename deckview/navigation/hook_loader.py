"""
Load activation hooks from a user-supplied Python module.

The module may define ``SLIDE_HOOKS``, a mapping of slide index to nullary
callable. The module itself is also used as the naming-convention fallback,
so ``activate_slide_3()`` or ``init_charts_for_slide(index)`` defined at
module level are picked up without registration.
"""

import importlib
from typing import Mapping, Optional

from loguru import logger

from .activation import ActivationHookRegistry

HOOK_MAPPING_ATTRIBUTE = "SLIDE_HOOKS"


def load_hook_registry(module_name: Optional[str]) -> ActivationHookRegistry:
    """
    Build a hook registry from a module path such as ``mydeck.charts``.

    A module that fails to import, or whose ``SLIDE_HOOKS`` is unusable, is
    logged and yields an empty registry; a deck without hooks still navigates.
    """
    if not module_name:
        return ActivationHookRegistry()

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        logger.error(f"Could not import activation hook module {module_name}: {e}")
        return ActivationHookRegistry()
    except Exception:
        logger.exception(f"Activation hook module {module_name} failed while importing")
        return ActivationHookRegistry()

    mapping = getattr(module, HOOK_MAPPING_ATTRIBUTE, None) or {}
    if not isinstance(mapping, Mapping):
        logger.error(
            f"{HOOK_MAPPING_ATTRIBUTE} in {module_name} must map slide indices to callables, "
            f"got {type(mapping).__name__}; ignoring it"
        )
        mapping = {}

    try:
        registry = ActivationHookRegistry(mapping, fallback_namespace=module)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid {HOOK_MAPPING_ATTRIBUTE} in {module_name}: {e}")
        registry = ActivationHookRegistry(fallback_namespace=module)

    logger.info(f"Loaded activation hooks from {module_name} ({len(registry.registered_indices())} explicit)")
    return registry
