"""Tests for activation hook lookup and the hook module loader."""

import sys
import types
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from deckview.navigation.activation import (
    ActivationHookRegistry,
    ActivationTracker,
    conventional_hook_name,
    resolve_by_convention,
)
from deckview.navigation.hook_loader import load_hook_registry


class TestResolveByConvention:

    def test_per_slide_function(self):
        hook = MagicMock()
        namespace = SimpleNamespace(activate_slide_3=hook)

        assert resolve_by_convention(namespace, 3) is hook
        assert resolve_by_convention(namespace, 2) is None

    def test_dispatcher_bound_to_index(self):
        dispatcher = MagicMock()
        namespace = {"init_charts_for_slide": dispatcher}

        hook = resolve_by_convention(namespace, 4)
        hook()

        dispatcher.assert_called_once_with(4)

    def test_per_slide_function_wins_over_dispatcher(self):
        per_slide = MagicMock()
        dispatcher = MagicMock()
        namespace = {"activate_slide_1": per_slide, "init_charts_for_slide": dispatcher}

        resolve_by_convention(namespace, 1)()

        per_slide.assert_called_once_with()
        dispatcher.assert_not_called()

    def test_non_callable_names_are_ignored(self):
        namespace = SimpleNamespace(activate_slide_0="not a function")

        assert resolve_by_convention(namespace, 0) is None

    def test_no_namespace(self):
        assert resolve_by_convention(None, 0) is None

    def test_hook_name(self):
        assert conventional_hook_name(7) == "activate_slide_7"


class TestActivationHookRegistry:

    def test_explicit_mapping_wins(self):
        explicit = MagicMock()
        convention = MagicMock()
        registry = ActivationHookRegistry(
            {2: explicit}, fallback_namespace={"activate_slide_2": convention}
        )

        assert registry.resolve(2) is explicit

    def test_falls_back_to_namespace(self):
        convention = MagicMock()
        registry = ActivationHookRegistry(fallback_namespace={"activate_slide_2": convention})

        assert registry.resolve(2) is convention
        assert registry.resolve(3) is None

    def test_register_rejects_non_callable(self):
        registry = ActivationHookRegistry()

        with pytest.raises(TypeError):
            registry.register(0, "chart")

    def test_register_replaces(self):
        first, second = MagicMock(), MagicMock()
        registry = ActivationHookRegistry({0: first})
        registry.register(0, second)

        assert registry.resolve(0) is second
        assert registry.registered_indices() == frozenset({0})


class TestActivationTracker:

    def test_tracks_marked_indices(self):
        tracker = ActivationTracker()
        tracker.mark(1)
        tracker.mark(1)
        tracker.mark(3)

        assert 1 in tracker
        assert 2 not in tracker
        assert len(tracker) == 2
        assert tracker.snapshot() == frozenset({1, 3})


class TestLoadHookRegistry:

    @pytest.fixture
    def hook_module(self):
        module = types.ModuleType("deck_hooks_under_test")
        module.explicit = MagicMock()
        module.SLIDE_HOOKS = {0: module.explicit}
        module.init_charts_for_slide = MagicMock()
        sys.modules[module.__name__] = module
        yield module
        sys.modules.pop(module.__name__, None)

    def test_loads_mapping_and_convention(self, hook_module):
        registry = load_hook_registry(hook_module.__name__)

        assert registry.resolve(0) is hook_module.explicit
        registry.resolve(5)()
        hook_module.init_charts_for_slide.assert_called_once_with(5)

    def test_missing_module_gives_empty_registry(self, log_messages):
        registry = load_hook_registry("deckview_no_such_hook_module")

        assert registry.registered_indices() == frozenset()
        assert registry.resolve(0) is None
        assert any(record["level"].name == "ERROR" for record in log_messages)

    def test_no_module(self):
        assert load_hook_registry(None).resolve(0) is None

    def test_non_mapping_hooks_are_ignored(self, hook_module, log_messages):
        hook_module.SLIDE_HOOKS = [lambda: None]

        registry = load_hook_registry(hook_module.__name__)

        assert registry.registered_indices() == frozenset()
        registry.resolve(2)()
        hook_module.init_charts_for_slide.assert_called_once_with(2)
        assert any("SLIDE_HOOKS" in record["message"] for record in log_messages)

    def test_module_raising_on_import_gives_empty_registry(self, tmp_path, monkeypatch, log_messages):
        (tmp_path / "deck_hooks_that_raise.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        registry = load_hook_registry("deck_hooks_that_raise")

        assert registry.registered_indices() == frozenset()
        assert registry.resolve(0) is None
        assert any(record["exception"] is not None for record in log_messages)
        sys.modules.pop("deck_hooks_that_raise", None)
