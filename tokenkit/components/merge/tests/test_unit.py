"""
Merge component unit tests.

Deep-merge policy, platform overlay selection and non-fatal overlay failures.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

import pytest

from tokenkit.components.merge import (
    OverlayLoadError,
    ResolveTokensInput,
    clone_tree,
    deep_merge,
    resolve_tokens,
    run,
)
from tokenkit.core.entities import Platform, freeze

# --- Mock Overlay Sources ---


class StaticOverlaySource:
    """In-memory overlay source for testing."""

    def __init__(self, overlays: dict[str, dict]) -> None:
        self._overlays = overlays
        self.calls: list[str] = []

    def load(self, platform: str) -> dict:
        self.calls.append(platform)
        return self._overlays.get(platform, {})


class FailingOverlaySource:
    """Overlay source whose data is unavailable."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def load(self, platform: str) -> dict:
        raise self._exc


BASE = freeze(
    {
        "colors": {"primary": "#2196F3", "text": "#000000"},
        "layout": {"borderRadius": {"small": 4, "medium": 8}},
        "components": {"button": {"hapticFeedback": True}},
    }
)


# --- deep_merge ---


class TestDeepMerge:
    def test_overlay_leaf_wins(self) -> None:
        assert deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_keys_from_both_sides_kept(self) -> None:
        assert deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_nested_subtrees_merged(self) -> None:
        merged = deep_merge(
            {"r": {"small": 4, "medium": 8}},
            {"r": {"small": 6}},
        )
        assert merged == {"r": {"small": 6, "medium": 8}}

    def test_overlay_leaf_replaces_base_subtree(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}

    def test_overlay_subtree_replaces_base_leaf(self) -> None:
        assert deep_merge({"a": "flat"}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_overlay_none_leaf_wins(self) -> None:
        assert deep_merge({"blur": "light"}, {"blur": None}) == {"blur": None}

    def test_non_mapping_overlay_replaces_base(self) -> None:
        assert deep_merge({"a": 1}, 5) == 5

    def test_empty_overlay_clones_base(self) -> None:
        base = {"a": {"b": 1}}
        merged = deep_merge(base, {})
        assert merged == base
        assert merged is not base
        assert merged["a"] is not base["a"]

    def test_result_shares_no_nodes_with_inputs(self) -> None:
        base = {"only_base": {"x": [1, 2]}, "both": {"y": 1}}
        overlay = {"only_overlay": {"z": 3}, "both": {"w": 2}}
        merged = deep_merge(base, overlay)

        assert merged["only_base"] is not base["only_base"]
        assert merged["only_base"]["x"] is not base["only_base"]["x"]
        assert merged["only_overlay"] is not overlay["only_overlay"]
        assert merged["both"] is not base["both"]
        assert merged["both"] is not overlay["both"]

    def test_inputs_not_modified(self) -> None:
        base = {"a": {"b": 1}}
        overlay = {"a": {"c": 2}}
        deep_merge(base, overlay)
        assert base == {"a": {"b": 1}}
        assert overlay == {"a": {"c": 2}}

    def test_frozen_inputs_produce_plain_dicts(self) -> None:
        merged = deep_merge(BASE, freeze({"colors": {"primary": "#000"}}))
        assert type(merged) is dict
        assert type(merged["colors"]) is dict
        merged["colors"]["primary"] = "#FFF"
        assert BASE["colors"]["primary"] == "#2196F3"


class TestCloneTree:
    def test_mapping_proxy_becomes_dict(self) -> None:
        cloned = clone_tree(MappingProxyType({"a": MappingProxyType({"b": 1})}))
        assert cloned == {"a": {"b": 1}}
        assert type(cloned["a"]) is dict

    def test_leaf_returned(self) -> None:
        assert clone_tree(3) == 3


# --- run / resolve_tokens ---


class TestResolveTokens:
    def test_tags_platform(self) -> None:
        source = StaticOverlaySource({})
        assert resolve_tokens("ios", base=BASE, source=source)["_platform"] == "ios"

    def test_overlay_applied(self) -> None:
        source = StaticOverlaySource({"ios": {"layout": {"borderRadius": {"small": 6}}}})
        tokens = resolve_tokens("ios", base=BASE, source=source)

        assert tokens["layout"]["borderRadius"] == {"small": 6, "medium": 8}
        assert tokens["colors"] == dict(BASE["colors"])

    def test_source_asked_for_active_platform(self) -> None:
        source = StaticOverlaySource({})
        resolve_tokens("android", base=BASE, source=source)
        assert source.calls == ["android"]

    def test_unknown_platform_is_base_only(self) -> None:
        source = StaticOverlaySource({"web": {"colors": {"primary": "#111"}}})
        output = run(ResolveTokensInput(platform="web"), base=BASE, source=source)

        assert output.tokens["colors"]["primary"] == "#2196F3"
        assert output.tokens["_platform"] == "web"
        assert output.warnings == []
        assert source.calls == []

    def test_each_call_returns_fresh_tree(self) -> None:
        source = StaticOverlaySource({})
        first = resolve_tokens("ios", base=BASE, source=source)
        first["colors"]["primary"] = "#BAD"
        second = resolve_tokens("ios", base=BASE, source=source)
        assert second["colors"]["primary"] == "#2196F3"

    @pytest.mark.parametrize(
        "exc",
        [
            OverlayLoadError("ios", "missing"),
            ImportError("no module"),
            OSError("disk"),
            ValueError("bad data"),
        ],
    )
    def test_overlay_failure_is_not_fatal(self, exc: Exception, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            result = run(
                ResolveTokensInput(platform="ios"),
                base=BASE,
                source=FailingOverlaySource(exc),
            )

        assert result.tokens["_platform"] == "ios"
        assert result.tokens["layout"]["borderRadius"]["small"] == 4
        assert len(result.warnings) == 1
        assert result.warnings[0].code == "overlay_unavailable"
        assert result.warnings[0].platform == "ios"
        assert "Failed to load platform tokens" in caplog.text

    def test_non_mapping_overlay_ignored_with_warning(self) -> None:
        source = StaticOverlaySource({"ios": ["not", "a", "tree"]})
        result = run(ResolveTokensInput(platform="ios"), base=BASE, source=source)

        assert result.tokens["colors"]["primary"] == "#2196F3"
        assert [w.code for w in result.warnings] == ["overlay_malformed"]

    def test_reserved_key_in_overlay_is_discarded(self, caplog) -> None:
        source = StaticOverlaySource({"ios": {"_platform": "android"}})
        with caplog.at_level(logging.WARNING):
            tokens = resolve_tokens("ios", base=BASE, source=source)

        assert tokens["_platform"] == "ios"
        assert "reserved key" in caplog.text

    def test_output_platform_property(self) -> None:
        result = run(
            ResolveTokensInput(platform="android"),
            base=BASE,
            source=StaticOverlaySource({}),
        )
        assert result.platform == "android"
        assert result.warnings == []

    def test_defaults_use_bundled_tokens(self) -> None:
        tokens = resolve_tokens("android")
        assert tokens["components"]["button"]["rippleEffect"] is True


class TestPlatformMembers:
    """Platform enum members resolve exactly like their plain identifiers."""

    def test_enum_member_selects_bundled_overlay(self) -> None:
        output = run(ResolveTokensInput(platform=Platform.IOS))

        assert output.warnings == []
        assert output.tokens["layout"]["borderRadius"]["small"] == 6
        assert output.tokens["_platform"] == "ios"
        assert type(output.tokens["_platform"]) is str
        assert type(output.platform) is str

    def test_enum_member_reaches_source_as_plain_string(self) -> None:
        source = StaticOverlaySource({"android": {"colors": {"primary": "#6200EE"}}})

        tokens = resolve_tokens(Platform.ANDROID, base=BASE, source=source)

        assert tokens["colors"]["primary"] == "#6200EE"
        assert source.calls == ["android"]
        assert type(source.calls[0]) is str
