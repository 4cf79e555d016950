"""Tests for ManifestState — append, replace, skip, idempotence, seeds."""

from __future__ import annotations

from assetmanifest.core.state import ManifestState


class TestMerge:
    def test_appends_new_names_in_order(self, state: ManifestState, make_asset):
        state.merge([make_asset("one.js"), make_asset("two.js")])
        state.merge([make_asset("three.js")])
        assert [a.name for a in state.assets] == ["one.js", "two.js", "three.js"]

    def test_identical_mapping_skipped(self, state: ManifestState, make_asset):
        state.merge([make_asset("one.js"), make_asset("two.js")])
        state.merge([make_asset("two.js"), make_asset("one.js")])
        assert [a.name for a in state.assets] == ["one.js", "two.js"]

    def test_changed_path_replaced_in_place(self, state: ManifestState, make_asset):
        state.merge([make_asset("one.js", "one.h1.js"), make_asset("two.js")])
        state.merge([make_asset("one.js", "one.h2.js")])
        assert [(a.name, a.path) for a in state.assets] == [
            ("one.js", "one.h2.js"),
            ("two.js", "two.js"),
        ]

    def test_changed_metadata_replaced_in_place(self, state: ManifestState, make_asset):
        state.merge([make_asset("main.js", chunk_hash="aaaa"), make_asset("two.js")])
        state.merge([make_asset("main.js", chunk_hash="bbbb")])
        assert [a.name for a in state.assets] == ["main.js", "two.js"]
        assert state.get("main.js").chunk_hash == "bbbb"

    def test_merge_is_idempotent(self, make_asset):
        batch = [make_asset("one.js", "one.h1.js"), make_asset("two.js")]
        once = ManifestState().merge(batch)
        twice = ManifestState().merge(batch).merge(batch)
        assert once.assets == twice.assets

    def test_never_drops_names(self, state: ManifestState, make_asset):
        state.merge([make_asset("one.js"), make_asset("two.js")])
        state.merge([make_asset("three.js")])
        assert {"one.js", "two.js", "three.js"} <= {a.name for a in state.assets}

    def test_returns_self(self, state: ManifestState, make_asset):
        assert state.merge([make_asset()]) is state

    def test_merge_count(self, state: ManifestState, make_asset):
        state.merge([make_asset()])
        state.merge([])
        assert state.merge_count == 2

    def test_lookup(self, state: ManifestState, make_asset):
        state.merge([make_asset("one.js", "one.h1.js")])
        assert "one.js" in state
        assert state.get("one.js").path == "one.h1.js"
        assert state.get("missing.js") is None
        assert len(state) == 1

    def test_assets_is_a_snapshot(self, state: ManifestState, make_asset):
        state.merge([make_asset()])
        snapshot = state.assets
        snapshot.clear()
        assert len(state.assets) == 1


class TestSeed:
    def test_default_seed_is_empty_dict(self):
        assert ManifestState().fresh_seed() == {}

    def test_fresh_seed_is_a_new_instance(self):
        state = ManifestState(seed={"key": "value"})
        first = state.fresh_seed()
        first["key"] = "changed"
        assert state.fresh_seed() == {"key": "value"}

    def test_configured_seed_copied_on_construction(self):
        seed = {"nested": {"a": 1}}
        state = ManifestState(seed=seed)
        seed["nested"]["a"] = 2
        assert state.seed == {"nested": {"a": 1}}

    def test_list_seed(self):
        state = ManifestState(seed=[])
        seed = state.fresh_seed()
        seed.append("x")
        assert state.fresh_seed() == []
