"""Tests for user-defined noun overrides."""

from pluralia.core.overrides import OverrideRegistry


class TestOverrideRegistry:
    """Tests for the OverrideRegistry container."""

    def test_starts_from_builtins(self):
        registry = OverrideRegistry()
        assert registry.plural_of("child") == "children"
        assert registry.singular_of("children") == "child"
        assert registry.user_entries() == {}

    def test_define_is_lowercase_and_bidirectional(self):
        registry = OverrideRegistry()
        registry.define("Foo", "FOOS")
        assert registry.plural_of("foo") == "foos"
        assert registry.singular_of("foos") == "foo"
        assert registry.user_entries() == {"foo": "foos"}

    def test_redefine_drops_stale_inverse(self):
        registry = OverrideRegistry()
        registry.define("foo", "foos")
        registry.define("foo", "fooz")
        assert registry.singular_of("foos") is None
        assert registry.singular_of("fooz") == "foo"

    def test_undefine_restores_shadowed_inverse(self):
        registry = OverrideRegistry()
        registry.define("kid", "children")
        assert registry.singular_of("children") == "kid"
        assert registry.undefine("kid") is True
        assert registry.singular_of("children") == "child"

    def test_undefine_builtin_is_refused(self):
        registry = OverrideRegistry()
        assert registry.undefine("child") is False
        assert registry.plural_of("child") == "children"

    def test_undefine_unknown(self):
        assert OverrideRegistry().undefine("nonexistent") is False

    def test_copy_is_deep(self):
        registry = OverrideRegistry()
        registry.define("foo", "foos")
        clone = registry.copy()
        clone.define("bar", "bars")
        clone.undefine("foo")
        assert registry.plural_of("bar") is None
        assert registry.plural_of("foo") == "foos"


class TestEngineOverrides:
    """def_noun / undef_noun / def_noun_reset on the engine."""

    def test_def_noun(self, engine):
        engine.def_noun("foo", "foos")
        assert engine.plural("foo") == "foos"
        assert engine.plural("Foo") == "Foos"
        assert engine.plural("FOO") == "FOOS"
        assert engine.singular("foos") == "foo"
        assert engine.singular("Foos") == "Foo"

    def test_def_noun_stores_lowercase(self, engine):
        engine.def_noun("Octopus", "Octopi")
        assert engine.plural("octopus") == "octopi"
        assert engine.user_nouns() == {"octopus": "octopi"}

    def test_override_shadows_builtin(self, engine):
        engine.def_noun("child", "childs")
        assert engine.plural("child") == "childs"
        assert engine.singular("childs") == "child"

    def test_undef_noun_cannot_remove_shadowed_builtin(self, engine):
        engine.def_noun("child", "childs")
        assert engine.undef_noun("child") is False
        assert engine.plural("child") == "childs"

    def test_reset_restores_builtin(self, engine):
        engine.def_noun("child", "childs")
        engine.def_noun("foo", "fooz")
        engine.def_noun_reset()
        assert engine.plural("child") == "children"
        assert engine.singular("children") == "child"
        assert engine.plural("foo") == "foos"
        assert engine.singular("childs") == "child"
        assert engine.user_nouns() == {}

    def test_undef_noun_removes_user_entry(self, engine):
        engine.def_noun("foo", "fooz")
        assert engine.undef_noun("FOO") is True
        assert engine.plural("foo") == "foos"
        assert engine.singular("fooz") == "fooz"
        assert engine.undef_noun("foo") is False

    def test_def_noun_reset_keeps_classical_flags(self, engine):
        engine.classical_ancient(True)
        engine.def_noun_reset()
        assert engine.is_classical_ancient()

    def test_add_irregular_and_uncountable(self, engine):
        engine.add_irregular("cow", "kine")
        engine.add_uncountable("information", "Equipment")
        assert engine.plural("cow") == "kine"
        assert engine.plural("information") == "information"
        assert engine.plural("equipment") == "equipment"
        assert engine.singular("equipment") == "equipment"

    def test_overrides_take_precedence_over_suffix_rules(self, engine):
        engine.def_noun("box", "boxen")
        assert engine.plural("box") == "boxen"
        assert engine.singular("boxen") == "box"

    def test_irregular_nouns_snapshot(self, engine):
        engine.def_noun("foo", "foos")
        table = engine.irregular_nouns()
        assert table["child"] == "children"
        assert table["foo"] == "foos"
        table["child"] = "kids"
        assert engine.plural("child") == "children"
