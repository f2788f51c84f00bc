"""Tests for declaration normalization."""

from types import MappingProxyType

from social_manager.core.declaration import (
    Disabled,
    Enabled,
    Options,
    Unset,
    normalize,
)


def test_unsupported_is_unset_whatever_the_value():
    assert isinstance(normalize({"stylesheet": True}, supported=False), Unset)
    assert isinstance(normalize(True, supported=False), Unset)


def test_bare_true_is_enabled():
    decl = normalize(True)
    assert isinstance(decl, Enabled)
    assert dict(decl.options) == {}


def test_falsy_values_are_disabled():
    for raw in (False, None, [], ()):
        assert isinstance(normalize(raw), Disabled)


def test_list_is_unwrapped_to_first_element():
    decl = normalize([{"attr_prefix": "acme"}, {"attr_prefix": "other"}])
    assert isinstance(decl, Options)
    assert decl.options["attr_prefix"] == "acme"


def test_list_with_true_is_enabled():
    assert isinstance(normalize([True]), Enabled)


def test_plain_mapping_is_options():
    decl = normalize({"buttons-mode": "json"})
    assert isinstance(decl, Options)
    assert decl.has("buttons-mode")
    assert not decl.has("buttons_mode")


def test_options_are_read_only_copies():
    raw = {"stylesheet": True}
    decl = normalize(raw)
    raw["stylesheet"] = False
    assert decl.options["stylesheet"] is True
    assert isinstance(decl.options, MappingProxyType)


def test_lookup_follows_key_order():
    decl = Options({"a-b": 1, "a_b": 2})
    assert decl.lookup(("a_b", "a-b")) == 2
    assert decl.lookup(("a-b", "a_b")) == 1
    assert decl.lookup(("missing",)) is None
    assert Unset().lookup(("a_b",)) is None
