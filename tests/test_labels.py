from operatorkit.labels import (
    Selector,
    add_label,
    get_label_selector,
    selector_from_set,
)


def test_add_label_creates_map_when_none():
    assert add_label(None, "app", "web") == {"app": "web"}


def test_add_label_empty_key_returns_input_unchanged():
    labels = {"app": "web"}
    result = add_label(labels, "", "ignored")
    assert result is labels
    assert result == {"app": "web"}


def test_add_label_empty_key_with_none_stays_none():
    assert add_label(None, "", "value") is None


def test_add_label_updates_existing_map_in_place():
    labels = {"app": "web"}
    result = add_label(labels, "app", "api")
    assert result is labels
    assert labels == {"app": "api"}


def test_selector_matches_required_pair():
    selector = get_label_selector("app", "web")
    assert selector.matches({"app": "web", "tier": "front"})
    assert not selector.matches({"app": "api"})
    assert not selector.matches({})
    assert not selector.matches(None)


def test_selector_requires_key_present_even_for_empty_value():
    selector = get_label_selector("app", "")
    assert not selector.matches({})
    assert selector.matches({"app": ""})


def test_empty_key_gives_empty_selector_matching_everything():
    selector = get_label_selector("", "web")
    assert selector.empty()
    assert selector.matches({"anything": "goes"})
    assert selector.matches(None)


def test_selector_from_set_is_order_independent():
    first = selector_from_set({"a": "1", "b": "2"})
    second = selector_from_set({"b": "2", "a": "1"})
    assert first == second
    assert not first.empty()


def test_selector_string_form():
    assert str(get_label_selector("app", "web")) == "app=web"


def test_default_selector_is_empty():
    assert Selector().empty()
    assert str(Selector()) == ""