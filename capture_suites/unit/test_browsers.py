from types import SimpleNamespace

import pytest

from capture_suites.framework import (
    BrowserDescriptor,
    SuiteConfigurationError,
    normalize_skip_browsers,
)


def test_no_argument_means_skip_everywhere():
    assert normalize_skip_browsers() is True
    assert normalize_skip_browsers(None) is True


def test_mixed_list_keeps_order():
    browsers = normalize_skip_browsers(
        ("opera", {"name": "chrome", "version": "33"}, BrowserDescriptor("firefox"))
    )

    assert browsers == [
        BrowserDescriptor("opera"),
        BrowserDescriptor("chrome", "33"),
        BrowserDescriptor("firefox"),
    ]


def test_none_version_is_treated_as_absent():
    assert normalize_skip_browsers({"name": "opera", "version": None}) == [
        BrowserDescriptor("opera")
    ]


def test_extra_mapping_keys_are_ignored():
    assert normalize_skip_browsers({"name": "opera", "platform": "linux"}) == [
        BrowserDescriptor("opera")
    ]


def test_empty_list_is_rejected():
    with pytest.raises(SuiteConfigurationError):
        normalize_skip_browsers([])


def test_list_element_without_name_is_rejected():
    with pytest.raises(SuiteConfigurationError):
        normalize_skip_browsers(["opera", {"version": "12"}])


@pytest.mark.parametrize("value", [42, [None], [["opera"]], {"name": 1}, {"name": "x", "version": 12}])
def test_malformed_values_raise_type_error(value):
    with pytest.raises(TypeError):
        normalize_skip_browsers(value)


def test_to_dict_omits_missing_version():
    assert BrowserDescriptor("opera").to_dict() == {"name": "opera"}
    assert BrowserDescriptor("opera", "12").to_dict() == {"name": "opera", "version": "12"}


def test_matches_objects_with_attributes():
    session = SimpleNamespace(name="chrome", version="33")

    assert BrowserDescriptor("chrome").matches(session)
    assert BrowserDescriptor("chrome", "33").matches(session)
    assert not BrowserDescriptor("chrome", "34").matches(session)
    assert not BrowserDescriptor("Chrome").matches(session)


def test_versioned_descriptor_does_not_match_bare_name():
    assert not BrowserDescriptor("chrome", "33").matches("chrome")
