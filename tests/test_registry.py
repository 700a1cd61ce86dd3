"""Tests for the sample registry and resource catalog."""
import pytest

from sampler.core.errors import ConfigurationError
from sampler.samples.catalog import CATALOG, get_required_resource
from sampler.samples.registry import list_samples, resolve_sample


def test_known_sample():
    info = resolve_sample("accept-a-payment")
    assert info.url == "https://github.com/stripe-samples/accept-a-payment.git"


@pytest.mark.parametrize("url,name", [
    ("https://github.com/acme/widget-sample.git", "widget-sample"),
    ("https://github.com/acme/widget-sample/", "widget-sample"),
    ("git@github.com:acme/widget-sample.git", "widget-sample"),
])
def test_git_url(url, name):
    info = resolve_sample(url)
    assert info.name == name
    assert info.url == url


def test_unknown_name():
    with pytest.raises(ConfigurationError, match="sampler list"):
        resolve_sample("../etc")


def test_list_is_sorted():
    names = [info.name for info in list_samples()]
    assert names == sorted(names)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CATALOG["new"] = None
    assert get_required_resource("missing") is None
    assert get_required_resource("stripe_samples_price_recurring_pro_id").http_path == "/v1/prices"
