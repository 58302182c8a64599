import pytest

from error_loader.application.exceptions import MalformedResponseError
from error_loader.application.patches import attach_cgi_data


def test_attach_cgi_data_copies_web_environment():
    tree = {"web_environment": {"A": "1"}, "request": {"B": "2"}}

    patched = attach_cgi_data(tree)

    assert patched is tree
    assert tree["request"] == {"B": "2", "cgi_data": {"A": "1"}}
    assert tree["web_environment"] == {"A": "1"}


def test_attach_cgi_data_copy_is_independent():
    tree = {"web_environment": {"A": "1"}, "request": {}}

    attach_cgi_data(tree)
    tree["web_environment"]["A"] = "changed"

    assert tree["request"]["cgi_data"] == {"A": "1"}


def test_attach_cgi_data_twice_overwrites():
    tree = {"web_environment": {"A": "1"}, "request": {"cgi_data": {"OLD": "x"}}}

    attach_cgi_data(tree)
    attach_cgi_data(tree)

    assert tree["request"]["cgi_data"] == {"A": "1"}


@pytest.mark.parametrize(
    "tree",
    [
        {"request": {}},
        {"web_environment": None, "request": {}},
        {"web_environment": ["A"], "request": {}},
        {"web_environment": {"A": "1"}},
        {"web_environment": {"A": "1"}, "request": "GET /"},
        ["not", "an", "object"],
    ],
)
def test_attach_cgi_data_rejects_unexpected_shapes(tree):
    with pytest.raises(MalformedResponseError):
        attach_cgi_data(tree)
