import pytest

from restweave.path_processor import DefaultPathProcessor, untokenize_path
from restweave.route import Route


def extract(route_path, size, url_path):
    route = Route(path=route_path)
    assert len(route.path_parts) == size
    return DefaultPathProcessor().extract_parameters(route, None, url_path)


def test_one_param():
    assert extract("/from/{source}", 2, "/from/here")["source"] == "here"


def test_slash():
    assert extract("/", 0, "/") == {}


def test_slash_non_var():
    assert extract("/any", 1, "/any") == {}


def test_two_vars():
    params = extract("/from/{source}/to/{destination}", 4, "/from/AMS/to/NY")
    assert params["source"] == "AMS"
    assert params["destination"] == "NY"


def test_var_on_front():
    params = extract("{what}/from/{source}/", 3, "who/from/SOS/")
    assert params["source"] == "SOS"
    assert params["what"] == "who"


def test_empty_value():
    assert extract("/fixed/{var}", 2, "/fixed/")["var"] == ""


def test_dot():
    assert extract("/fixed/{var}.foo", 2, "/fixed/barrr.foo")["var"] == "barrr"


def test_prefix():
    assert extract("/fixed/foo_{var}", 2, "/fixed/foo_barrr")["var"] == "barrr"


def test_suffix():
    assert extract("/fixed/{var}_foo", 2, "/fixed/barrr_foo")["var"] == "barrr"


def test_mixed():
    assert extract("/fixed/foo_{var}_bar", 2, "/fixed/foo_barrr_bar")["var"] == "barrr"


@pytest.mark.parametrize(
    "route_path, size, url_path, expected",
    [
        (
            "/projects/{projectId}/users/{id:^prefix-}:custom",
            4,
            "/projects/110/users/prefix-userId:custom",
            {"projectId": "110", "id": "prefix-userId"},
        ),
        (
            "/projects/{projectId}/users/{id:*}",
            4,
            "/projects/110/users/prefix-userId:custom",
            {"projectId": "110", "id": "prefix-userId:custom"},
        ),
    ],
)
def test_regex_and_custom_verb(route_path, size, url_path, expected):
    params = extract(route_path, size, url_path)
    for key, value in expected.items():
        assert params[key] == value


def test_wildcard_takes_rest_of_path():
    params = extract("/fixed/{var:*}", 2, "/fixed/test/sub/hi.html")
    assert params == {"var": "test/sub/hi.html"}


def test_untokenize_path():
    assert untokenize_path(1, ["a", "b", "c"]) == "b/c"
    assert untokenize_path(3, ["a", "b", "c"]) == ""