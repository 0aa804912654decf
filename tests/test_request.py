from restweave.message import HttpRequest
from restweave.request import Request
from restweave.route import Route


def _get(url):
    return Request(HttpRequest(method="GET", url=url))


def test_query_parameter_first_value():
    request = _get("http://www.google.com/search?q=foo&q=bar")
    assert request.query_parameter("q") == "foo"


def test_query_parameters_all_values():
    request = _get("http://www.google.com/search?q=foo&q=bar")
    assert request.query_parameters("q") == ["foo", "bar"]


def test_query_parameters_missing_is_empty():
    assert _get("/search").query_parameters("q") == []
    assert _get("/search").query_parameter("q") == ""


def test_body_parameter_takes_precedence():
    http_request = HttpRequest(
        method="POST",
        url="/test?value1=44",
        headers={"Content-Type": "application/x-www-form-urlencoded; charset=UTF-8"},
        body=b"value1=42&value2=43",
    )
    request = Request(http_request)
    assert request.body_parameter("value1") == "42"
    assert request.body_parameter("value2") == "43"
    assert request.query_parameter("value1") == "42"
    assert request.query_parameters("value1") == ["44"]


def test_header_parameter():
    request = Request(HttpRequest(headers={"X-Thing": "yes"}))
    assert request.header_parameter("x-thing") == "yes"
    assert request.header_parameter("Missing") == ""


def test_set_attribute():
    request = _get("/test")
    request.set_attribute("go", "there")
    assert request.attribute("go") == "there"
    assert request.attribute("absent") is None


def test_path_parameters():
    request = Request(HttpRequest(url="/a/1"), path_parameters={"id": "1"})
    assert request.path_parameter("id") == "1"
    assert request.path_parameter("other") == ""
    assert request.path_parameters() == {"id": "1"}


def test_selected_route_absent():
    request = _get("/x")
    assert request.selected_route_path() == ""
    assert request.selected_route() is None


def test_selected_route_present():
    route = Route(method="GET", path="/get/{userId}/friends", doc="friends")
    request = Request(HttpRequest(url="/get/1/friends"), selected_route=route)
    assert request.selected_route_path() == "/get/{userId}/friends"
    reader = request.selected_route()
    assert reader.method() == "GET"
    assert reader.doc() == "friends"