import pytest

from restweave.message import HttpRequest
from restweave.response import Response, wrap_request_response
from restweave.route import Route


class _FailingStream:
    def write(self, data):
        raise OSError("fail")


def test_write_header():
    response = Response(request_accept="*/*", route_produces=["*/*"])
    response.write_header(123)
    assert response.status_code() == 123


def test_no_write_header():
    assert Response().status_code() == 200


def test_content_length_of_error_string():
    response = Response()
    response.write_error_string(404, "Invalid")
    assert response.content_length() == len("Invalid")
    assert response.stream.getvalue() == b"Invalid"
    assert response.status_code() == 404
    assert str(response.error()) == "Invalid"


@pytest.mark.parametrize("status", [204, 304, 200, 400])
def test_status_is_kept(status):
    response = Response()
    response.write_header(status)
    assert response.status_code() == status


def test_write_error_with_none():
    response = Response()
    response.write_error(410, None)
    assert response.status_code() == 410
    assert str(response.error()) == ""
    assert response.content_length() == 0


def test_write_error_keeps_error():
    response = Response()
    problem = ValueError("broken")
    response.write_error(400, problem)
    assert response.error() is problem
    assert response.stream.getvalue() == b"broken"


def test_write_failure_propagates():
    response = Response(_FailingStream())
    with pytest.raises(OSError, match="fail"):
        response.write(b"data")
    assert response.content_length() == 0


def test_write_counts_bytes():
    response = Response()
    assert response.write(b"abc") == 3
    response.write(b"de")
    assert response.content_length() == 5


def test_add_header_and_internal_server_error():
    response = Response()
    assert response.add_header("Allow", "GET") is response
    response.add_header("Allow", "POST")
    assert response.headers.values("Allow") == ["GET", "POST"]
    response.internal_server_error()
    assert response.status_code() == 500


def test_pretty_print_and_accepts():
    response = Response(pretty=True)
    response.pretty_print(False)
    assert response.pretty is False
    response.set_request_accepts("application/json")
    assert response.request_accept == "application/json"


def test_wrap_request_response():
    route = Route(method="GET", path="/items/{id}", produces=["application/json"])
    http_request = HttpRequest(url="/items/7", headers={"Accept": "application/json"})
    request, response = wrap_request_response(route, http_request, {"id": "7"})
    assert request.path_parameter("id") == "7"
    assert request.selected_route_path() == "/items/{id}"
    assert response.request_accept == "application/json"
    assert response.route_produces == ["application/json"]
    assert response.status_code() == 200