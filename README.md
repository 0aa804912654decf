# restweave

restweave holds the building blocks of a REST router: URL path templates
compiled to regular expressions, routes that know which HTTP method and
media types they handle, extraction of path parameters, and thin request
and response wrappers.

## Installation

```
pip install restweave
```

## Path templates

`restweave.path_expression` turns a path template into a regular
expression. Templates take plain variables (`{id}`), variables with their
own expression (`{id:[0-9]+}`) and catch-all variables (`{rest:*}`).

```python
from restweave.path_expression import PathExpression, template_to_regular_expression, tokenize_path

template_to_regular_expression("/a/{b}/c/")
# ('^/a/([^/]+?)/c(/.*)?$', 2, ['b'], 1, ['a', '{b}', 'c'])

expr = PathExpression.from_template("/p/{q}")
expr.matcher.match("/p/x/y").groups()   # ('x', '/y')
expr.var_names                          # ['q']

tokenize_path("/")                      # []
```

`PathExpression.from_template` raises `re.error` when a variable's
expression is not a valid regular expression.

## Routes

`restweave.route.Route` is a dataclass binding a method, a full path and
media types to a handler function. On creation it splits its path into
`path_parts` and notes whether the path ends in a custom verb such as
`/users:init`.

```python
from restweave.route import Route

route = Route(method="GET", path="/users/{id}", produces=["application/json"],
              consumes=["application/json"])

route.matches_accept("text/html, */*")                      # True
route.matches_accept("application/xml")                     # False
route.matches_content_type("application/json; charset=UTF-8")  # True
route.matches_content_type("")                               # True for GET
str(route)                                                   # 'GET /users/{id}'
```

A route with no `consumes` accepts any content type. With an empty
`Content-Type`, GET, HEAD, OPTIONS, DELETE and TRACE match; other methods
are checked as `application/octet-stream`, unless
`allowed_methods_without_content_type` lists the methods to let through.

## Path parameters

`restweave.path_processor.DefaultPathProcessor` lines the route's path
segments up with those of a request path:

```python
from restweave.path_processor import DefaultPathProcessor

DefaultPathProcessor().extract_parameters(route, None, "/users/42")
# {'id': '42'}
```

Prefixes and suffixes around a variable (`/files/{name}.txt`) are cut off,
and a catch-all variable takes the rest of the path, slashes included.

## Requests and responses

`restweave.message` has `Headers`, a case-insensitive multi-valued header
map, and `HttpRequest`, a dataclass with `method`, `url`, `headers` and
`body`, giving `path()`, `query()`, `content_length()` and `form()` (the
values of a URL-encoded body of a POST, PUT or PATCH request).

`restweave.request.Request` wraps an `HttpRequest` with `path_parameter`,
`query_parameter`, `query_parameters`, `body_parameter`,
`header_parameter`, request-scoped attributes (`set_attribute`,
`attribute`) and, when built for a route, `selected_route_path` and
`selected_route`, the latter a read-only `restweave.route_reader.RouteReader`.

`restweave.response.Response` collects the status, headers and body bytes
written to it, counting the bytes in `content_length()`:

```python
from restweave.response import Response

resp = Response()
resp.write_error_string(404, "Invalid")
resp.status_code()       # 404
resp.content_length()    # 7
resp.stream.getvalue()   # b'Invalid'
```

`restweave.response.wrap_request_response(route, http_request, path_params)`
builds both for a chosen route, passing on the `Accept` header and the
route's `produces`.

## Errors

`restweave.service_error.ServiceError` is an exception carrying an HTTP
status code, a message and optional headers; `str()` gives
`[ServiceError:404] ...`. `new_error` and `new_error_with_header` create
one.

## Parameters for documentation

`path_parameter`, `query_parameter`, `body_parameter`, `header_parameter`
and `form_parameter` in `restweave.parameter` make `Parameter` descriptions
with chained setters such as `required`, `data_type`, `possible_values`,
`allowable_values`, `minimum` and `maximum`; `data()` returns a copy of
their state.

## What this package does not do

The package gives the pieces, not the whole router. It does not:

- pick one web service and route among many for a request; you match
  `PathExpression`s and call `Route.matches_accept` and
  `Route.matches_content_type` yourself;
- offer a builder for routes or web services; routes are made as
  `Route(...)` directly;
- serve HTTP, read from sockets, or marshal JSON or XML entities;
- sort `Accept` headers by quality or log why a request did not match.

## Running the tests

```
pip install -e .[test]
pytest
```