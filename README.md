# httpuri

Strict parsing of the URIs that appear in HTTP request lines, plus a small
type for HTTP protocol versions. No runtime dependencies.

A request target may be in any of four forms, and `httpuri` accepts them all:

| Form           | Example                          |
|----------------|----------------------------------|
| origin-form    | `/some/path?and=query`           |
| absolute-form  | `http://example.com:8080/path`   |
| authority-form | `example.com:443`                |
| asterisk-form  | `*`                              |

Fragments (`#...`) are accepted on input and dropped. Input longer than
65534 bytes is rejected.

## Installation

```
pip install httpuri
```

## Parsing a URI

```python
from httpuri.uri import Uri

uri = Uri.parse("https://user@example.com:8443/install.html?lang=en#top")
uri.scheme_str   # "https"
uri.host         # "example.com"
uri.port_u16()   # 8443
uri.path         # "/install.html"
uri.query        # "lang=en"
str(uri)         # "https://user@example.com:8443/install.html?lang=en"
```

`Uri(text)` parses in the same way; `Uri()` is the URI `/`.

A relative URI has no scheme, authority or host:

```python
uri = Uri.parse("/foo/bar?baz")
uri.path    # "/foo/bar"
uri.query   # "baz"
uri.host    # None
```

Other accessors: `scheme` (a `Scheme` or `None`), `authority` (an
`Authority` or `None`), `path_and_query` (a `PathAndQuery`, or `None` for an
authority-form URI) and `port()` (a `Port` or `None`).

Comparison is by component. Scheme and authority compare without regard to
ASCII case; path and query are case sensitive. A `Uri` also compares equal
to a plain string that spells the same URI:

```python
Uri.parse("http://EXAMPLE.com") == "http://example.com/"   # True
```

`Uri.from_authority(authority)` and `Uri.from_path_and_query(pq)` wrap a
single component in a `Uri`.

## Errors

Invalid input raises `httpuri.errors.InvalidUri` (a `ValueError`), whose
`kind` is an `httpuri.errors.ErrorKind` member such as `INVALID_URI_CHAR`,
`INVALID_AUTHORITY`, `SCHEME_TOO_LONG` or `TOO_LONG`. Its message is the
member's value.

```python
from httpuri.errors import InvalidUri

try:
    Uri.parse("localhost:8080:3030")
except InvalidUri as exc:
    print(exc.kind)   # ErrorKind.INVALID_AUTHORITY
    print(exc)        # invalid authority
```

Assembling a `Uri` from an impossible combination of parts raises
`httpuri.errors.InvalidUriParts`, a subclass of `InvalidUri`.

## Components

Each component can be parsed on its own:

```python
from httpuri.scheme import Scheme
from httpuri.authority import Authority
from httpuri.path import PathAndQuery
from httpuri.port import Port

Scheme.parse("HTTP") == "http"                     # True
Authority.parse("example.org:80").port_u16()       # 80
Authority.parse("example.org:80").host             # "example.org"
PathAndQuery.parse("/hello?world").query           # "world"
int(Port.parse("8080"))                            # 8080
```

`Scheme.HTTP` and `Scheme.HTTPS` are the two built-in schemes. A `Port`
compares equal to another `Port` or to an `int` with the same number.

The lower-level helpers `httpuri.scheme.parse_prefix`,
`httpuri.authority.authority_end` and the character tests in
`httpuri.tables` (`is_uri_char`, `uri_char_class`) are available too.

## Building a URI

```python
from httpuri.builder import Builder

uri = (
    Builder()
    .scheme("https")
    .authority("example.com")
    .path_and_query("/search?q=1")
    .build()
)
```

Errors from any step are deferred and raised by `build()`. `Uri.builder()`
returns a fresh builder, and `Builder.from_uri(uri)` starts from an
existing URI.

`Uri.into_parts()` and `Uri.from_parts(parts)` convert between a `Uri` and
a `Parts` record holding the optional scheme, authority and path-and-query.

## HTTP versions

```python
from httpuri.version import Version

str(Version.HTTP_2)                   # "HTTP/2.0"
Version.default() is Version.HTTP_11  # True
Version.HTTP_10 < Version.HTTP_11     # True
```

## What it does not do

`httpuri` only parses and represents request targets and version values.
It has no types for requests, responses, headers, methods or status codes,
does not percent-decode, and does not resolve relative references.

## Running the tests

```
pip install -e ".[test]"
pytest
```