"""Transports that dispatch resolved requests over HTTP.

The wrapper never talks to the network itself. In non-debug mode it hands
each `ResolvedRequest` to a transport and returns whatever the transport
returns, so a synchronous transport yields data and an asynchronous one
yields an awaitable.

Modules:
    http: httpx-backed synchronous and asynchronous transports

Example:
    ```python
    from rest_api_builder.transport import HttpxTransport

    with HttpxTransport(timeout=10) as transport:
        api = ApiBuilder(url, auth_options, transport=transport).add_method("me", path="/me").build()
        print(api.me())
    ```
"""

from rest_api_builder.transport.http import AsyncHttpxTransport, HttpxTransport, Transport

__all__ = ["AsyncHttpxTransport", "HttpxTransport", "Transport"]
