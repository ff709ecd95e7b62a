"""REST API Builder - declarative wrappers for REST APIs.

Describe an API once (base URL, authentication and a table of method
templates) and get back an object whose methods fill in path, query string
and payload placeholders, attach credentials and send the request:
- Key/token, HTTP Basic and Bearer authentication
- ``{{placeholder}}`` templates for paths, query parameters and JSON payloads
- Debug mode returning the resolved request instead of sending it
- Synchronous and asynchronous httpx transports

Example:
    ```python
    from rest_api_builder import ApiBuilder

    api = (
        ApiBuilder("https://api.example.com", {"type": "Bearer", "token": "s3cr3t"})
        .add_method("get_user", path="/users/{{userId}}")
        .add_method("search", path="/users", query_params={"q": "{{query}}", "page": "{{page}}"})
        .build()
    )

    user = api.get_user(userId="42")
    request = api.debug_mode_on().search(query="ana")
    request.url  # 'https://api.example.com/users?q=ana'
    ```
"""

from rest_api_builder.builder import ApiBuilder
from rest_api_builder.descriptor import MethodDescriptor
from rest_api_builder.request import ResolvedRequest, resolve_request
from rest_api_builder.wrapper import ApiWrapper

__version__ = "0.1.0"

__all__ = [
    "ApiBuilder",
    "ApiWrapper",
    "MethodDescriptor",
    "ResolvedRequest",
    "__version__",
    "resolve_request",
]
