"""Testing utilities for code built on API wrappers.

Example:
    ```python
    from rest_api_builder.testing import RecordingTransport


    def test_creates_user():
        transport = RecordingTransport(responses={"add_user": {"id": 1}})
        api = build_my_api(transport=transport)

        assert api.add_user(name="Ana") == {"id": 1}
        assert transport.requests[0].method == "POST"
    ```
"""

from rest_api_builder.testing.transports import RecordingTransport

__all__ = ["RecordingTransport"]
