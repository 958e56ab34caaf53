"""
Raw params extraction.

Merges a request's path captures and query string into one mapping of
string values. No type coercion happens here.
"""

from typing import Mapping, Union

from starlette.datastructures import QueryParams


class ParamsExtractor:
    """Build the raw, string-valued params of a request."""

    def extract(
        self,
        captures: Mapping[str, str],
        query_string: Union[bytes, str] = b"",
    ) -> dict[str, str]:
        """
        Merge path captures and query params.

        Path captures are added first and query params second, so a query
        param wins when its name collides with a path capture. For a
        repeated query key the last value wins.

        Args:
            captures: Named segments captured from the route pattern.
            query_string: The raw query string of the request.

        Returns:
            The merged params, in insertion order.
        """
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")

        raw: dict[str, str] = {}
        raw.update(captures)
        raw.update(QueryParams(query_string).items())
        return raw
