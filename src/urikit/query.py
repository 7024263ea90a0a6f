"""urikit.query
Splitting of raw query strings into key/value mappings.
"""

import logging

from .result import Err, MalformedQueryError, Ok, Result
from .uri import URI

logger = logging.getLogger(__name__)


def query_map_from_string(query: str) -> Result[dict[str, str], MalformedQueryError]:
    """Split "k1=v1&k2=v2" into {"k1": "v1", "k2": "v2"}.

    Keys and values are left percent-encoded. A later key replaces an earlier one.
    A segment with no "=" is an error.
    """
    result: dict[str, str] = {}
    if len(query) == 0:
        return Ok(result)
    for segment in query.split("&"):
        key, equals, value = segment.partition("=")
        if len(equals) == 0:
            logger.debug("query %r has a parameter without '=': %r", query, segment)
            return Err(MalformedQueryError(segment))
        result[key] = value
    return Ok(result)


def query_map(uri: URI) -> Result[dict[str, str], MalformedQueryError]:
    if uri.query is None:
        return Ok({})
    return query_map_from_string(uri.query)
