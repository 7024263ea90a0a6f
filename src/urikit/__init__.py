__version__ = "0.1"

from .escape import UNRESERVED, escape, unescape, unescape_to_bytes
from .parse import Cursor, State, parse, parse_or_raise
from .ports import DEFAULT_PORTS, default_port, register_default_port
from .query import query_map, query_map_from_string
from .result import BadPortError, Err, MalformedQueryError, Ok, Result, URIError
from .uri import URI, full_path, hostname, is_absolute, is_relative, to_string, userinfo
