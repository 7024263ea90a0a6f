"""urikit.ports
Well-known default ports, used to elide redundant ports when serializing.
"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_PORTS: dict[str, int] = {
    "acap": 674,
    "afp": 548,
    "amqp": 5672,
    "amqps": 5671,
    "coap": 5683,
    "coaps": 5684,
    "dict": 2628,
    "dns": 53,
    "ftp": 21,
    "ftps": 990,
    "git": 9418,
    "gopher": 70,
    "http": 80,
    "https": 443,
    "imap": 143,
    "imaps": 993,
    "ipp": 631,
    "ipps": 631,
    "irc": 194,
    "ircs": 6697,
    "ldap": 389,
    "ldaps": 636,
    "mms": 1755,
    "mongodb": 27017,
    "msrp": 2855,
    "mtqp": 1038,
    "mqtt": 1883,
    "mysql": 3306,
    "nfs": 111,
    "nntp": 119,
    "nntps": 563,
    "pop": 110,
    "pop3": 110,
    "pop3s": 995,
    "postgres": 5432,
    "postgresql": 5432,
    "prospero": 1525,
    "redis": 6379,
    "rsync": 873,
    "rtsp": 554,
    "rtsps": 322,
    "rtspu": 5005,
    "sftp": 22,
    "smb": 445,
    "smtp": 25,
    "snmp": 161,
    "ssh": 22,
    "svn": 3690,
    "telnet": 23,
    "ventrilo": 3784,
    "vnc": 5900,
    "wais": 210,
    "ws": 80,
    "wss": 443,
    "xmpp": 5222,
}


def default_port(scheme: str | None) -> int:
    """Returns the well-known port for scheme, or 0 if there is none."""
    if scheme is None:
        return 0
    return DEFAULT_PORTS.get(scheme.lower(), 0)


def register_default_port(scheme: str, port: int) -> None:
    """Adds or overrides the default port of scheme for the whole process."""
    if not isinstance(scheme, str) or len(scheme) == 0:
        raise ValueError(f"scheme expected a non-empty str, not {scheme!r}")
    if isinstance(port, bool) or not isinstance(port, int) or port < 0:
        raise ValueError(f"port expected a non-negative int, not {port!r}")
    logger.debug("registering default port %d for scheme %r", port, scheme)
    DEFAULT_PORTS[scheme.lower()] = port
