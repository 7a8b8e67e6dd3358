"""External Control Protocol commands built on the transport.

Public API:
    EcpRemote -- Key presses, literal characters, launches, queries
"""

from ecpremote.ecp.remote import (
    QUERY_NAMES,
    SELECT_KEY,
    EcpRemote,
    keypress_path,
    launch_path,
)

__all__ = ["QUERY_NAMES", "SELECT_KEY", "EcpRemote", "keypress_path", "launch_path"]
