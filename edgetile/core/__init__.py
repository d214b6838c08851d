"""
edgetile.core - Integracion con el host.

This package contains:
    - window   : WindowInfo snapshot handed over by the host
    - host     : Host protocol and the in-memory VirtualHost
    - commands : Command enum and CommandDispatcher
"""

from edgetile.core.window import WindowInfo
from edgetile.core.host import Host, VirtualHost
from edgetile.core.commands import Command, CommandDispatcher, build_default_commands

__all__ = [
    "WindowInfo", "Host", "VirtualHost",
    "Command", "CommandDispatcher", "build_default_commands",
]
