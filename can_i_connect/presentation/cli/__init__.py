"""Presentation CLI exports."""
from .argc import build_parser
from .connect_command import ConnectCommand
from .options import Options, split_hosts, validate_bind_addr

__all__ = [
    "build_parser",
    "ConnectCommand",
    "Options",
    "split_hosts",
    "validate_bind_addr",
]
