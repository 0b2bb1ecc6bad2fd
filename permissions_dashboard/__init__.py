"""Permissions Dashboard"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("permissions-dashboard")
except PackageNotFoundError:
    __version__ = "dev"
