"""swiftup - install and manage Swift toolchains."""

__version__ = "0.1.0"
