"""cpp-proj-gen -- C++ project generator."""

__version__ = "0.1.0"
