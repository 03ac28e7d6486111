"""Small utilities: a mutable string, clocks, threads, a timer wheel and a URI parser."""

__version__ = "2.0.0"
__all__ = ["text", "clock", "threads", "timer", "uri"]