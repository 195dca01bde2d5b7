"""Generate unique random numbers in worker threads and split them into even and odd lists."""

__version__ = "0.1.0"