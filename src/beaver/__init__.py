"""
beaver – small utility toolkit built around an HTTP request-logging middleware.

Import path convention::

    from beaver.httplog import Logger, RequestLogMiddleware
    from beaver.logger import LeveledLogger, Level
    from beaver.data import JSONPod, download, write_file
    from beaver.kernel.errors import BaseError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
