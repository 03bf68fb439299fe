"""Error handling for retrycase.

- Result/Ok/Err: typed success/failure values returned by retried operations
- try_async: capture typed exceptions from a coroutine as Err
"""

from .result import Err, Ok, Result, try_async

__all__ = ["Result", "Ok", "Err", "try_async"]
