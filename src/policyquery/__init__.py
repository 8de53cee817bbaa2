"""
Policy Query Tool - fetch a quote or policy record from DynamoDB.

Resolves the table from the caller's AWS account, optionally lets the
operator pick one of a policy's sort keys, and prints the record as
colorized JSON.
"""

from .cli import main
from .utils import debug_print

__version__ = "1.0.0"
__all__ = ["main", "debug_print"]
