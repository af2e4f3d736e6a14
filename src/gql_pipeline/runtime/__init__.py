# -*- coding: utf-8 -*-
"""
Runtimes (or async adapters) control how field resolvers are called and in
which container type the result of query processing is returned.
"""

from .asyncio import AsyncIORuntime
from .base import Runtime
from .blocking import BlockingRuntime

__all__ = ["Runtime", "BlockingRuntime", "AsyncIORuntime"]
