"""
Command bus mapping request types to their handler coroutines
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import RequestTimeoutError

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Session], Awaitable[Any]]


class Mediator:
    """Dispatch a request object to the single handler registered for its type"""

    def __init__(self):
        self._handlers: Dict[Type, Handler] = {}

    def handler(self, request_type: Type) -> Callable[[Handler], Handler]:
        """Decorator registering ``func`` as the handler for ``request_type``"""
        def register(func: Handler) -> Handler:
            if request_type in self._handlers:
                raise ValueError(f"Handler already registered for {request_type.__name__}")
            self._handlers[request_type] = func
            return func
        return register

    def handles(self, request_type: Type) -> bool:
        return request_type in self._handlers

    async def send(self, request: Any, db: Session, timeout: Optional[float] = None) -> Any:
        request_type = type(request)
        func = self._handlers.get(request_type)
        if func is None:
            raise LookupError(f"No handler registered for {request_type.__name__}")

        if timeout is None:
            timeout = settings.REQUEST_TIMEOUT_SECONDS

        try:
            return await asyncio.wait_for(func(request, db), timeout=timeout)
        except asyncio.TimeoutError:
            db.rollback()
            logger.warning("Request timed out: %s", request_type.__name__)
            raise RequestTimeoutError("Request timed out")


mediator = Mediator()
