"""Stateless greeter shared process-wide through a singleton holder."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

GREETER_CREATED = "Greeter instance created"
FIRST_MESSAGE = "Hello from Greeter!"
SECOND_MESSAGE = "Hello from Greeter 2"


class Greeter:
    """Produces two fixed greetings; holds no state.

    Construction logs once per instance, which makes repeated construction
    visible when the holder is bypassed.

    Example:
        >>> greeter = Greeter()
        >>> greeter.show_message()
        'Hello from Greeter!'
        >>> greeter.show_second_message()
        'Hello from Greeter 2'
    """

    __slots__ = ()

    def __init__(self) -> None:
        logger.info(GREETER_CREATED)

    def show_message(self) -> str:
        return FIRST_MESSAGE

    def show_second_message(self) -> str:
        return SECOND_MESSAGE


__all__ = ["FIRST_MESSAGE", "GREETER_CREATED", "SECOND_MESSAGE", "Greeter"]
