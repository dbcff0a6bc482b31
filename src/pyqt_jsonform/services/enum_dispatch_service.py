"""
Abstract base class for enum-driven polymorphic dispatch services.

Services using this pattern:
1. Define an enum for strategies/types
2. Create a dispatch table mapping enum values to handlers
3. Determine which strategy to use based on input
4. Dispatch to the appropriate handler

The field resolver (FieldKind enum) is built on it.

Example:
    class MyStrategy(Enum):
        TYPE_A = "type_a"
        TYPE_B = "type_b"

    class MyService(EnumDispatchService[MyStrategy]):
        def __init__(self):
            super().__init__()
            self._register_handlers({
                MyStrategy.TYPE_A: self._handle_type_a,
                MyStrategy.TYPE_B: self._handle_type_b,
            })

        def _determine_strategy(self, context, **kwargs) -> MyStrategy:
            return MyStrategy.TYPE_A if some_condition else MyStrategy.TYPE_B
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar, Generic, Dict, Callable, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Type variable for the strategy enum
StrategyEnum = TypeVar('StrategyEnum', bound=Enum)


class EnumDispatchService(ABC, Generic[StrategyEnum]):
    """
    Abstract base class for services using enum-driven polymorphic dispatch.

    Subclasses must:
    1. Implement _determine_strategy() to select the appropriate strategy
    2. Register handlers using _register_handlers()

    When a fallback strategy is given, strategies without a handler dispatch
    to it instead of raising.
    """

    def __init__(self, fallback: Optional[StrategyEnum] = None):
        """Initialize the service with an empty handler registry."""
        self._handlers: Dict[StrategyEnum, Callable] = {}
        self._fallback = fallback

    def _register_handlers(self, handlers: Dict[StrategyEnum, Callable]) -> None:
        """
        Register strategy handlers.

        Args:
            handlers: Dictionary mapping strategy enum values to handlers

        Raises:
            ValueError: If handlers dict is empty or lacks the fallback strategy
        """
        if not handlers:
            raise ValueError(f"{self.__class__.__name__}: Handler registry cannot be empty")
        if self._fallback is not None and self._fallback not in handlers:
            raise ValueError(
                f"{self.__class__.__name__}: Fallback strategy {self._fallback} has no handler"
            )

        self._handlers = dict(handlers)
        logger.debug(f"{self.__class__.__name__}: Registered {len(handlers)} handlers")

    @abstractmethod
    def _determine_strategy(self, *args, **kwargs) -> StrategyEnum:
        """
        Determine which strategy to use based on input.

        Returns:
            Strategy enum value indicating which handler to use
        """
        pass

    def dispatch(self, *args, **kwargs) -> Any:
        """
        Dispatch to the appropriate handler based on determined strategy.

        Handlers receive the same arguments as dispatch().

        Raises:
            KeyError: If strategy is not registered and there is no fallback
        """
        strategy = self._determine_strategy(*args, **kwargs)

        if strategy not in self._handlers:
            if self._fallback is None:
                raise KeyError(
                    f"{self.__class__.__name__}: No handler registered for strategy {strategy}. "
                    f"Available strategies: {list(self._handlers.keys())}"
                )
            logger.debug(f"{self.__class__.__name__}: {strategy} unhandled, using {self._fallback}")
            strategy = self._fallback

        handler = self._handlers[strategy]
        logger.debug(f"{self.__class__.__name__}: Dispatching to {strategy.value} handler")
        return handler(*args, **kwargs)

    def get_registered_strategies(self) -> list:
        """Get list of all registered strategies."""
        return list(self._handlers.keys())

    def has_strategy(self, strategy: StrategyEnum) -> bool:
        """Check if a strategy has a registered handler."""
        return strategy in self._handlers
