"""Rendering strategy registry (Open/Closed Principle).

Strategies are stateless, so the registry hands out one shared instance per
name.  Register a new strategy once; every renderer that accepts a strategy
name picks it up automatically.

Usage::

    from bindql.render.registry import RenderingStrategies

    @RenderingStrategies.register("qmark")
    class QmarkRenderingStrategy(RenderingStrategy):
        ...

    RenderingStrategies.get("qmark")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from bindql.errors import ConfigurationError
from bindql.render.strategy import (
    MyBatis3RenderingStrategy,
    RenderingStrategy,
    SpringNamedParameterRenderingStrategy,
)


class RenderingStrategies:
    """Registry mapping strategy names to shared :class:`RenderingStrategy`
    instances.

    Example::

        strategy = RenderingStrategies.get("spring")
        strategy is RenderingStrategies.SPRING_NAMED_PARAMETER  # True
    """

    MYBATIS3: ClassVar[RenderingStrategy] = MyBatis3RenderingStrategy()
    SPRING_NAMED_PARAMETER: ClassVar[RenderingStrategy] = (
        SpringNamedParameterRenderingStrategy()
    )

    _strategies: ClassVar[dict[str, RenderingStrategy]] = {
        "mybatis3": MYBATIS3,
        "spring": SPRING_NAMED_PARAMETER,
    }

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[RenderingStrategy]], type[RenderingStrategy]]:
        """Decorator that instantiates and registers a strategy class.

        Args:
            name: The strategy name (e.g. ``"qmark"``).

        Returns:
            A decorator that registers and returns the strategy class.
        """

        def decorator(strategy_cls: type[RenderingStrategy]) -> type[RenderingStrategy]:
            cls._strategies[name] = strategy_cls()
            return strategy_cls

        return decorator

    @classmethod
    def register_instance(cls, name: str, strategy: RenderingStrategy) -> None:
        """Register an existing strategy instance without the decorator form."""
        cls._strategies[name] = strategy

    @classmethod
    def get(cls, name: str) -> RenderingStrategy:
        """Return the strategy registered for ``name``.

        Raises:
            ConfigurationError: If no strategy is registered for ``name``.
        """
        strategy = cls._strategies.get(name)
        if strategy is None:
            registered = sorted(cls._strategies)
            raise ConfigurationError(
                f"Unknown rendering strategy: '{name}'. Registered strategies: {registered}.",
                details={"name": name, "registered": registered},
            )
        return strategy

    @classmethod
    def resolve(cls, strategy: RenderingStrategy | str | None) -> RenderingStrategy:
        """Accept an instance or a registered name; reject ``None``.

        Raises:
            ConfigurationError: If ``strategy`` is ``None`` or an unknown name.
        """
        if strategy is None:
            raise ConfigurationError(
                "A rendering strategy is required.", missing=["strategy"]
            )
        if isinstance(strategy, str):
            return cls.get(strategy)
        return strategy

    @classmethod
    def registered_names(cls) -> list[str]:
        """Return the sorted list of registered strategy names."""
        return sorted(cls._strategies)


MYBATIS3 = RenderingStrategies.MYBATIS3
SPRING_NAMED_PARAMETER = RenderingStrategies.SPRING_NAMED_PARAMETER
