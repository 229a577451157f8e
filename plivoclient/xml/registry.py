"""Element registry for the XML builder.

Provides a central lookup for all call-control elements by tag name.
Custom elements can be registered at runtime.
"""

from __future__ import annotations

from typing import Any, Type

from loguru import logger

from plivoclient.xml.base import PlivoElement


class ElementRegistry:
    """Registry mapping XML tag names to element classes.

    All built-in elements are registered automatically on first access.

    Usage:
        registry = ElementRegistry()
        speak = registry.create("Speak", "Hello")
        # or
        dial_cls = registry.get("Dial")
    """

    def __init__(self) -> None:
        self._registry: dict[str, Type[PlivoElement]] = {}
        self._loaded = False

    def _load_builtins(self) -> None:
        """Lazily load all built-in elements."""
        if self._loaded:
            return

        from plivoclient.xml import elements

        builtins: list[Type[PlivoElement]] = [
            elements.Response,
            elements.Speak,
            elements.Play,
            elements.GetDigits,
            elements.Record,
            elements.Dial,
            elements.Number,
            elements.User,
            elements.Conference,
            elements.Message,
            elements.Redirect,
            elements.Wait,
            elements.Hangup,
            elements.PreAnswer,
            elements.DTMF,
        ]

        for cls in builtins:
            self._registry.setdefault(cls.tag(), cls)

        self._loaded = True
        logger.debug(f"Loaded {len(builtins)} built-in XML elements")

    def register(self, cls: Type[PlivoElement]) -> None:
        """Register a custom element class under its tag name.

        A parent still only accepts the new element if its tag is listed in
        the parent's ``nestables``.
        """
        if not isinstance(cls, type) or not issubclass(cls, PlivoElement):
            raise TypeError(f"{cls} is not a subclass of PlivoElement")
        self._load_builtins()
        self._registry[cls.tag()] = cls
        logger.debug(f"Registered custom XML element: {cls.tag()}")

    def get(self, tag: str) -> Type[PlivoElement]:
        """Get an element class by tag name.

        Raises:
            KeyError: If no element is registered for the given tag.
        """
        self._load_builtins()
        if tag not in self._registry:
            available = ", ".join(sorted(self._registry.keys()))
            raise KeyError(
                f"No XML element registered for '{tag}'. "
                f"Available: {available}"
            )
        return self._registry[tag]

    def create(self, tag: str, *args: Any, **kwargs: Any) -> PlivoElement:
        """Create an element instance by tag name."""
        cls = self.get(tag)
        return cls(*args, **kwargs)

    @property
    def available(self) -> list[str]:
        """List all available tag names."""
        self._load_builtins()
        return sorted(self._registry.keys())


# Global singleton
element_registry = ElementRegistry()
