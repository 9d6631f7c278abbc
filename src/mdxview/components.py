#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdxview/components.py
"""Custom components that replace tags in rendered markup.

A component is registered under a tag name. When the transform meets an
element with exactly that name it skips the built-in element mapping and
hands the component a :class:`ComponentProps` instead.

Two registration forms are supported:

- ``Components.add(name, fn)`` for components that take no props
- ``Components.add_props(name, fn, adapter)`` for components with their own
  props type; ``adapter`` converts the standard props into it

Examples
--------
    >>> from mdxview.view import Element, Text
    >>> components = Components()
    >>> components.add("Divider", lambda: Element("hr", void=True))
    >>> components.add_props(
    ...     "Badge",
    ...     lambda label: Element("span", {"class": "badge"}, [Text(label)]),
    ...     lambda props: props.attributes.get("label") or "",
    ... )

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Protocol, TypeVar

from mdxview.attributes import ExtractedAttributes
from mdxview.exceptions import ComponentError, ValidationError
from mdxview.view.nodes import Fragment, ViewNode, into_view

logger = logging.getLogger(__name__)

P = TypeVar("P")


def _no_children() -> Fragment:
    return Fragment()


@dataclass
class ComponentProps:
    """Standardized props delivered to every component.

    Parameters
    ----------
    id : str or None
        Value of the element's ``id`` attribute
    classes : list of str
        Tokens of the ``class`` attribute, in order, duplicates kept
    attributes : dict[str, str or None]
        Every attribute of the element; valueless attributes map to None
    children : callable
        Zero-argument function returning the element's transformed children
        as a Fragment. It may be called any number of times, or not at all.
        Each call returns a new Fragment over the same child node objects,
        so a component that places the children more than once shares those
        nodes between the places; copy them before modifying one copy.

    """

    id: Optional[str] = None
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, Optional[str]] = field(default_factory=dict)
    children: Callable[[], Fragment] = _no_children

    @classmethod
    def from_attributes(cls, extracted: ExtractedAttributes, children: Callable[[], Fragment]) -> ComponentProps:
        """Build props from extracted attributes and a children producer."""
        return cls(
            id=extracted.id,
            classes=list(extracted.classes),
            attributes=dict(extracted.attributes),
            children=children,
        )

    def has_attribute(self, name: str) -> bool:
        """Return True if the element carried ``name``, with or without a value."""
        return name in self.attributes


class Component(Protocol):
    """Anything that can render standardized props into a view node."""

    def render(self, props: ComponentProps) -> ViewNode:
        """Render the component."""
        ...


class _NoPropsComponent:
    def __init__(self, fn: Callable[[], Any]):
        self.fn = fn

    def render(self, props: ComponentProps) -> ViewNode:
        return into_view(self.fn())


class _AdaptedComponent:
    def __init__(self, fn: Callable[[Any], Any], props_adapter: Callable[[ComponentProps], Any]):
        self.fn = fn
        self.props_adapter = props_adapter

    def render(self, props: ComponentProps) -> ViewNode:
        return into_view(self.fn(self.props_adapter(props)))


class Components:
    """Registry of components keyed by tag name.

    Names are matched exactly and case-sensitively against tag names as
    written in the markup. Registering a name twice replaces the earlier
    component. Build the registry before rendering; it is only read while a
    render is in progress, so one instance can be shared between renders.

    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._components: dict[str, Component] = {}

    def add(self, name: str, component: Callable[[], Any]) -> None:
        """Register a component that takes no props.

        Parameters
        ----------
        name : str
            Tag name to intercept
        component : callable
            Zero-argument function returning a view node, a string, None, or
            a list of those

        Raises
        ------
        ValidationError
            If the name is empty or the component is not callable

        """
        self._validate(name, component)
        self._store(name, _NoPropsComponent(component))

    def add_props(
        self,
        name: str,
        component: Callable[[P], Any],
        props_adapter: Callable[[ComponentProps], P],
    ) -> None:
        """Register a component with its own props type.

        Parameters
        ----------
        name : str
            Tag name to intercept
        component : callable
            Function taking the adapted props and returning view content
        props_adapter : callable
            Function converting ComponentProps into the component's props

        Raises
        ------
        ValidationError
            If the name is empty or either function is not callable

        """
        self._validate(name, component)
        if not callable(props_adapter):
            raise ValidationError(
                f"Props adapter for component '{name}' must be callable",
                parameter_name="props_adapter",
                parameter_value=props_adapter,
            )
        self._store(name, _AdaptedComponent(component, props_adapter))

    def get(self, name: str) -> Optional[Component]:
        """Return the component registered under ``name``, if any."""
        return self._components.get(name)

    def names(self) -> list[str]:
        """Return registered names in registration order."""
        return list(self._components)

    def render(self, name: str, props: ComponentProps) -> ViewNode:
        """Render the component registered under ``name``.

        Parameters
        ----------
        name : str
            Registered tag name
        props : ComponentProps
            Standardized props

        Returns
        -------
        ViewNode
            The component's output

        Raises
        ------
        KeyError
            If no component is registered under ``name``
        ComponentError
            If the component raises or returns something that is not view content

        """
        component = self._components[name]
        try:
            return component.render(props)
        except ComponentError:
            raise
        except Exception as e:
            raise ComponentError(name, original_error=e) from e

    def __contains__(self, name: object) -> bool:
        """Return True if a component is registered under ``name``."""
        return name in self._components

    def __len__(self) -> int:
        """Return the number of registered components."""
        return len(self._components)

    def __iter__(self) -> Iterator[str]:
        """Iterate over registered names."""
        return iter(self._components)

    def _store(self, name: str, component: Component) -> None:
        if name in self._components:
            logger.warning("Component '%s' already registered, overwriting", name)
        self._components[name] = component
        logger.debug("Registered component: %s", name)

    @staticmethod
    def _validate(name: str, component: Any) -> None:
        if not isinstance(name, str) or not name:
            raise ValidationError(
                "Component name must be a non-empty string", parameter_name="name", parameter_value=name
            )
        if not callable(component):
            raise ValidationError(
                f"Component '{name}' must be callable", parameter_name="component", parameter_value=component
            )
