"""Fragment values and the collector that merges them.

``FragmentAndParameters`` is what rendering one mapping (or one WHERE
condition, or one nested select) produces.  ``FragmentCollector`` folds many
of them into one ordered fragment list and one parameter map.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from bindql.errors import DuplicateParameterError


@dataclass(frozen=True)
class FragmentAndParameters:
    """A rendered SQL fragment and the parameters it binds.

    Attributes:
        fragment: Rendered SQL text.
        parameters: Read-only, insertion-ordered parameter map.
    """

    fragment: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @classmethod
    def of(cls, fragment: str, **parameters: Any) -> FragmentAndParameters:
        return cls(fragment=fragment, parameters=parameters)

    def with_fragment(self, fragment: str) -> FragmentAndParameters:
        """Return a copy with ``fragment`` replaced and parameters kept."""
        return FragmentAndParameters(fragment=fragment, parameters=self.parameters)


class FragmentCollector:
    """Accumulates fragments and parameters, strictly left to right.

    Parameter keys are drawn from one monotonic sequence per render, so a
    repeated key means a rendering defect; the collector raises instead of
    overwriting the earlier value.

    Example::

        collector = FragmentCollector.collect(
            visitor.visit(m) for m in model.mappings
        )
        ", ".join(collector.fragments)
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._parameters: dict[str, Any] = {}

    @classmethod
    def collect(
        cls, items: Iterable[FragmentAndParameters | None]
    ) -> FragmentCollector:
        """Fold ``items`` into a new collector, skipping ``None`` entries."""
        collector = cls()
        for item in items:
            if item is not None:
                collector.add(item)
        return collector

    def add(self, item: FragmentAndParameters) -> None:
        """Append one fragment and merge its parameters.

        Raises:
            DuplicateParameterError: If a parameter key is already present.
        """
        self.add_parameters(item.parameters, item.fragment)
        self._fragments.append(item.fragment)

    def add_parameters(self, parameters: Mapping[str, Any], fragment: str = "") -> None:
        """Merge parameters that belong to no collected fragment."""
        for key in parameters:
            if key in self._parameters:
                raise DuplicateParameterError(key, fragment)
        self._parameters.update(parameters)

    def merge(self, other: FragmentCollector) -> FragmentCollector:
        """Append everything collected by ``other`` and return ``self``."""
        self.add_parameters(other._parameters)
        self._fragments.extend(other._fragments)
        return self

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def parameters(self) -> dict[str, Any]:
        """A fresh copy of the collected parameter map."""
        return dict(self._parameters)

    def is_empty(self) -> bool:
        return not self._fragments

    def __len__(self) -> int:
        return len(self._fragments)
