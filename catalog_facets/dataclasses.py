"""
Defines the dataclasses used in the catalog facets module.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class FilterValue:
    """
    A selectable value of a facet and the number of documents carrying it.
    """
    value: str
    count: int


@dataclass
class Filter:
    """
    A facet shown beside search results, e.g. "Color" with its values.

    count is the number of documents the backend reported for the facet,
    which may be more than the sum of the values when the backend caps them.
    """
    label: str
    count: int
    values: List[FilterValue] = field(default_factory=list)

    def add_value(self, value, count):
        """ Append a value bucket to this facet """
        self.values.append(FilterValue(value, count))


@dataclass
class TaxonChild:
    """
    Direct child of the taxon being browsed.
    """
    code: str
    level: int


@dataclass
class Taxon:
    """
    Taxon being browsed, only its level and direct children matter here.
    """
    code: str
    level: int
    children: List[TaxonChild] = field(default_factory=list)
