"""
Result set of a catalog search: documents, facets and pager
"""
import logging
from collections.abc import Mapping

from django.core.paginator import InvalidPage, Page, Paginator

from .dataclasses import Filter
from .hydrator import SearchResultHydrator
from .pager import ResultSetAdapter
from .utils import _as_int, _get_buckets, _get_path

# log appears to be standard name used for logger
log = logging.getLogger(__name__)

# Translation key, the presentation layer turns it into a display string
TAXON_FILTER_LABEL = "catalog_facets.filters.taxon_filter"


def _total_hits(es_response):
    """
    Number of hits of the response, whether the total is reported as
    {"value": 7, "relation": "eq"} or as a bare integer
    """
    total = _get_path(es_response, "hits", "total", default=0)
    if isinstance(total, Mapping):
        total = total.get("value", 0)
    return _as_int(total) or 0


def _attribute_names(aggregations):
    """
    Map each attribute code to its display name.

    Only the first name bucket of a code is taken, further names for the same
    code come from inconsistent data and are ignored.
    """
    names = {}
    for code_bucket in _get_buckets(aggregations, "attributes", "codes"):
        code = code_bucket.get("key")
        name_buckets = _get_buckets(code_bucket, "names")
        if code is None or not name_buckets or name_buckets[0].get("key") is None:
            continue
        names.setdefault(code, name_buckets[0]["key"])
    return names


def sort_filters(filters):
    """
    Order filters by descending count, and when counts are equal put the
    filter offering more values first
    """
    return sorted(filters, key=lambda f: (-f.count, -len(f.values)))


class ResultSet:

    """
    Search results for one page of a catalog search.

    Built from the raw backend response:

    {
        "hits": {
            "hits": [{"_id": "1", "_source": {...}}, ...],
            "total": {"relation": "eq", "value": 12}
        },
        "aggregations": {
            "filters": {
                "doc_count": 30,
                "color": {"doc_count": 10, "values": {"buckets": [{"key": "red", "doc_count": 6}, ...]}},
                ...
            },
            "attributes": {
                "doc_count": 30,
                "codes": {"buckets": [{"key": "color", "doc_count": 10, "names": {"buckets": [{"key": "Color"}]}}]}
            },
            "taxons": {
                "doc_count": 12,
                "codes": {"buckets": [
                    {"key": "shoes", "doc_count": 7, "levels": {"buckets": [
                        {"key": 2, "doc_count": 7, "names": {"buckets": [{"key": "Shoes", "doc_count": 7}]}}
                    ]}}
                ]}
            }
        }
    }

    Anything missing from the response is read as empty.
    """

    def __init__(self, max_items, page, es_response=None, taxon=None):
        self.max_items = max_items
        self.page = max(_as_int(page) or 1, 1)
        self.results = []
        self.total_hits = 0
        self.filters = []

        if es_response is not None:
            for hit in _get_path(es_response, "hits", "hits", default=[]):
                document = SearchResultHydrator.process_result(hit)
                if document is not None:
                    self.results.append(document)
            self.total_hits = _total_hits(es_response)
            self.init_filters(_get_path(es_response, "aggregations", default={}), taxon)

        self._init_pager()

    def _init_pager(self):
        """ Page over the hits, per_page below 1 is clamped to 1 """
        self.pager = Paginator(ResultSetAdapter(self), max(_as_int(self.max_items) or 1, 1))

    @property
    def current_page(self):
        """
        Page for the requested page number, an empty page when it is out of range
        """
        try:
            return self.pager.page(self.page)
        except InvalidPage:
            return Page([], self.page, self.pager)

    def init_filters(self, aggregations, taxon=None):
        """
        Build the facets from the aggregations of the response
        """
        attribute_names = _attribute_names(aggregations)

        filters = []
        filter_aggregations = _get_path(aggregations, "filters", default={})
        if not isinstance(filter_aggregations, Mapping):
            filter_aggregations = {}
        for field, aggregation in filter_aggregations.items():
            # doc_count of the nested aggregation itself sits next to the fields
            if field == "doc_count" or not isinstance(aggregation, Mapping):
                continue
            count = _as_int(aggregation.get("doc_count")) or 0
            if count <= 0:
                continue
            facet = Filter(attribute_names.get(field, field), count)
            for bucket in _get_buckets(aggregation, "values"):
                value_count = _as_int(bucket.get("doc_count"))
                if bucket.get("key") is None or not value_count or value_count < 1:
                    continue
                facet.add_value(bucket["key"], value_count)
            filters.append(facet)

        self.filters = sort_filters(filters)
        self.add_taxon_filter(aggregations, taxon)
        log.debug("extracted %d filters from aggregations", len(self.filters))

    def add_taxon_filter(self, aggregations, taxon=None):
        """
        Put a filter on the children of the current taxon in front of the others.

        Only taxons one level below the current one (the first level when no
        taxon is browsed) which are direct children of it are offered, each
        with the number of documents found for its code.
        """
        taxon_aggregation = _get_path(aggregations, "taxons")
        if not isinstance(taxon_aggregation, Mapping):
            return
        taxon_count = _as_int(taxon_aggregation.get("doc_count")) or 0
        if taxon_count <= 0:
            return

        child_level = (taxon.level if taxon is not None else 0) + 1
        children = {child.code: child.level for child in taxon.children} if taxon is not None else {}

        taxon_filter = Filter(TAXON_FILTER_LABEL, taxon_count)
        for code_bucket in _get_buckets(taxon_aggregation, "codes"):
            code = code_bucket.get("key")
            code_count = _as_int(code_bucket.get("doc_count")) or 0
            if code_count <= 0 or code not in children:
                continue
            level_bucket = next(
                (
                    bucket for bucket in _get_buckets(code_bucket, "levels")
                    if _as_int(bucket.get("key")) == child_level
                ),
                None
            )
            if level_bucket is None:
                continue
            name_buckets = _get_buckets(level_bucket, "names")
            name = name_buckets[0].get("key") if name_buckets else None
            taxon_filter.add_value(code if name is None else name, code_count)

        if not taxon_filter.values:
            log.debug("no child taxon of level %d found, taxon filter left out", child_level)
            return
        self.filters.insert(0, taxon_filter)
