""" catalog search business logic implementations """

import logging

from django.conf import settings
from django.utils.translation import gettext as _

from eventtracking import tracker as track
from .aggregations import build_aggregations
from .result_set import ResultSet
from .search_engine_base import SearchEngine
from .utils import Timer

# log appears to be standard name used for logger
log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_PAGE_SIZE = 100


def catalog_filter_fields():
    """
    Look up the attribute fields offered as facets, override using CATALOG_FILTER_FIELDS setting.
    """
    return getattr(settings, "CATALOG_FILTER_FIELDS", [])


class NoSearchEngineError(Exception):
    """
    NoSearchEngineError exception.

    It is thrown if no search engine is specified.
    """


def _process_pagination_values(size, page):
    """ Validate page size and page number, returning them along with the offset of the page """
    size = int(getattr(settings, "SEARCH_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE) if size is None else size)
    page = int(page)
    max_page_size = getattr(settings, "SEARCH_MAX_PAGE_SIZE", DEFAULT_MAX_PAGE_SIZE)

    if not 0 < size <= max_page_size:
        raise ValueError(_('Invalid page size of {page_size}').format(page_size=size))
    if page < 1:
        raise ValueError(_('Invalid page number {page}').format(page=page))

    from_ = (page - 1) * size
    return size, page, from_


def catalog_search(search_term=None, page=1, size=None, taxon=None, filter_fields=None, field_dictionary=None):
    """
    Search the catalog index and give back the result set with its facets

    Args:
        search_term (str): text to search for, None to match everything
        page (int): 1-based page number
        size (int): page size, SEARCH_DEFAULT_PAGE_SIZE when not provided
        taxon: taxon being browsed, exposing level and children
        filter_fields (list): attribute fields to build facets for, defaults to CATALOG_FILTER_FIELDS
        field_dictionary (dict): values the documents must match
    """
    size, page, from_ = _process_pagination_values(size, page)
    if filter_fields is None:
        filter_fields = catalog_filter_fields()

    searcher = SearchEngine.get_search_engine(
        getattr(settings, "CATALOG_INDEX_NAME", "catalog")
    )
    if not searcher:
        raise NoSearchEngineError("No search engine specified in settings.SEARCH_ENGINE")

    search_timer = Timer()
    search_timer.start()
    try:
        es_response = searcher.search(
            query_string=search_term,
            field_dictionary=field_dictionary,
            aggregations=build_aggregations(filter_fields),
            size=size,
            from_=from_,
        )
    except Exception as ex:  # pylint: disable=broad-except
        log.exception("error while searching catalog index for %s - %r", search_term, ex)
        raise
    search_timer.stop()

    processing_timer = Timer()
    processing_timer.start()
    result_set = ResultSet(size, page, es_response, taxon)
    processing_timer.stop()

    emit_api_timing_event(search_term, page, result_set, processing_timer, search_timer)
    return result_set


def emit_api_timing_event(search_term, page, result_set, processing_timer, search_timer):
    """
    Emit the timing events for the catalog search
    """
    track.emit("catalog.search.executed", {
        "search_term": search_term,
        "page_number": page,
        "results_count": result_set.total_hits,
        "filters_count": len(result_set.filters),
        "processing_time": {
            "start": processing_timer.start_time,
            "end": processing_timer.end_time,
            "elapsed": processing_timer.elapsed_time,
        },
        "search_time": {
            "start": search_timer.start_time,
            "end": search_timer.end_time,
            "elapsed": search_timer.elapsed_time,
        },
    })
