""" Abstract SearchEngine with factory method """

from django.conf import settings

from .utils import _load_class


class SearchEngine:
    """
    Base abstract SearchEngine object.

    Implementors run the query against the backend and hand back its raw
    response, hits and aggregations included.
    """

    index_name = "catalog"

    def __init__(self, index=None):
        if index:
            self.index_name = index

    def search(self,
               query_string=None,
               field_dictionary=None,
               aggregations=None,
               **kwargs):
        """
        Search for matching documents within the search index.

        Args:
            query_string (str): text to look for within the documents

            field_dictionary (dict): values which _must_ match in order for the
            documents to be included in the results

            aggregations (dict): aggregation request, as built by
            catalog_facets.aggregations.build_aggregations, to send as is

            size, from_: paging of the hits

        Returns:
            raw backend response with "hits" and "aggregations"
        """
        raise NotImplementedError

    def search_string(self, query_string, **kwargs):
        """
        Helper function when primary search is for a query string.
        """
        return self.search(query_string=query_string, **kwargs)

    @staticmethod
    def get_search_engine(index=None):
        """
        Returns the desired implementor (defined in settings).
        """
        search_engine_class = _load_class(getattr(settings, "SEARCH_ENGINE", None), None)
        return search_engine_class(index=index) if search_engine_class else None
