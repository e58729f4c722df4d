""" overridable hydrator object to turn search hits into the documents handed to the caller """

import json
import logging

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder

from .utils import _load_class

# log appears to be standard name used for logger
log = logging.getLogger(__name__)  # pylint: disable=invalid-name


class SearchResultHydrator:

    """
    Class to turn a raw search hit into the document given back with the result set.

    Users of this app will override this class and update setting for SEARCH_RESULT_HYDRATOR
    In particular, an application using this app will want to:
        * override `hydrate`:
            - load the domain object matching the hit, e.g. a product model instance
            - return None to leave the hit out of the results
    """

    _hit = {}

    def __init__(self, hit):
        self._hit = hit

    @property
    def source(self):
        """ The indexed document, as stored in the backend """
        return self._hit.get("_source", {})

    def hydrate(self):
        """
        Default implementation hands back the indexed document itself
        """
        return self.source

    @classmethod
    def process_result(cls, hit):
        """
        Called while building the result set. Finds desired subclass and returns
        the hydrated document, or None if the hit should be left out
        """
        hydrator = _load_class(getattr(settings, "SEARCH_RESULT_HYDRATOR", None), cls)
        try:
            return hydrator(hit).hydrate()
        # protect around any problems introduced by subclasses within their hydration
        except Exception as ex:  # pylint: disable=broad-except
            log.exception("error hydrating search hit %s - %s: will remove from results",
                          json.dumps(hit, cls=DjangoJSONEncoder), str(ex))
            return None
