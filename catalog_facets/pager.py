""" Adapter letting django's Paginator page over a catalog result set """


class ResultSetAdapter:

    """
    Object list for django.core.paginator.Paginator.

    The result set only holds the documents of the page that was searched for,
    the rest of the hits stay in the backend. Slices are therefore resolved
    against the offset of that page, and any slice falling outside of it is empty.
    """

    def __init__(self, result_set):
        self._result_set = result_set

    @property
    def offset(self):
        """ position of the first held document within all hits """
        return max(self._result_set.page - 1, 0) * self._result_set.max_items

    def count(self):
        """ total number of hits, not only the ones held """
        return self._result_set.total_hits

    def slice(self, offset, length):
        """ documents between offset and offset + length, as far as they are held """
        results = self._result_set.results
        start = max(offset, self.offset)
        end = min(offset + length, self.offset + len(results))
        if start >= end:
            return []
        return results[start - self.offset:end - self.offset]

    def __len__(self):
        return self.count()

    def __getitem__(self, key):
        if not isinstance(key, slice) or key.step not in (None, 1):
            raise TypeError("ResultSetAdapter only supports contiguous slicing")
        start = key.start or 0
        stop = self.count() if key.stop is None else key.stop
        return self.slice(start, max(stop - start, 0))
