""" Utility classes to support others """

import importlib
import datetime
from collections.abc import Mapping


def _load_class(class_path, default):
    """ Loads the class from the class_path string """
    if class_path is None:
        return default

    component = class_path.rsplit('.', 1)
    loaded_class = getattr(
        importlib.import_module(component[0]),
        component[1],
        default
    ) if len(component) > 1 else default

    return loaded_class


def _get_path(container, *path, default=None):
    """
    Walk down nested mappings following path, returning default as soon as
    a step is missing or is not a mapping.

    e.g. _get_path(aggregations, "taxons", "codes") for {"taxons": {"codes": {...}}}
    """
    current = container
    for step in path:
        if not isinstance(current, Mapping) or step not in current:
            return default
        current = current[step]
    return current if current is not None else default


def _get_buckets(container, *path):
    """ Return the buckets found at path, leaving out entries which are not mappings """
    buckets = _get_path(container, *path, "buckets", default=[])
    if isinstance(buckets, (str, bytes, Mapping)):
        return []
    try:
        return [bucket for bucket in buckets if isinstance(bucket, Mapping)]
    except TypeError:
        return []


def _as_int(value):
    """ Coerce a bucket key or count to int, None when it is not a whole number """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class Timer:

    """ Simple timer class to measure elapsed time """
    def __init__(self):
        self._start_time = None
        self._end_time = None

    def start(self):
        """ Start the timer """
        self._start_time = datetime.datetime.now()

    def stop(self):
        """ Stop the timer """
        self._end_time = datetime.datetime.now()

    @property
    def start_time(self):
        """ Return the start time """
        return self._start_time

    @property
    def end_time(self):
        """ Return the end time """
        return self._end_time

    @property
    def elapsed_time(self):
        """ Return the elapsed time """
        return (self._end_time - self._start_time).seconds
