"""
Elasticsearch aggregation requests for catalog facets
"""
import logging

# log appears to be standard name used for logger
log = logging.getLogger(__name__)

# These caps bound the number of code -> name lookup entries the backend has
# to materialise, they are not the number of facet values shown to the user
MAX_AGGREGATED_ATTRIBUTES_INFO = 100
MAX_AGGREGATED_TAXON_INFO = 500


def build_aggregation(field):
    """
    Build the aggregation counting the values of one attribute field.

    Documents are reduced to the nested attributes whose code is the field,
    and those are bucketed by value:

    {
        "filter": {"bool": {"must": [{"term": {"attributes.code": "color"}}]}},
        "aggs": {"values": {"terms": {"field": "attributes.value.keyword"}}}
    }

    The values terms aggregation is left to the engine's default size.
    """
    return {
        "filter": {
            "bool": {
                "must": [
                    {"term": {"attributes.code": field}},
                ]
            }
        },
        "aggs": {
            "values": {
                "terms": {"field": "attributes.value.keyword"}
            }
        }
    }


def build_aggregations(fields):
    """
    Build the aggregations to send along with a catalog search.

    Returns an empty dictionary when there are no fields, meaning no
    aggregation is requested at all. Otherwise the result holds:

        filters - one build_aggregation per field, keyed by field
        attributes - attribute code -> attribute name lookup
        taxons - taxon code -> level -> taxon name lookup

    The lookups are needed to give facets their display names.
    """
    fields = list(dict.fromkeys(fields or []))
    if not fields:
        return {}

    log.debug("building aggregations for fields %s", fields)

    return {
        "filters": {
            "nested": {"path": "attributes"},
            "aggs": {field: build_aggregation(field) for field in fields},
        },
        "attributes": {
            "nested": {"path": "attributes"},
            "aggs": {
                "codes": {
                    "terms": {"field": "attributes.code", "size": MAX_AGGREGATED_ATTRIBUTES_INFO},
                    "aggs": {
                        "names": {
                            "terms": {"field": "attributes.name.keyword"}
                        },
                    },
                },
            },
        },
        "taxons": {
            "nested": {"path": "taxon"},
            "aggs": {
                "codes": {
                    "terms": {"field": "taxon.code", "size": MAX_AGGREGATED_TAXON_INFO},
                    "aggs": {
                        "levels": {
                            "terms": {"field": "taxon.level"},
                            "aggs": {
                                "names": {
                                    "terms": {"field": "taxon.name"}
                                },
                            },
                        },
                    },
                },
            },
        },
    }
