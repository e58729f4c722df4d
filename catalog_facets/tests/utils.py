""" Test utilities """

from catalog_facets.dataclasses import Taxon, TaxonChild


def value_buckets(*values):
    """ terms aggregation result out of (key, doc_count) pairs """
    return {"buckets": [{"key": key, "doc_count": count} for key, count in values]}


def filter_aggregation(count, *values):
    """ result of the aggregation built for one attribute field """
    return {"doc_count": count, "values": value_buckets(*values)}


def attribute_code_bucket(code, *names):
    """ attributes.codes bucket with its names """
    return {"key": code, "doc_count": 1, "names": value_buckets(*[(name, 1) for name in names])}


def taxon_code_bucket(code, count, *levels):
    """ taxons.codes bucket, levels given as (level, name) pairs, name may be None """
    level_buckets = []
    for level, name in levels:
        level_bucket = {"key": level, "doc_count": count, "names": value_buckets()}
        if name is not None:
            level_bucket["names"] = value_buckets((name, count))
        level_buckets.append(level_bucket)
    return {"key": code, "doc_count": count, "levels": {"buckets": level_buckets}}


def es_response(filters=None, attributes=None, taxons=None, taxon_count=None, hits=None, total=None):
    """
    Raw backend response.

    filters: {field: filter_aggregation(...)}
    attributes: list of attribute_code_bucket(...)
    taxons: list of taxon_code_bucket(...), taxon_count defaults to their sum
    """
    hits = hits or []
    aggregations = {}
    if filters is not None:
        aggregations["filters"] = dict(filters, doc_count=sum(f["doc_count"] for f in filters.values()))
    if attributes is not None:
        aggregations["attributes"] = {"doc_count": len(attributes), "codes": {"buckets": attributes}}
    if taxons is not None:
        if taxon_count is None:
            taxon_count = sum(bucket["doc_count"] for bucket in taxons)
        aggregations["taxons"] = {"doc_count": taxon_count, "codes": {"buckets": taxons}}
    return {
        "took": 2,
        "timed_out": False,
        "hits": {
            "hits": hits,
            "max_score": 1.0,
            "total": {"relation": "eq", "value": len(hits) if total is None else total},
        },
        "aggregations": aggregations,
    }


def hit(doc_id, **source):
    """ backend hit for a document """
    return {"_id": doc_id, "_index": "catalog", "_score": 1.0, "_source": dict(source, id=doc_id)}


def shoes_taxon():
    """ level 1 "fashion" taxon with "shoes" and "bags" children """
    return Taxon("fashion", 1, [TaxonChild("shoes", 2), TaxonChild("bags", 2)])


# pylint: disable=too-few-public-methods
class FailingHydrator:
    """ Hydrator that cannot load anything """

    def __init__(self, hit):
        self._hit = hit

    def hydrate(self):
        """ always fails """
        raise RuntimeError("no such product")
