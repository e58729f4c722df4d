""" Tests for aggregation request building """

import ddt
from django.test import TestCase

from catalog_facets.aggregations import (
    MAX_AGGREGATED_ATTRIBUTES_INFO,
    MAX_AGGREGATED_TAXON_INFO,
    build_aggregation,
    build_aggregations,
)


@ddt.ddt
class BuildAggregationTests(TestCase):
    """ Tests for the aggregation of a single attribute field """

    def test_filters_on_attribute_code(self):
        aggregation = build_aggregation("color")
        self.assertEqual(
            aggregation["filter"],
            {"bool": {"must": [{"term": {"attributes.code": "color"}}]}}
        )

    def test_buckets_by_value_without_size(self):
        """ the number of values is left to the backend default """
        aggregation = build_aggregation("color")
        self.assertEqual(aggregation["aggs"], {"values": {"terms": {"field": "attributes.value.keyword"}}})
        self.assertNotIn("size", aggregation["aggs"]["values"]["terms"])


@ddt.ddt
class BuildAggregationsTests(TestCase):
    """ Tests for the full aggregation request """

    @ddt.data([], (), None, set())
    def test_no_fields(self, fields):
        self.assertEqual(build_aggregations(fields), {})

    def test_filters_keyed_by_field(self):
        aggregations = build_aggregations(["color", "size"])
        self.assertEqual(set(aggregations), {"filters", "attributes", "taxons"})
        self.assertEqual(aggregations["filters"]["nested"], {"path": "attributes"})
        self.assertEqual(set(aggregations["filters"]["aggs"]), {"color", "size"})
        self.assertEqual(aggregations["filters"]["aggs"]["size"], build_aggregation("size"))

    def test_lookup_caps(self):
        aggregations = build_aggregations(["color", "size"])
        attribute_codes = aggregations["attributes"]["aggs"]["codes"]
        taxon_codes = aggregations["taxons"]["aggs"]["codes"]

        self.assertEqual(MAX_AGGREGATED_ATTRIBUTES_INFO, 100)
        self.assertEqual(MAX_AGGREGATED_TAXON_INFO, 500)
        self.assertEqual(attribute_codes["terms"], {"field": "attributes.code", "size": 100})
        self.assertEqual(taxon_codes["terms"], {"field": "taxon.code", "size": 500})

    def test_lookup_structure(self):
        aggregations = build_aggregations(["color"])
        self.assertEqual(aggregations["attributes"]["nested"], {"path": "attributes"})
        self.assertEqual(
            aggregations["attributes"]["aggs"]["codes"]["aggs"],
            {"names": {"terms": {"field": "attributes.name.keyword"}}}
        )
        self.assertEqual(aggregations["taxons"]["nested"], {"path": "taxon"})
        levels = aggregations["taxons"]["aggs"]["codes"]["aggs"]["levels"]
        self.assertEqual(levels["terms"], {"field": "taxon.level"})
        self.assertEqual(levels["aggs"], {"names": {"terms": {"field": "taxon.name"}}})

    @ddt.data(
        ["color", "size"],
        ["size", "color"],
        {"size", "color"},
        ("color", "size", "color"),
    )
    def test_field_order_irrelevant(self, fields):
        self.assertEqual(build_aggregations(fields), build_aggregations(["color", "size"]))

    def test_generator_of_fields(self):
        aggregations = build_aggregations(field for field in ["material"])
        self.assertEqual(list(aggregations["filters"]["aggs"]), ["material"])
