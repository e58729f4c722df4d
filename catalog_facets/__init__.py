""" Faceted catalog search: aggregation requests and facet extraction """
