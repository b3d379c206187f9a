# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for SearchQueryBuilder."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from AzureSearch.Client.models.query_builder import SearchQueryBuilder


class TestSearchQueryBuilder(unittest.TestCase):
    def test_empty_builder(self):
        self.assertEqual(SearchQueryBuilder("hotels").build(), "")

    def test_search_text_is_encoded(self):
        qs = SearchQueryBuilder("hotels").search("beach view & pool").build()
        self.assertEqual(qs, "search=beach%20view%20%26%20pool")

    def test_search_all(self):
        self.assertEqual(SearchQueryBuilder("hotels").search("*").build(), "search=*")

    def test_search_mode_and_query_type(self):
        qs = SearchQueryBuilder("hotels").search("spa", mode="all", query_type="full").build()
        self.assertEqual(qs, "search=spa&searchMode=all&queryType=full")

    def test_invalid_mode(self):
        with self.assertRaises(ValueError):
            SearchQueryBuilder("hotels").search("spa", mode="most")

    def test_filters_joined_with_and(self):
        qs = SearchQueryBuilder("hotels").filter_eq("category", "Resort").filter_gt("rating", 4).build()
        self.assertEqual(qs, "$filter=category%20eq%20'Resort'%20and%20rating%20gt%204")

    def test_filter_value_formatting(self):
        qb = SearchQueryBuilder("hotels")
        self.assertEqual(qb._format_value("O'Neil"), "'O''Neil'")
        self.assertEqual(qb._format_value(True), "true")
        self.assertEqual(qb._format_value(None), "null")
        self.assertEqual(qb._format_value(2.5), "2.5")

    def test_datetime_filter_uses_iso_literal(self):
        qs = SearchQueryBuilder("hotels").filter_ge("lastRenovationDate", datetime(2020, 1, 1, tzinfo=timezone.utc)).build()
        self.assertEqual(qs, "$filter=lastRenovationDate%20ge%202020-01-01T00%3A00%3A00Z")

    def test_datetime_value_formatting(self):
        fmt = SearchQueryBuilder._format_value
        self.assertEqual(fmt(datetime(2020, 1, 1, tzinfo=timezone.utc)), "2020-01-01T00:00:00Z")
        # Naive values are treated as UTC
        self.assertEqual(fmt(datetime(2020, 1, 1, 8, 30)), "2020-01-01T08:30:00Z")
        plus_two = timezone(timedelta(hours=2))
        self.assertEqual(fmt(datetime(2020, 1, 1, tzinfo=plus_two)), "2020-01-01T00:00:00+02:00")

    def test_offset_datetime_filter_is_encoded(self):
        when = datetime(2020, 1, 1, tzinfo=timezone(timedelta(hours=2)))
        qs = SearchQueryBuilder("hotels").filter_lt("lastRenovationDate", when).build()
        self.assertEqual(qs, "$filter=lastRenovationDate%20lt%202020-01-01T00%3A00%3A00%2B02%3A00")

    def test_select_order_top_skip_count(self):
        qs = (
            SearchQueryBuilder("hotels")
            .select("hotelId", "hotelName")
            .order_by("rating", descending=True)
            .top(10)
            .skip(20)
            .include_count()
            .build()
        )
        self.assertEqual(qs, "$select=hotelId,hotelName&$orderby=rating%20desc&$top=10&$skip=20&$count=true")

    def test_top_and_skip_bounds(self):
        with self.assertRaises(ValueError):
            SearchQueryBuilder("hotels").top(0)
        with self.assertRaises(ValueError):
            SearchQueryBuilder("hotels").skip(-1)

    def test_execute_requires_binding(self):
        with self.assertRaises(RuntimeError):
            SearchQueryBuilder("hotels").execute()

    def test_execute_delegates_to_document_ops(self):
        ops = MagicMock()
        SearchQueryBuilder("hotels", _document_ops=ops).search("spa").top(5).execute()
        ops.query.assert_called_once_with("hotels", "search=spa&$top=5", raw=False)
