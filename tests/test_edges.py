"""
Edge model and validator tests.
"""

import pytest
from hypothesis import given, strategies as st

from graphdash.edges import Edge, parse_endpoint, parse_number, revalidate, validate

from .strategies import edges


class TestValidate:

    @given(
        node_count=st.integers(min_value=0, max_value=20),
        s=st.integers(min_value=-5, max_value=25),
        d=st.integers(min_value=-5, max_value=25),
    )
    def test_valid_iff_both_endpoints_in_range(self, node_count, s, d):
        edge = Edge(source=s, destination=d)
        assert validate(edge, node_count) == (0 <= s < node_count and 0 <= d < node_count)

    @given(node_count=st.integers(min_value=0, max_value=20), other=st.integers(min_value=0, max_value=5))
    def test_unassigned_endpoint_is_never_valid(self, node_count, other):
        assert validate(Edge(source=None, destination=other), node_count) is False
        assert validate(Edge(source=other, destination=None), node_count) is False

    def test_self_loop_is_valid(self):
        assert validate(Edge(source=2, destination=2), 3)

    def test_no_nodes_means_no_valid_edge(self):
        assert not validate(Edge(source=0, destination=0), 0)

    @given(edge=edges(), node_count=st.integers(min_value=0, max_value=15))
    def test_revalidate_sets_flag_from_validator(self, edge, node_count):
        checked = revalidate(edge, node_count)
        assert checked.valid == validate(edge, node_count)
        assert checked.triple() == edge.triple()
        assert checked.directed == edge.directed


class TestFieldCoercion:

    @pytest.mark.parametrize("raw, expected", [
        (3, 3), ("4", 4), (" 2 ", 2), (-1, None), ("-1", None),
        (None, None), ("", None), ("abc", None), (True, None),
        (2.0, 2), (-1.0, None), (2.5, None), (float("nan"), None),
    ])
    def test_parse_endpoint(self, raw, expected):
        assert parse_endpoint(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        (5, 5), ("7", 7), ("2.5", 2.5), (4.0, 4), ("x", None), (None, None), ("nan", None),
        ("1e3", 1000), ("-0.5", -0.5),
    ])
    def test_parse_number(self, raw, expected):
        assert parse_number(raw) == expected

    def test_large_integer_strings_keep_every_digit(self):
        assert parse_number("12345678901234567891") == 12345678901234567891
        assert parse_number(str(2 ** 60 + 1)) == 2 ** 60 + 1
        edge = Edge.unassigned().with_field("weight", "12345678901234567891")
        assert edge.weight == 12345678901234567891

    def test_with_field_sets_each_user_field(self):
        edge = Edge.unassigned()
        edge = edge.with_field("source", "1").with_field("destination", 2)
        edge = edge.with_field("weight", "9").with_field("directed", [])
        assert edge == Edge(source=1, destination=2, weight=9, directed=False, valid=False)

    def test_bad_weight_keeps_previous_weight(self):
        edge = Edge(source=0, destination=0, weight=3)
        assert edge.with_field("weight", "heavy").weight == 3

    def test_directed_from_checklist_value(self):
        edge = Edge.unassigned()
        assert edge.with_field("directed", ["directed"]).directed is True
        assert edge.with_field("directed", []).directed is False

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            Edge.unassigned().with_field("valid", True)

    def test_unassigned_edge_defaults(self):
        edge = Edge.unassigned()
        assert (edge.source, edge.destination, edge.weight, edge.directed, edge.valid) == (None, None, 0, True, False)
