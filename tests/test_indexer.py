"""Tests for state indexers."""

import numpy as np
import pytest

from graph_astar.core import (
    AttributeIndexer, DefaultIndexer, IndexerError, StateIndexer, check_identity, is_integral,
    resolve_indexer
)
from graph_astar.core.data_models import StateExample
from graph_astar.graph import Graph


class NamedState:
    """State with a custom identity attribute."""

    def __init__(self, key, label):
        self.key = key
        self.label = label


class TestDefaultIndexer:
    """Test DefaultIndexer behavior."""

    def test_integral_state_is_its_own_identity(self):
        indexer = DefaultIndexer()
        assert indexer(42) == 42
        assert indexer(-7) == -7

    def test_id_field(self):
        """States exposing id_ are indexed by that field."""
        assert DefaultIndexer()(StateExample(5)) == 5

    def test_plain_id_attribute(self):
        class WithId:
            id = 11

        assert DefaultIndexer()(WithId()) == 11

    def test_unindexable_state_rejected(self):
        with pytest.raises(IndexerError):
            DefaultIndexer()("not-a-state")

    def test_bool_rejected(self):
        with pytest.raises(IndexerError):
            DefaultIndexer()(True)

    def test_numpy_integer_state(self):
        identity = DefaultIndexer()(np.int64(9))
        assert identity == 9
        assert type(identity) is int
        assert DefaultIndexer()(np.uint8(3)) == 3

    def test_numpy_bool_rejected(self):
        with pytest.raises(IndexerError):
            DefaultIndexer()(np.bool_(True))

    def test_indexer_error_is_type_error(self):
        with pytest.raises(TypeError):
            DefaultIndexer()(object())


class TestAttributeIndexer:
    """Test AttributeIndexer behavior."""

    def test_reads_attribute(self):
        indexer = AttributeIndexer('key')
        assert indexer(NamedState(3, 'c')) == 3

    def test_missing_attribute(self):
        with pytest.raises(IndexerError):
            AttributeIndexer('key')(StateExample(1))

    def test_is_state_indexer(self):
        assert isinstance(AttributeIndexer('key'), StateIndexer)


class TestIdentityChecks:
    """Test identity validation."""

    def test_valid_range(self):
        assert check_identity(2 ** 63 - 1) == 2 ** 63 - 1
        assert check_identity(-(2 ** 63)) == -(2 ** 63)

    def test_out_of_range(self):
        with pytest.raises(IndexerError):
            check_identity(2 ** 63)

    def test_non_integer(self):
        with pytest.raises(IndexerError):
            check_identity(1.5)
        with pytest.raises(IndexerError):
            check_identity("1")
        with pytest.raises(IndexerError):
            check_identity(False)

    def test_numpy_identity_normalised(self):
        identity = check_identity(np.int64(5))
        assert identity == 5
        assert type(identity) is int
        assert check_identity(np.int32(-3)) == -3

    def test_numpy_identity_from_custom_indexer(self):
        graph = Graph(indexer=lambda state: np.ravel_multi_index(state, (4, 4)))
        vertex = graph.add_vertex((1, 2))

        assert vertex.vertex_id == 6
        assert type(vertex.vertex_id) is int
        assert graph.find_vertex(6) is vertex
        assert graph.find_vertex((1, 2)) is vertex

    def test_is_integral(self):
        assert is_integral(3)
        assert is_integral(np.int16(3))
        assert not is_integral(True)
        assert not is_integral(np.bool_(True))
        assert not is_integral(3.0)

    def test_graph_rejects_bad_identity(self):
        graph = Graph(indexer=lambda state: str(state))
        with pytest.raises(IndexerError):
            graph.add_vertex(1)

    def test_graph_range_check_can_be_disabled(self):
        graph = Graph(indexer=lambda state: state * 2 ** 64, check_identity_range=False)
        vertex = graph.add_vertex(1)
        assert vertex.vertex_id == 2 ** 64


class TestResolveIndexer:
    """Test indexer resolution at graph construction."""

    def test_none_gives_default(self):
        assert isinstance(resolve_indexer(None), DefaultIndexer)

    def test_callable_passes_through(self):
        func = lambda state: 1  # noqa: E731
        assert resolve_indexer(func) is func

    def test_non_callable_rejected(self):
        with pytest.raises(IndexerError):
            resolve_indexer(42)

    def test_graph_construction_rejects_non_callable(self):
        with pytest.raises(IndexerError):
            Graph(indexer="id_")
