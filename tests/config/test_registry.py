"""Tests for the index source registry."""

import logging

import pytest

from shufflax.config import registry
from shufflax.config.registry import (
    create_index_source,
    create_shuffler,
    get_index_source_factory,
    is_index_source_registered,
    list_index_sources,
    register_index_source,
)
from shufflax.core import IndexSource, ShuffleConfig
from shufflax.engine import FisherYatesShuffler
from shufflax.sources import (
    JaxIndexSource,
    NumpyIndexSource,
    PythonIndexSource,
    SystemIndexSource,
)


class ConstantIndexSource(IndexSource):
    def _draw(self, bound: int) -> int:
        return bound - 1


@pytest.fixture
def clean_registry():
    saved = dict(registry._INDEX_SOURCE_REGISTRY)
    yield
    registry._INDEX_SOURCE_REGISTRY.clear()
    registry._INDEX_SOURCE_REGISTRY.update(saved)


class TestLookup:
    """Tests for the built-in registrations."""

    def test_builtin_sources(self):
        assert set(list_index_sources()) >= {"python", "system", "numpy", "jax"}

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("python", PythonIndexSource),
            ("system", SystemIndexSource),
            ("numpy", NumpyIndexSource),
            ("jax", JaxIndexSource),
        ],
    )
    def test_factory_lookup(self, name, cls):
        assert get_index_source_factory(name) is cls
        assert is_index_source_registered(name)

    def test_unknown_source(self):
        assert not is_index_source_registered("quantum")
        with pytest.raises(KeyError, match="Unknown index source 'quantum'"):
            get_index_source_factory("quantum")


class TestRegistration:
    """Tests for register_index_source()."""

    def test_register_custom(self, clean_registry):
        register_index_source("constant")(ConstantIndexSource)
        source = create_index_source("constant")
        assert isinstance(source, ConstantIndexSource)
        assert source.next(5) == 4

    def test_reregistering_same_factory_is_allowed(self, clean_registry):
        register_index_source("constant")(ConstantIndexSource)
        register_index_source("constant")(ConstantIndexSource)
        assert get_index_source_factory("constant") is ConstantIndexSource

    def test_conflicting_name(self, clean_registry):
        with pytest.raises(ValueError, match="already registered"):
            register_index_source("python")(ConstantIndexSource)


class TestCreate:
    """Tests for create_index_source() and create_shuffler()."""

    def test_seeded_sources_reproduce(self):
        for name in ("python", "numpy", "jax"):
            a = create_index_source(name, seed=3)
            b = create_index_source(name, seed=3)
            assert [a.next(50) for _ in range(5)] == [b.next(50) for _ in range(5)]

    def test_extra_kwargs_filtered(self):
        source = create_index_source("python", seed=1, stream_name="shuffling")
        assert isinstance(source, PythonIndexSource)

    def test_stream_name_reaches_jax_source(self):
        source = create_index_source("jax", seed=1, stream_name="shuffling")
        assert source.stream_name == "shuffling"

    def test_seed_ignored_for_system_source(self, caplog):
        with caplog.at_level(logging.WARNING, logger="shufflax.config.registry"):
            source = create_index_source("system", seed=5)
        assert isinstance(source, SystemIndexSource)
        assert "does not accept a seed" in caplog.text

    def test_create_shuffler(self):
        shuffler = create_shuffler(ShuffleConfig(source="numpy", seed=2, deep_copy=False))
        assert isinstance(shuffler, FisherYatesShuffler)
        assert isinstance(shuffler.source, NumpyIndexSource)
        assert shuffler.deep_copy is False

    def test_create_shuffler_reproducible(self):
        config = ShuffleConfig(seed=10)
        data = list(range(10))
        assert create_shuffler(config).shuffle(data) == create_shuffler(config).shuffle(data)
