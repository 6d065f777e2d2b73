"""Tests for FisherYatesShuffler and the shuffle() function."""

from collections import Counter

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from shufflax.engine import FisherYatesShuffler, StepRecorder, shuffle
from shufflax.sources import (
    NumpyIndexSource,
    PythonIndexSource,
    RecordingIndexSource,
    ScriptedIndexSource,
)


class TestShuffleProperties:
    """Length, multiset and non-mutation guarantees."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 57])
    def test_length_preserved(self, n, seeded_source):
        data = list(range(n))
        assert len(shuffle(data, seeded_source)) == n

    def test_multiset_preserved_with_duplicates(self, seeded_source):
        data = ["a", "b", "a", "c", "b", "a"]
        for _ in range(20):
            assert Counter(shuffle(data, seeded_source)) == Counter(data)

    def test_input_not_mutated(self, seeded_source):
        data = [1, 2, 3, 4, 5]
        snapshot = list(data)
        result = shuffle(data, seeded_source)
        assert data == snapshot
        assert result is not data

    def test_nested_elements_not_shared(self, seeded_source):
        data = [[1], [2], [3]]
        result = shuffle(data, seeded_source)
        for inner in result:
            inner.append(99)
        assert data == [[1], [2], [3]]

    def test_object_array_elements_not_shared(self, seeded_source):
        data = np.empty(3, dtype=object)
        data[0], data[1], data[2] = [1], [2, 3], [4, 5, 6]
        result = shuffle(data, seeded_source)
        for inner in result:
            inner.append(99)
        assert [list(item) for item in data] == [[1], [2, 3], [4, 5, 6]]

    def test_object_array_shallow_copy_option(self, seeded_source):
        inner = [1]
        data = np.empty(2, dtype=object)
        data[0], data[1] = inner, [2]
        result = FisherYatesShuffler(seeded_source, deep_copy=False).shuffle(data)
        assert any(item is inner for item in result)

    def test_nested_input_mutation_does_not_leak_into_output(self, seeded_source):
        data = [{"id": 1}, {"id": 2}]
        result = shuffle(data, seeded_source)
        data[0]["id"] = 100
        assert sorted(item["id"] for item in result) == [1, 2]

    def test_deep_copy_preserves_internal_sharing(self, seeded_source):
        shared = [0]
        result = shuffle([shared, shared], seeded_source)
        assert result[0] is result[1]
        assert result[0] is not shared

    def test_shallow_copy_option(self, seeded_source):
        inner = [1]
        shuffler = FisherYatesShuffler(seeded_source, deep_copy=False)
        result = shuffler.shuffle([inner, [2]])
        assert any(item is inner for item in result)

    def test_custom_copier(self, seeded_source):
        calls = []

        def copier(item):
            calls.append(item)
            return dict(item)

        shuffler = FisherYatesShuffler(seeded_source, copier=copier)
        data = [{"a": 1}, {"b": 2}]
        result = shuffler.shuffle(data)
        assert len(calls) == 2
        assert all(copied is not original for copied in result for original in data)


class TestDegenerateInputs:
    """Empty and single-element inputs."""

    def test_empty(self):
        source = ScriptedIndexSource([])
        assert shuffle([], source) == []

    def test_single(self):
        source = ScriptedIndexSource([])
        assert shuffle(["x"], source) == ["x"]

    def test_degenerate_inputs_do_not_draw(self):
        source = RecordingIndexSource(PythonIndexSource(seed=0))
        shuffle([], source)
        shuffle([1], source)
        assert source.calls == []


class TestDeterministicReplay:
    """Scripted index sources give exact outputs."""

    def test_abcd_example(self, abcd_script):
        assert shuffle(["A", "B", "C", "D"], abcd_script) == ["C", "D", "A", "B"]

    def test_draw_bounds_shrink(self, abcd_script):
        shuffle(["A", "B", "C", "D"], abcd_script)
        assert abcd_script.bounds == [4, 3, 2]

    def test_n_minus_one_draws(self):
        source = RecordingIndexSource(PythonIndexSource(seed=1))
        shuffle(list(range(8)), source)
        assert [bound for bound, _ in source.calls] == [8, 7, 6, 5, 4, 3, 2]

    def test_identity_script(self):
        """Drawing j == i at every step leaves the order unchanged."""
        source = ScriptedIndexSource([3, 2, 1])
        assert shuffle([1, 2, 3, 4], source) == [1, 2, 3, 4]

    def test_reversal_script(self):
        source = ScriptedIndexSource([0, 1])
        # i=2 j=0: [c, b, a]; i=1 j=1: unchanged
        assert shuffle(["a", "b", "c"], source) == ["c", "b", "a"]

    def test_seeded_sources_reproduce(self):
        data = list(range(20))
        a = shuffle(data, PythonIndexSource(seed=99))
        b = shuffle(data, PythonIndexSource(seed=99))
        assert a == b


class TestContainerTypes:
    """Output container mirrors the input."""

    def test_tuple(self, abcd_script):
        assert shuffle(("A", "B", "C", "D"), abcd_script) == ("C", "D", "A", "B")

    def test_string(self, abcd_script):
        assert shuffle("ABCD", abcd_script) == "CDAB"

    def test_range_becomes_list(self, abcd_script):
        assert shuffle(range(4), abcd_script) == [2, 3, 0, 1]

    def test_numpy_1d(self, abcd_script):
        data = np.array([10, 20, 30, 40], dtype=np.int32)
        result = shuffle(data, abcd_script)
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.int32
        np.testing.assert_array_equal(result, [30, 40, 10, 20])
        np.testing.assert_array_equal(data, [10, 20, 30, 40])

    def test_numpy_rows(self, abcd_script):
        data = np.arange(8).reshape(4, 2)
        result = shuffle(data, abcd_script)
        assert result.shape == (4, 2)
        np.testing.assert_array_equal(result, [[4, 5], [6, 7], [0, 1], [2, 3]])
        result[0, 0] = -1
        assert data[2, 0] == 4

    def test_numpy_object_array_of_equal_length_lists(self):
        data = np.empty(2, dtype=object)
        data[0], data[1] = [1, 2], [3, 4]
        result = shuffle(data, ScriptedIndexSource([0]))
        assert isinstance(result, np.ndarray)
        assert result.dtype == object
        assert result.shape == (2,)
        assert list(result) == [[3, 4], [1, 2]]

    def test_numpy_empty(self):
        data = np.zeros((0, 3))
        result = shuffle(data, ScriptedIndexSource([]))
        assert result.shape == (0, 3)

    def test_jax_array(self, abcd_script):
        data = jnp.array([1.0, 2.0, 3.0, 4.0])
        result = shuffle(data, abcd_script)
        assert isinstance(result, jax.Array)
        np.testing.assert_allclose(np.asarray(result), [3.0, 4.0, 1.0, 2.0])

    def test_zero_dim_array_rejected(self):
        with pytest.raises(ValueError, match="zero-dimensional"):
            shuffle(np.array(5))


class TestShufflerInstance:
    """FisherYatesShuffler construction and reuse."""

    def test_callable(self, abcd_script):
        shuffler = FisherYatesShuffler(abcd_script)
        assert shuffler(["A", "B", "C", "D"]) == ["C", "D", "A", "B"]

    def test_default_source(self):
        shuffler = FisherYatesShuffler()
        assert sorted(shuffler.shuffle([3, 1, 2])) == [1, 2, 3]

    def test_numpy_source_backend(self):
        shuffler = FisherYatesShuffler(NumpyIndexSource(seed=0))
        assert sorted(shuffler.shuffle(list(range(10)))) == list(range(10))

    def test_observers_from_constructor(self, abcd_script):
        recorder = StepRecorder()
        FisherYatesShuffler(abcd_script, observers=[recorder]).shuffle(["A", "B", "C", "D"])
        assert recorder.swaps == [(3, 1), (2, 0), (1, 1)]

    def test_observer_argument_on_function(self, abcd_script):
        seen = []
        shuffle(["A", "B", "C", "D"], abcd_script, observer=seen.append)
        assert [e.current_index for e in seen] == [3, 2, 1]

    def test_observer_does_not_change_draws(self):
        data = list(range(12))
        plain_source = RecordingIndexSource(PythonIndexSource(seed=8))
        observed_source = RecordingIndexSource(PythonIndexSource(seed=8))

        plain = shuffle(data, plain_source)
        observed = shuffle(data, observed_source, observer=lambda event: None)

        assert plain == observed
        assert plain_source.calls == observed_source.calls


class TestUniformitySmoke:
    """Cheap sanity check; the full statistical test lives in verification."""

    def test_every_permutation_of_three_appears(self):
        source = PythonIndexSource(seed=31)
        seen = {tuple(shuffle([1, 2, 3], source)) for _ in range(600)}
        assert len(seen) == 6

    def test_first_position_uniform(self):
        source = PythonIndexSource(seed=17)
        counts = Counter(shuffle(list(range(5)), source)[0] for _ in range(25_000))
        for value in range(5):
            assert counts[value] == pytest.approx(5_000, rel=0.08)
