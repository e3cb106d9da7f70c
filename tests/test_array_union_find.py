import numpy as np
import pytest

import disjoint_set as ds


@pytest.fixture(scope="module", autouse=True)
def fixture_set_seed():
    np.random.seed(13)
    return


@pytest.fixture(name="pairs")
def fixture_pairs():
    return np.random.randint(0, 200, size=(150, 2)).tolist()


class TestArrayDisjointSet:
    @staticmethod
    def test_initial_state():
        uf = ds.ArrayDisjointSet(5)
        assert len(uf) == 5
        assert uf.num_sets == 5
        assert list(uf) == [0, 1, 2, 3, 4]
        assert uf.records() == {k: ds.Record(0, k) for k in range(5)}
        assert repr(uf) == "ArrayDisjointSet: contains 5 elements in 5 sets."

    @staticmethod
    def test_empty():
        uf = ds.ArrayDisjointSet(0)
        assert len(uf) == 0
        assert uf.sets() == []
        assert uf.roots().shape == (0,)

    @staticmethod
    def test_bad_size_raises():
        with pytest.raises(ValueError):
            ds.ArrayDisjointSet(-1)
        with pytest.raises(TypeError):
            ds.ArrayDisjointSet(2.5)

    @staticmethod
    def test_scenario():
        uf = ds.ArrayDisjointSet(11)
        uf.union(1, 2)
        uf.union(3, 5)
        uf.union(3, 6)
        assert uf.find(5) == uf.find(6) == uf.find(3) == 3
        assert uf.find(1) == uf.find(2) == 1
        assert uf.find(1) != uf.find(5)
        assert uf.rank(3) == 1
        assert uf.size(6) == 3
        assert isinstance(uf.find(6), int)

    @staticmethod
    def test_matches_dict_structure(pairs):
        uf1 = ds.ArrayDisjointSet(200)
        uf2 = ds.DisjointSet(range(200))
        for x, y in pairs:
            uf1.union(x, y)
            uf2.union(x, y)
            assert uf1.records() == uf2.records()

        assert uf1.num_sets == uf2.num_sets
        assert uf1.sets() == uf2.sets()
        for e in range(200):
            assert uf1.find(e) == uf2.find(e)
            assert uf1.size(e) == uf2.size(e)

    @staticmethod
    def test_roots_compresses_everything(pairs):
        uf = ds.ArrayDisjointSet(200)
        for x, y in pairs:
            uf.union(x, y)

        roots = uf.roots()
        for e in range(200):
            assert uf.parent(e) == roots[e]
            assert uf.parent(int(roots[e])) == roots[e]
            assert uf.find(e) == roots[e]

    @staticmethod
    def test_add_resets_element():
        uf = ds.ArrayDisjointSet(4)
        uf.union(0, 1)
        uf.union(0, 2)
        uf.add(0)
        assert uf.records()[0] == ds.Record(0, 0)
        assert uf.connected(1, 2)
        assert not uf.connected(0, 2)
        assert uf.size(2) == 2
        assert uf.num_sets == 3

        uf.add(2)
        assert uf.size(1) == 1
        assert uf.num_sets == 4

    @staticmethod
    def test_out_of_range_raises():
        uf = ds.ArrayDisjointSet(3)
        before = uf.records()
        with pytest.raises(ds.ElementNotFoundError):
            uf.find(3)
        with pytest.raises(ds.ElementNotFoundError):
            uf.union(0, -1)
        with pytest.raises(ds.ElementNotFoundError):
            uf.add(10)
        with pytest.raises(TypeError):
            uf.find('1')
        assert uf.records() == before
        assert 3 not in uf
        assert 'a' not in uf
        assert 2 in uf

    @staticmethod
    def test_union_bad_argument_changes_nothing():
        uf = ds.ArrayDisjointSet(4)
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(0, 2)
        uf._parent[3] = 2
        before = uf.records()
        assert before[3] == ds.Record(0, 2)

        with pytest.raises(ds.ElementNotFoundError):
            uf.union(3, 4)
        with pytest.raises(TypeError):
            uf.union(3, 'a')
        assert uf.records() == before

    @staticmethod
    def test_add_root_promotes_rank():
        uf = ds.ArrayDisjointSet(4)
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(0, 2)
        uf.add(0)
        assert uf.find(3) == 1
        assert uf.rank(1) == 2
        assert uf.size(2) == 3
