# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 mapviews Rui Pinheiro

import pytest

from mapviews import EmptyCollectionError, KeyView, TooManyElementsError
from mapviews.collections import DelegatingCollection


class TupleCollection(DelegatingCollection[int, tuple[int, ...]]):
    def _get_source(self):
        return self._get_instance()


@pytest.mark.collections
@pytest.mark.delegating_collections
class TestDelegatingIterable:
    def test_forwards_collection_protocol(self):
        c = TupleCollection((1, 2, 3))
        assert list(c) == [1, 2, 3]
        assert 2 in c
        assert 4 not in c
        assert len(c) == 3
        assert c.is_not_empty
        assert TupleCollection(()).is_empty

    def test_predicates(self):
        c = TupleCollection((1, 2, 3))
        assert c.any(lambda x: x > 2)
        assert not c.any(lambda x: x > 3)
        assert c.every(lambda x: x > 0)
        assert not c.every(lambda x: x > 1)
        assert TupleCollection(()).every(lambda x: False)

    def test_fold_reduce_join(self):
        c = TupleCollection((1, 2, 3, 4))
        assert c.fold(10, lambda acc, x: acc + x) == 20
        assert c.reduce(lambda a, b: a * b) == 24
        assert c.join("-") == "1-2-3-4"
        assert c.join() == "1234"

    def test_reduce_empty_raises(self):
        with pytest.raises(EmptyCollectionError):
            TupleCollection(()).reduce(lambda a, b: a + b)

    def test_first_last_single(self):
        c = TupleCollection((5, 6, 7))
        assert c.first == 5
        assert c.last == 7
        assert TupleCollection((9,)).single == 9

        with pytest.raises(EmptyCollectionError):
            _ = TupleCollection(()).first
        with pytest.raises(EmptyCollectionError):
            _ = TupleCollection(()).last
        with pytest.raises(EmptyCollectionError):
            _ = TupleCollection(()).single
        with pytest.raises(TooManyElementsError):
            _ = c.single

    def test_where_queries(self):
        c = TupleCollection((1, 2, 3, 4))
        assert c.first_where(lambda x: x % 2 == 0) == 2
        assert c.last_where(lambda x: x % 2 == 0) == 4
        assert c.single_where(lambda x: x == 3) == 3
        assert c.first_where(lambda x: x > 10, or_else=lambda: -1) == -1

        with pytest.raises(EmptyCollectionError):
            c.last_where(lambda x: x > 10)
        with pytest.raises(TooManyElementsError):
            c.single_where(lambda x: x > 1)

    def test_element_at(self):
        c = TupleCollection((1, 2, 3))
        assert c.element_at(0) == 1
        assert c.element_at(2) == 3
        with pytest.raises(IndexError):
            c.element_at(3)
        with pytest.raises(IndexError):
            c.element_at(-1)

    def test_lazy_transformers(self):
        c = TupleCollection((1, 2, 3, 4))
        assert list(c.where(lambda x: x > 2)) == [3, 4]
        assert list(c.map(str)) == ["1", "2", "3", "4"]
        assert list(c.expand(lambda x: [x, x])) == [1, 1, 2, 2, 3, 3, 4, 4]
        assert list(c.followed_by([5])) == [1, 2, 3, 4, 5]
        assert list(c.skip(2)) == [3, 4]
        assert list(c.take(2)) == [1, 2]
        assert list(c.skip_while(lambda x: x < 3)) == [3, 4]
        assert list(c.take_while(lambda x: x < 3)) == [1, 2]

    def test_where_type(self):
        view = KeyView({1: "a", "b": "b", 2.5: "c"})
        assert list(view.where_type(int)) == [1]
        assert list(view.where_type(str)) == ["b"]

    def test_for_each_and_materialisation(self):
        seen = []
        c = TupleCollection((1, 2, 2))
        c.for_each(seen.append)
        assert seen == [1, 2, 2]
        assert c.to_list() == [1, 2, 2]
        assert c.to_set() == {1, 2}

    def test_queries_read_live_mapping(self):
        m = {"a": 1}
        view = KeyView(m)
        assert view.last == "a"
        m["b"] = 2
        assert view.last == "b"
        assert view.to_list() == ["a", "b"]

    def test_repr(self):
        assert repr(TupleCollection((1,))) == "<TupleCollection: (1,)>"
