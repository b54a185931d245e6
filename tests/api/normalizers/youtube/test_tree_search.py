"""Testes da busca por chave em árvores JSON."""

from __future__ import annotations

import copy
import sys

from api.normalizers.youtube.tree_search import find_values_by_keys, iter_values_by_keys


class TestFindValuesByKeys:
    """Testes para find_values_by_keys."""

    def test_collects_in_document_order(self) -> None:
        tree = {
            "a": {"target": 1},
            "b": [{"x": {"target": 2}}, {"target": 3}],
            "target": 4,
        }
        assert find_values_by_keys(tree, ["target"]) == [1, 2, 3, 4]

    def test_does_not_recurse_into_matched_values(self) -> None:
        inner = {"backstagePostRenderer": {"postId": "inner"}}
        tree = {
            "sharedPostRenderer": {"postId": "outer", "originalPost": inner},
        }
        result = find_values_by_keys(tree, ["sharedPostRenderer", "backstagePostRenderer"])
        assert len(result) == 1
        assert result[0]["postId"] == "outer"

    def test_multiple_keys_keep_traversal_order(self) -> None:
        tree = {
            "items": [
                {"backstagePostRenderer": {"postId": "1"}},
                {"sharedPostRenderer": {"postId": "2"}},
                {"backstagePostRenderer": {"postId": "3"}},
            ]
        }
        result = find_values_by_keys(tree, ("sharedPostRenderer", "backstagePostRenderer"))
        assert [item["postId"] for item in result] == ["1", "2", "3"]

    def test_shared_subobject_counted_once(self) -> None:
        shared = {"gridVideoRenderer": {"videoId": "v1"}}
        tree = {"a": shared, "b": shared, "c": [shared]}
        result = find_values_by_keys(tree, ["gridVideoRenderer"])
        assert result == [{"videoId": "v1"}]

    def test_same_matched_value_under_two_parents_counted_once(self) -> None:
        renderer = {"videoId": "v1"}
        tree = {"a": {"gridVideoRenderer": renderer}, "b": {"gridVideoRenderer": renderer}}
        assert find_values_by_keys(tree, ["gridVideoRenderer"]) == [renderer]

    def test_value_visited_before_under_other_key_is_still_collected(self) -> None:
        """Sub-objeto já percorrido sob chave comum ainda é coletado sob a chave-alvo."""
        renderer = {"videoId": "v1"}
        tree = {"a": {"x": renderer}, "b": {"gridVideoRenderer": renderer}}
        assert find_values_by_keys(tree, ["gridVideoRenderer"]) == [renderer]

    def test_value_collected_then_reached_by_other_path_once(self) -> None:
        renderer = {"videoId": "v1"}
        tree = {"b": {"gridVideoRenderer": renderer}, "a": {"x": renderer}, "c": [{"gridVideoRenderer": renderer}]}
        assert find_values_by_keys(tree, ["gridVideoRenderer"]) == [renderer]

    def test_equal_but_distinct_objects_are_both_returned(self) -> None:
        tree = {"a": {"k": {"v": 1}}, "b": {"k": {"v": 1}}}
        assert find_values_by_keys(tree, ["k"]) == [{"v": 1}, {"v": 1}]

    def test_scalar_tree_returns_empty(self) -> None:
        assert find_values_by_keys("texto", ["k"]) == []
        assert find_values_by_keys(None, ["k"]) == []

    def test_empty_keys_returns_empty(self) -> None:
        assert find_values_by_keys({"k": 1}, []) == []

    def test_list_root(self) -> None:
        tree = [{"k": 1}, [{"k": 2}]]
        assert find_values_by_keys(tree, ["k"]) == [1, 2]

    def test_does_not_mutate_tree(self) -> None:
        tree = {"a": [{"k": {"x": 1}}, {"b": {"k": 2}}]}
        snapshot = copy.deepcopy(tree)
        find_values_by_keys(tree, ["k"])
        assert tree == snapshot

    def test_deterministic(self) -> None:
        tree = {"a": [{"k": i} for i in range(50)], "b": {"k": "fim"}}
        assert find_values_by_keys(tree, ["k"]) == find_values_by_keys(tree, ["k"])

    def test_deep_tree_beyond_recursion_limit(self) -> None:
        depth = sys.getrecursionlimit() + 100
        tree: dict = {"k": "fundo"}
        for _ in range(depth):
            tree = {"n": tree}
        assert find_values_by_keys(tree, ["k"]) == ["fundo"]

    def test_cyclic_tree_terminates(self) -> None:
        tree: dict = {"a": {"k": 1}}
        tree["a"]["self"] = tree
        assert find_values_by_keys(tree, ["k"]) == [1]


class TestIterValuesByKeys:
    """Testes para a versão lazy."""

    def test_is_lazy(self) -> None:
        tree = {"a": {"k": 1}, "b": {"k": 2}}
        iterator = iter_values_by_keys(tree, ["k"])
        assert next(iterator) == 1
        assert next(iterator) == 2
