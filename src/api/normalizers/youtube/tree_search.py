"""Busca por chave em árvores JSON arbitrárias.

Percorre mappings e listas em pré-ordem (ordem do documento). Valores sob
uma chave-alvo são coletados e não são explorados: renderers de interesse
nunca aparecem aninhados uns nos outros. Cada nó composto é visitado no
máximo uma vez (por identidade), o que limita o trabalho quando o mesmo
sub-objeto é alcançável por mais de um caminho.

Pré-condição: a árvore é acíclica (saída de json.loads). Em árvores
cíclicas construídas à mão a busca ainda termina, mas o resultado não tem
significado definido.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def _is_composite(node: Any) -> bool:
    return isinstance(node, dict | list)


def _children(node: dict[str, Any] | list[Any]) -> Iterator[tuple[str | None, Any]]:
    if isinstance(node, dict):
        return iter(node.items())
    return ((None, item) for item in node)


def iter_values_by_keys(tree: Any, keys: Iterable[str]) -> Iterator[Any]:
    """Gera, em ordem de documento, os valores sob qualquer chave de `keys`.

    Iterativo (pilha explícita) para não esbarrar no limite de recursão em
    árvores profundas. Nunca altera a árvore.
    """
    targets = frozenset(keys)
    if not targets or not _is_composite(tree):
        return

    # `seen` controla a descida; `emitted`, os valores já coletados.
    seen: set[int] = {id(tree)}
    emitted: set[int] = set()
    stack = [_children(tree)]
    while stack:
        try:
            key, child = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if key is not None and key in targets:
            if _is_composite(child):
                if id(child) in emitted:
                    continue
                emitted.add(id(child))
            yield child
            continue

        if _is_composite(child) and id(child) not in seen:
            seen.add(id(child))
            stack.append(_children(child))


def find_values_by_keys(tree: Any, keys: Iterable[str]) -> list[Any]:
    """Lista todos os valores sob as chaves pedidas (ver iter_values_by_keys)."""
    return list(iter_values_by_keys(tree, keys))
