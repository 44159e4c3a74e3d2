"""Interactive text menus for building and examining a graph."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Sequence
from typing import TextIO

from simplegraph.cycles import find_cycles
from simplegraph.graph import SimpleGraph
from simplegraph.paths import INFINITY, BellmanFord, NegativeCycleError

_MAIN_MENU = (
    "\n\t=== МЕНЮ РАБОТЫ С ГРАФОМ ===\n\n"
    "Выберите действие:\n"
    " 1) Меню заполнения графа\n"
    " 2) Получить количество вершин\n"
    " 3) Получить количество рёбер\n"
    " 4) Проверить ориентированность графа\n"
    " 5) Проверить тип представления графа\n"
    " 6) Получить коэффициент насыщенности\n"
    " 7) Преобразовать в матричный граф\n"
    " 8) Преобразовать в списковый граф\n"
    " 9) Вывести граф на экран\n"
    "10) Меню итераторов\n"
    "11) Найти цикл заданной величины, включающий заданную вершину\n"
    "12) Кратчайшие пути Беллмана-Форда\n"
    "13) Выход\n\n"
    "Ваш выбор: "
)

_FILL_MENU = (
    "\n=== МЕНЮ ЗАПОЛНЕНИЯ ГРАФА ===\n\n"
    "Выберите действие:\n"
    "0) Создать пустой граф\n"
    "1) Создать граф с вершинами без ребер\n"
    "2) Заполнить случайными значениями\n"
    "3) Вставить вершину\n"
    "4) Вставить вершину с указанием имени\n"
    "5) Удалить вершину\n"
    "6) Вставить ребро (без веса)\n"
    "7) Вставить ребро с указанием веса\n"
    "8) Удалить ребро\n"
    "9) Вернуться в главное меню\n\n"
)

_ITERATORS_MENU = (
    "Выберите действие:\n"
    "1) Итератор вершин.\n"
    "2) Итератор ребер.\n"
    "3) Итератор исходящих ребер.\n"
    "4) Вернуться в меню.\n"
)

_VERTEX_ITERATOR_MENU = (
    "Выберите действие:\n"
    "1) Установить итератор в начало графа\n"
    "2) Переместить итератор вперед (++)\n"
    "3) Получить текущий элемент\n"
    "4) Вывести все ключи\n"
    "5) Вернуться в главное меню\n"
)

_EDGE_ITERATOR_MENU = (
    "Выберите действие:\n"
    "1) Установить итератор в начало графа\n"
    "2) Переместить итератор вперед (++)\n"
    "3) Получить текущий элемент\n"
    "4) Вернуться в главное меню\n"
)

_SEPARATOR = "--------------------------------"


class _EndOfInput(Exception):
    pass


class _Cursor:
    """A forward cursor over a snapshot of items that knows when it is done."""

    def __init__(self, items=()):
        self._items = list(items)
        self._position: int | None = 0 if self._items else None

    @property
    def at_end(self) -> bool:
        return self._position is None

    @property
    def current(self):
        return self._items[self._position]

    def advance(self) -> None:
        self._position += 1
        if self._position == len(self._items):
            self._position = None


def _vertex_label(vertex) -> str:
    return vertex.name if vertex.name is not None else ""


class GraphShell:
    """The menu-driven session: reads commands from ``stdin``, answers on ``stdout``."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()
        self.graph: SimpleGraph | None = None

    # input and output

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _next_token(self) -> str:
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise _EndOfInput
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _read_int(self) -> int:
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            self._pending.clear()
            return 0

    def _read_bool(self) -> bool:
        return self._read_int() != 0

    def _menu_loop(self, menu: str, actions: dict[int, Callable[[], None]], leave: int) -> None:
        command = -1
        while command != leave:
            self._write(menu)
            command = self._read_int()
            action = actions.get(command)
            if action is not None:
                action()

    def _needs_graph(self, action: Callable[[], None]) -> Callable[[], None]:
        def guarded() -> None:
            if self.graph is None:
                self._write("0\n")
            else:
                action()

        return guarded

    def run(self) -> None:
        """Run the main menu until the user leaves or input ends."""
        actions = {
            1: self._fill_menu,
            2: self._needs_graph(lambda: self._write(f"{self.graph.vertex_count}\n")),
            3: self._needs_graph(lambda: self._write(f"{self.graph.edge_count}\n")),
            4: self._needs_graph(self._show_direction),
            5: self._needs_graph(self._show_form),
            6: self._needs_graph(self._show_saturation),
            7: self._needs_graph(self._to_matrix),
            8: self._needs_graph(self._to_list),
            9: self._needs_graph(lambda: self._write(self.graph.render())),
            10: self._needs_graph(self._iterators_menu),
            11: self._needs_graph(self._cycles),
            12: self._needs_graph(self._shortest_paths),
        }
        try:
            self._menu_loop(_MAIN_MENU, actions, 13)
        except _EndOfInput:
            pass

    # main menu actions

    def _show_direction(self) -> None:
        kind = "ориентированный" if self.graph.directed else "неориентированный"
        self._write(f"Граф {kind}\n")

    def _show_form(self) -> None:
        kind = "матрицы" if self.graph.dense else "списка"
        self._write(f"Граф представлен в виде {kind}\n")

    def _show_saturation(self) -> None:
        try:
            self._write(f"{self.graph.saturation()}\n")
        except ZeroDivisionError:
            self._write("0\n")

    def _to_matrix(self) -> None:
        self.graph.to_matrix()
        self._write("1\n")

    def _to_list(self) -> None:
        self.graph.to_list()
        self._write("1\n")

    # filling the graph

    def _fill_menu(self) -> None:
        actions = {
            0: self._create_empty,
            1: lambda: self._create(with_edges=False),
            2: lambda: self._create(with_edges=True),
            3: self._needs_graph(self._insert_vertex),
            4: self._needs_graph(self._insert_named_vertex),
            5: self._needs_graph(self._delete_vertex),
            6: self._needs_graph(self._insert_edge),
            7: self._needs_graph(self._insert_weighted_edge),
            8: self._needs_graph(self._delete_edge),
        }
        self._menu_loop(_FILL_MENU, actions, 9)

    def _create_empty(self) -> None:
        if self.graph is not None:
            self._write("0\n")
            return
        self.graph = SimpleGraph()
        self._write("1\n")

    def _create(self, with_edges: bool) -> None:
        if self.graph is not None:
            self._write("0\n")
            return
        vertex_count = self._read_int()
        edge_count = self._read_int() if with_edges else 0
        self._write("1 - ориент, 0 - неориент: ")
        directed = self._read_bool()
        self._write("1 - матрица, 0 - список: ")
        dense = self._read_bool()
        try:
            self.graph = SimpleGraph(vertex_count, edge_count, directed, dense)
        except ValueError:
            self._write("0\n")
            return
        self._write("1\n")

    def _insert_vertex(self) -> None:
        self.graph.insert_vertex()
        self._write("1\n")

    def _insert_named_vertex(self) -> None:
        self.graph.insert_vertex(self._next_token())
        self._write("1\n")

    def _delete_vertex(self) -> None:
        self.graph.delete_vertex(self._read_int())
        self._write("1\n")

    def _insert_edge(self) -> None:
        first = self._read_int()
        second = self._read_int()
        self.graph.insert_edge(first, second)
        self._write("1\n")

    def _in_range(self, *indices: int) -> bool:
        return all(0 <= index < self.graph.vertex_count for index in indices)

    def _insert_weighted_edge(self) -> None:
        first = self._read_int()
        second = self._read_int()
        weight = self._read_int()
        if self._in_range(first, second):
            self.graph.insert_edge(first, second, weight)
            self._write(str(weight))
        else:
            self._write("0\n")

    def _delete_edge(self) -> None:
        first = self._read_int()
        second = self._read_int()
        if not self._in_range(first, second):
            self._write("0\n")
            return
        edge = self.graph.get_edge(first, second)
        deleted = edge is not None and self.graph.delete_edge(edge)
        self._write("1\n" if deleted else "0\n")

    # iterators

    def _iterators_menu(self) -> None:
        command = -1
        while command != 4:
            self._write(_ITERATORS_MENU)
            command = self._read_int()
            if command == 1:
                self._vertex_iterator_menu()
                return
            if command == 2:
                self._edge_iterator_menu(self.graph.edges, with_listing=False)
            elif command == 3:
                vertex = self._read_int()
                if 0 <= vertex < self.graph.vertex_count:
                    self._edge_iterator_menu(
                        lambda: self.graph.adjacent_edges(vertex), with_listing=True
                    )

    def _vertex_iterator_menu(self) -> None:
        cursor = _Cursor()

        def begin() -> None:
            nonlocal cursor
            cursor = _Cursor(self.graph.vertices())
            self._write("1\n")

        def advance() -> None:
            if cursor.at_end:
                self._write("0\n")
                return
            cursor.advance()
            if cursor.at_end:
                self._write("0\n")

        def show() -> None:
            self._write("0\n" if cursor.at_end else f"{_vertex_label(cursor.current)}\n")

        def show_all() -> None:
            labels = [_vertex_label(vertex) for vertex in self.graph.vertices()]
            if not labels:
                self._write("0\n")
            else:
                self._write("".join(f"{label} " for label in labels) + "\n")

        self._menu_loop(
            _VERTEX_ITERATOR_MENU, {1: begin, 2: advance, 3: show, 4: show_all}, 5
        )

    def _edge_iterator_menu(self, source: Callable, with_listing: bool) -> None:
        cursor = _Cursor()

        def begin() -> None:
            nonlocal cursor
            cursor = _Cursor(source())

        def advance() -> None:
            if cursor.at_end:
                self._write("0\n")
            else:
                cursor.advance()

        def show() -> None:
            if cursor.at_end:
                self._write("0\n")
            else:
                edge = cursor.current
                self._write(f"{edge.v1.index}\n{edge.v2.index}\n")

        def show_all() -> None:
            listing = "".join(f"{e.v1.index},{e.v2.index}; " for e in source())
            self._write(listing + "\n")

        actions = {1: begin, 2: advance, 3: show}
        if with_listing:
            actions[4] = show_all
            self._menu_loop(_VERTEX_ITERATOR_MENU, actions, 5)
        else:
            self._menu_loop(_EDGE_ITERATOR_MENU, actions, 4)

    # tasks

    def _cycles(self) -> None:
        length = self._read_int()
        start = self._read_int()
        try:
            cycles = find_cycles(self.graph, length, start)
        except (IndexError, ValueError) as exc:
            self._write(f"Exception {exc}\n")
            return
        if not cycles:
            self._write(f"Циклы длины {length} из вершины {start} не найдены\n")
            return
        self._write(f"Найдено циклов: {len(cycles)}\n")
        for cycle in cycles:
            self._write("".join(f"{v} " for v in cycle) + "\n")

    def _shortest_paths(self) -> None:
        finder = BellmanFord(self.graph)
        try:
            table = finder.all_paths()
        except NegativeCycleError as exc:
            self._write(f"Error: {exc}\n")
            return
        self._write(f"\nКратчайшие пути между вершинами\n{_SEPARATOR}\n")
        for i, row in enumerate(table):
            for j, info in enumerate(row):
                if i == j or info.distance == INFINITY:
                    continue
                self._write(
                    f"Путь от {i} до {j}:\n"
                    f"Вес: {info.distance}\n"
                    f"Путь: {' -> '.join(map(str, info.path))}"
                    f"\n{_SEPARATOR}\n"
                )


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="simplegraph", description="Build and examine a graph through text menus."
    )
    parser.parse_args(argv)
    GraphShell(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())