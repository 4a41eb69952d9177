"""Interactive menu for building, editing and converting a 2-3-4 tree."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO

from .btree import (
    BTree,
    BTreeStats,
    PathType,
    benchmark_insertion,
    benchmark_removal,
    create_number_file,
)
from .conversion import btree_to_redblack

INSERTION_STATS_FILE = "estatisticas_insercao.txt"
REMOVAL_STATS_FILE = "estatisticas_remocao.txt"
REMOVAL_PERCENTAGES = (10.0, 20.0, 35.0, 50.0)
BENCHMARK_SIZE = 10000


def _read_numbers(path: PathType) -> List[int]:
    with open(path, "r", encoding="utf-8") as handle:
        return [int(token) for token in handle.read().split()]


def load_tree(path: PathType) -> BTree:
    """Build a 2-3-4 tree from the whitespace-separated integers in ``path``."""
    tree = BTree()
    for number in _read_numbers(path):
        tree.insert(number)
    return tree


def removal_benchmark(
    elements: Iterable[int],
    percentages: Sequence[float] = REMOVAL_PERCENTAGES,
    path: PathType = REMOVAL_STATS_FILE,
    rng: Optional[random.Random] = None,
) -> List[BTreeStats]:
    """For each percentage, rebuild a tree from ``elements``, remove that share
    of them at random, and append the resulting statistics to ``path``."""
    rng = rng if rng is not None else random.Random()
    pool = list(elements)
    total = len(pool)
    results = []
    for percent in percentages:
        copy = BTree()
        for element in pool:
            copy.insert(element)
        to_remove = int(percent * total / 100)
        rng.shuffle(pool)
        for element in pool[:to_remove]:
            copy.remove(element)
        results.append(benchmark_removal(copy, percent, path))
    return results


class _Console:
    """Reads whitespace-separated answers from a stream and writes prompts."""

    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream for token in line.split()
        )
        self._out = out

    def say(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)

    def ask_word(self, prompt: str) -> str:
        self.say(prompt, end="")
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def ask_int(self, prompt: str) -> int:
        answer = self.ask_word(prompt)
        while True:
            try:
                return int(answer)
            except ValueError:
                answer = self.ask_word("Entrada inválida, digite um número inteiro: ")


def _red_black_menu(console: _Console, tree: BTree) -> None:
    rb = btree_to_redblack(tree)
    console.say("\n--- Árvore Rubro-Negra ---")
    console.say(rb.render(), end="")
    while True:
        console.say("\n--- MENU ÁRVORE RUBRO-NEGRA ---")
        console.say("1 - Inserir novo elemento")
        console.say("2 - Remover elemento")
        console.say("3 - Imprimir árvore")
        console.say("4 - Sair")
        choice = console.ask_int("Escolha: ")
        if choice == 1:
            rb.insert(console.ask_int("Digite o número a ser inserido: "))
        elif choice == 2:
            rb.remove(console.ask_int("Digite o número a ser removido: "))
        elif choice == 3:
            console.say(rb.render(), end="")
        elif choice == 4:
            return


def _tree_menu(console: _Console, tree: BTree) -> None:
    while True:
        console.say("\n--- MENU ÁRVORE 2-3-4 ---")
        console.say("1 - Inserir novo elemento")
        console.say("2 - Remover elemento da árvore")
        console.say("3 - Imprimir árvore")
        console.say("4 - Converter em árvore rubro-negra")
        console.say("5 - Sair do programa")
        choice = console.ask_int("Escolha: ")
        if choice == 1:
            tree.insert(console.ask_int("Digite o número a ser inserido: "))
        elif choice == 2:
            key = console.ask_int("Digite o número que deseja remover: ")
            tree.remove(key)
            console.say(f"Elemento {key} removido da árvore.")
        elif choice == 3:
            console.say(tree.render(), end="")
        elif choice == 4:
            _red_black_menu(console, tree)
        elif choice == 5:
            return


def _session(console: _Console) -> None:
    while True:
        console.say("\n--- MENU INICIAL ---")
        console.say("1 - Criar novo arquivo")
        console.say("2 - Ler arquivo existente")
        choice = console.ask_int("Escolha: ")

        quantity: Optional[int] = None
        if choice == 1:
            console.say("\n--- GERAR ARQUIVO DE ENTRADA ---")
            filename = console.ask_word("Digite o nome do arquivo a ser criado: ")
            quantity = console.ask_int("Digite a quantidade de elementos: ")
            seed = console.ask_int("Digite a semente de geração randômica: ")
            try:
                create_number_file(filename, quantity, seed)
            except OSError:
                pass
        elif choice == 2:
            console.say("\n--- LER ARQUIVO EXISTENTE ---")
            filename = console.ask_word("Digite o nome do arquivo a ser lido: ")
        else:
            console.say("Opção inválida ! Voltando ao início...")
            continue

        try:
            numbers = _read_numbers(filename)
        except (OSError, ValueError):
            console.say("Erro ao abrir o arquivo!")
            continue
        if quantity is None:
            quantity = len(numbers)

        tree = BTree()
        for number in numbers:
            tree.insert(number)
        console.say("\n--- Árvore 2-3-4 criada com sucesso! ---")
        console.say(tree.render(), end="")

        _tree_menu(console, tree)

        console.say("\nGerando benchmarking da 2-3-4 com inserções...")
        benchmark_insertion(tree, quantity, INSERTION_STATS_FILE)
        if quantity == BENCHMARK_SIZE:
            console.say("\nGerando benchmarking da 2-3-4 com remoções parciais...")
            removal_benchmark(tree.keys(), REMOVAL_PERCENTAGES, REMOVAL_STATS_FILE)
        return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="tree234",
        description="Build a 2-3-4 tree from a file of integers, edit it and "
        "convert it into a red-black tree.",
    )
    parser.parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        _session(console)
    except EOFError:
        console.say()
    console.say("\nPrograma encerrado. Obrigado por utilizar!")
    return 0