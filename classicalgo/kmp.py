"""Knuth–Morris–Pratt substring search."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

__all__ = ["prefix_function", "kmp_search", "describe_matches", "main"]


def prefix_function(pattern: str) -> list[int]:
    """Length of the longest proper prefix that is also a suffix, per position."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start index of every (possibly overlapping) occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_function(pattern)
    matches: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j and char != pattern[j]:
            j = table[j - 1]
        if char == pattern[j]:
            j += 1
            if j == len(pattern):
                matches.append(i + 1 - j)
                j = table[j - 1]
    return matches


def describe_matches(indices: Sequence[int]) -> str:
    """Describe a list of match positions as a sentence."""
    if not indices:
        return "O padrao nao foi encontrado."
    if len(indices) == 1:
        return f"O padrao foi encontrado no indice {indices[0]}."
    head = ", ".join(str(index) for index in indices[:-1])
    return (
        f"O padrao foi encontrado {len(indices)} vezes. "
        f"Nos indices : {head} e {indices[-1]}."
    )


def main(argv: list[str] | None = None) -> int:
    """Search a file for a pattern and report where it occurs."""
    parser = argparse.ArgumentParser(description="Find a pattern in a file.")
    parser.add_argument("file", nargs="?", help="file to read")
    parser.add_argument("pattern", nargs="?", help="pattern to look for")
    args = parser.parse_args(argv)

    file_name = args.file if args.file is not None else input("Qual arquivo deseja ler? ").strip()
    path = Path(file_name)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        print("Arquivo inexistente..")
        return 1
    print("Arquivo aberto com sucesso...")

    pattern = (
        args.pattern
        if args.pattern is not None
        else input("Qual padrao voce deseja procurar? ").strip()
    )
    try:
        indices = kmp_search(text, pattern)
    except ValueError as error:
        print(error)
        return 1
    print(describe_matches(indices))
    return 0