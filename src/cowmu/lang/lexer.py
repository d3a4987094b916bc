import logging as lg
from typing import Iterator

import cowmu.lang.grammar as grammar


def tokenize(source: str) -> Iterator[int]:
    # scan_string steps over any character the word cannot start on,
    # so every kind of whitespace separates words
    for tokens, _, _ in grammar.word.scan_string(source):
        yield from tokens


def lex(source: str) -> list[int]:
    opcodes = list(tokenize(source))
    lg.debug(f'Lexed {len(opcodes)} opcodes')
    return opcodes
