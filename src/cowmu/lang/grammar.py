# type: ignore
''' Word grammar '''

import pyparsing as pp

import cowmu.common.ops as ops


def g_word_action(r):
    op = ops.MNEMONICS.get(r[0])

    # Anything that is not one of the mnemonics is a comment
    if op is None:
        return []

    return [op]


word = pp.Regex(r'\S+').set_parse_action(g_word_action)
