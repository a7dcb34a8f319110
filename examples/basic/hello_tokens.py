"""Tokenize a lisp-like expression in 3 lines — zero config, zero deps."""

from parenscan import Lexer

for token in Lexer("  ( one two )  "):
    print(token)
