"""Compare the compatible and corrected identifier skip policies."""

from parenscan import LexConfig, Lexer, lex_config_context

source = "(add x(neg y))"

print("compatible:", [t.value for t in Lexer(source)])

with lex_config_context(LexConfig(skip_after_identifier=False)):
    print("corrected: ", [t.value for t in Lexer(source)])
