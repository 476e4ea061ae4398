"""Ship tokens as JSON text and rebuild a lexer from them."""

from scmlex import lexer

source = "(let ((s \"hello world\")) (string-length s))"

json_tokens = lexer(source, representation="json").to_list()
print(json_tokens[:3])

restored = lexer(json_tokens)
print("Same tokens:", restored.tokens == lexer(source).tokens)
