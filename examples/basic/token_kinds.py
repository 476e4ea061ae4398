"""Print the kind of every token in a small program."""

from scmlex import tokenize

for token in tokenize("'(1/2 -2+3i #\\space #t ... ->string |bad|)"):
    print(f"{token.kind.value:<12} {token.literal}")
