#!/usr/bin/env python
import argparse
from pathlib import Path

from atomicss.lexer import Lexer, dump_tokens


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the token stream of an atomicss source file.")
    parser.add_argument("path", type=Path)
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    tokens = Lexer(text).lex()
    dump_tokens(tokens, text)
    print(f"\n{len(tokens)} tokens")


if __name__ == "__main__":
    main()
