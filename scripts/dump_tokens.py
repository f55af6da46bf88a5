#!/usr/bin/env python
import argparse
from pathlib import Path

from neatify.lexer import Lexer, dump_tokens


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the token stream of a source file.")
    parser.add_argument("input", type=Path, help="Source file to tokenize")
    args = parser.parse_args()

    text = args.input.read_text(encoding="utf-8")

    lexer = Lexer(text)
    tokens = lexer.tokenize()
    dump_tokens(tokens, lexer.diagnostics)

    print(f"\n{len(tokens)} tokens from {args.input}")


if __name__ == "__main__":
    main()
