"""Tokenize an arithmetic expression with a handful of anchored patterns."""

import re

from strscan import StringScanner

TOKENS = [
    ("NUMBER", re.compile(r"\d+(?:\.\d+)?")),
    ("NAME", re.compile(r"[A-Za-z_]\w*")),
    ("OP", re.compile(r"[-+*/()]")),
]
SPACE = re.compile(r"\s+")

scanner = StringScanner("price * (1 + tax_rate) / 2.5")
while not scanner.is_eos():
    if scanner.skip(SPACE):
        continue
    for kind, pattern in TOKENS:
        start = scanner.get_pos()
        text = scanner.scan(pattern)
        if text is not None:
            print(f"{start:>3} {kind:<6} {text}")
            break
    else:
        raise SystemExit(f"unexpected input at byte {scanner.get_pos()}: {scanner.peek_chars(10)!r}")
