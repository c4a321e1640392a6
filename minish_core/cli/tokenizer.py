"""
Line tokenizer.

Splits one line of input into arguments in a single left-to-right pass.

Quoting rules:
  - single quotes suppress all escaping
  - inside double quotes a backslash escapes only '\\' and '"'
  - unquoted, a backslash escapes any single following character

Space and tab separate arguments outside quotes. Malformed input never
raises: an unterminated quote keeps what was read so far, and a trailing
backslash is kept literally.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

DELIMITERS = " \t"
QUOTES = "'\""
BACKSLASH = "\\"

# what a backslash may escape inside double quotes
_DQUOTE_ESCAPABLE = (BACKSLASH, '"')


@dataclass
class _ScanState:
    buf: List[str] = field(default_factory=list)
    quote: Optional[str] = None
    escape: bool = False
    # true once the current token has content or an opening quote,
    # so '' and "" still produce an (empty) argument
    started: bool = False
    out: List[str] = field(default_factory=list)

    def append(self, c: str) -> None:
        self.buf.append(c)
        self.started = True

    def flush(self) -> None:
        if self.started:
            self.out.append("".join(self.buf))
        self.buf = []
        self.started = False


def tokenize(line: str) -> List[str]:
    st = _ScanState()
    n = len(line)

    for i, c in enumerate(line):
        if st.escape:
            st.append(c)
            st.escape = False
            continue

        if c == BACKSLASH:
            if st.quote is None:
                st.escape = True
                st.started = True
                continue
            if st.quote == '"':
                nxt = line[i + 1] if i + 1 < n else ""
                if nxt in _DQUOTE_ESCAPABLE:
                    st.escape = True
                    continue
            st.append(c)
            continue

        if c in QUOTES:
            if st.quote is None:
                st.quote = c
                st.started = True
            elif st.quote == c:
                st.quote = None
            else:
                st.append(c)
            continue

        if c in DELIMITERS and st.quote is None:
            st.flush()
            continue

        st.append(c)

    if st.escape:
        st.append(BACKSLASH)
    st.flush()
    return st.out


def tokenize_command(line: str) -> Optional[Tuple[str, List[str]]]:
    """Return (name, params), or None when the line holds no command."""
    args = tokenize(line)
    if not args:
        return None
    return args[0], args[1:]
