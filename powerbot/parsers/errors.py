from __future__ import annotations


class ParseError(ValueError):
    pass
