from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    strip_comments: bool = True  # comment text would otherwise be tokenized as CSS
    encoding: str = "utf-8"
