from cssmap.parser.document import parse_file, unmarshal
from cssmap.parser.errors import CSSSyntaxError, ParseError
from cssmap.parser.machine import BlockParser, ParserState, parse

__all__ = [
    "parse_file",
    "unmarshal",
    "CSSSyntaxError",
    "ParseError",
    "BlockParser",
    "ParserState",
    "parse",
]
