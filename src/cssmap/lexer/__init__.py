from cssmap.lexer.classifier import classify
from cssmap.lexer.tokenizer import Tokenizer, tokenize

__all__ = ["classify", "Tokenizer", "tokenize"]
