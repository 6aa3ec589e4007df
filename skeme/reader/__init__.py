from skeme.reader.parser import lex, read, TokenStream

__all__ = ["lex", "read", "TokenStream"]
