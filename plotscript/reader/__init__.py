from plotscript.reader.parser import lex, TokenStream, parse

__all__ = ["lex", "TokenStream", "parse"]
