from tailscheme.reader.parser import lex, TokenStream, read, read_all

__all__ = ["lex", "TokenStream", "read", "read_all"]
