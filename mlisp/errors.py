
class MlispError(Exception):
    """ Base class for all mlisp reader errors"""
    category = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MlispLexError(MlispError):
    """ Raised when source text cannot be split into tokens"""
    category = "lex"


class MlispParseError(MlispError):
    """ Raised when the token stream is not a single well-nested expression"""
    category = "parse"
