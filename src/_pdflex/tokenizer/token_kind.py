from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    BOOLEAN = auto()
    INTEGER = auto()
    REAL = auto()
    NAME = auto()
    STRING = auto()
    KEYWORD = auto()
    DELIMITER = auto()
    NULL = auto()
    REFERENCE = auto()
    END_OF_INPUT = auto()

    @classmethod
    def numeric_types(cls):
        return (cls.INTEGER, cls.REAL)

    @classmethod
    def literals(cls):
        return {
            "true": (cls.BOOLEAN, True),
            "false": (cls.BOOLEAN, False),
            "null": (cls.NULL, None),
        }

    @classmethod
    def delimiters(cls):
        return ("<<", ">>", "[", "]", "{", "}")
