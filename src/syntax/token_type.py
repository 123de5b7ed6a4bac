from enum import IntEnum


class TokenType(IntEnum):
    """
    Category of lexical token.

    Lexical categories are grouped by thousands, with sub-categories grouped by
    hundreds within them.  Negative values are structural categories used when
    rendering (backgrounds, line numbers, etc.) rather than lexer output.
    """
    # Structural
    BACKGROUND = -1
    PRE_WRAPPER = -2
    LINE = -3
    LINE_NUMBERS = -4
    LINE_NUMBERS_TABLE = -5
    LINE_HIGHLIGHT = -6
    LINE_TABLE = -7
    LINE_TABLE_TD = -8
    LINE_LINK = -9
    CODE_LINE = -10
    ERROR = -11
    OTHER = -12
    NONE = -13
    EOF_TYPE = 0

    # Keywords
    KEYWORD = 1000
    KEYWORD_CONSTANT = 1001
    KEYWORD_DECLARATION = 1002
    KEYWORD_NAMESPACE = 1003
    KEYWORD_PSEUDO = 1004
    KEYWORD_RESERVED = 1005
    KEYWORD_TYPE = 1006

    # Names
    NAME = 2000
    NAME_ATTRIBUTE = 2001
    NAME_BUILTIN = 2002
    NAME_BUILTIN_PSEUDO = 2003
    NAME_CLASS = 2004
    NAME_CONSTANT = 2005
    NAME_DECORATOR = 2006
    NAME_ENTITY = 2007
    NAME_EXCEPTION = 2008
    NAME_FUNCTION = 2009
    NAME_FUNCTION_MAGIC = 2010
    NAME_KEYWORD = 2011
    NAME_LABEL = 2012
    NAME_NAMESPACE = 2013
    NAME_OPERATOR = 2014
    NAME_OTHER = 2015
    NAME_PSEUDO = 2016
    NAME_PROPERTY = 2017
    NAME_TAG = 2018
    NAME_VARIABLE = 2019
    NAME_VARIABLE_ANONYMOUS = 2020
    NAME_VARIABLE_CLASS = 2021
    NAME_VARIABLE_GLOBAL = 2022
    NAME_VARIABLE_INSTANCE = 2023
    NAME_VARIABLE_MAGIC = 2024

    # Literals
    LITERAL = 3000
    LITERAL_DATE = 3001
    LITERAL_OTHER = 3002

    LITERAL_STRING = 3100
    LITERAL_STRING_AFFIX = 3101
    LITERAL_STRING_ATOM = 3102
    LITERAL_STRING_BACKTICK = 3103
    LITERAL_STRING_BOOLEAN = 3104
    LITERAL_STRING_CHAR = 3105
    LITERAL_STRING_DELIMITER = 3106
    LITERAL_STRING_DOC = 3107
    LITERAL_STRING_DOUBLE = 3108
    LITERAL_STRING_ESCAPE = 3109
    LITERAL_STRING_HEREDOC = 3110
    LITERAL_STRING_INTERPOL = 3111
    LITERAL_STRING_NAME = 3112
    LITERAL_STRING_OTHER = 3113
    LITERAL_STRING_REGEX = 3114
    LITERAL_STRING_SINGLE = 3115
    LITERAL_STRING_SYMBOL = 3116

    LITERAL_NUMBER = 3200
    LITERAL_NUMBER_BIN = 3201
    LITERAL_NUMBER_FLOAT = 3202
    LITERAL_NUMBER_HEX = 3203
    LITERAL_NUMBER_INTEGER = 3204
    LITERAL_NUMBER_INTEGER_LONG = 3205
    LITERAL_NUMBER_OCT = 3206
    LITERAL_NUMBER_BYTE = 3207

    # Operators
    OPERATOR = 4000
    OPERATOR_WORD = 4001

    # Punctuation
    PUNCTUATION = 5000

    # Comments
    COMMENT = 6000
    COMMENT_HASHBANG = 6001
    COMMENT_MULTILINE = 6002
    COMMENT_SINGLE = 6003
    COMMENT_SPECIAL = 6004

    COMMENT_PREPROC = 6100
    COMMENT_PREPROC_FILE = 6101

    # Generic
    GENERIC = 7000
    GENERIC_DELETED = 7001
    GENERIC_EMPH = 7002
    GENERIC_ERROR = 7003
    GENERIC_HEADING = 7004
    GENERIC_INSERTED = 7005
    GENERIC_OUTPUT = 7006
    GENERIC_PROMPT = 7007
    GENERIC_STRONG = 7008
    GENERIC_SUBHEADING = 7009
    GENERIC_TRACEBACK = 7010
    GENERIC_UNDERLINE = 7011

    # Text
    TEXT = 8000
    TEXT_WHITESPACE = 8001
    TEXT_SYMBOL = 8002
    TEXT_PUNCTUATION = 8003

    def category(self) -> "TokenType":
        """Broad category of this token type (e.g. KEYWORD for KEYWORD_CONSTANT)."""
        # Truncate toward zero so structural types map onto EOF_TYPE
        return TokenType(int(self / 1000) * 1000)

    def sub_category(self) -> "TokenType":
        """Sub-category of this token type (e.g. LITERAL_STRING for LITERAL_STRING_DOC)."""
        return TokenType(int(self / 100) * 100)

    def in_category(self, other: "TokenType") -> bool:
        """Return True if this token type belongs to the category of `other`."""
        return self.category() == other.category()

    def in_sub_category(self, other: "TokenType") -> bool:
        """Return True if this token type belongs to the sub-category of `other`."""
        return self.sub_category() == other.sub_category()
