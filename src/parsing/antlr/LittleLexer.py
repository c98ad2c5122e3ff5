# Generated from Little.g4 for the ANTLR 4.13.2 Python3 runtime.
# Regenerate with: antlr4 -Dlanguage=Python3 -no-visitor Little.g4
from antlr4 import *
from io import StringIO
import sys
if sys.version_info[1] > 5:
    from typing import TextIO
else:
    from typing.io import TextIO


def serializedATN():
    return [
        4,0,37,260,6,-1,2,0,7,0,2,1,7,1,2,2,7,2,2,3,7,3,2,4,7,4,2,5,7,5,2,6,7,
        6,2,7,7,7,2,8,7,8,2,9,7,9,2,10,7,10,2,11,7,11,2,12,7,12,2,13,7,13,2,
        14,7,14,2,15,7,15,2,16,7,16,2,17,7,17,2,18,7,18,2,19,7,19,2,20,7,20,2,
        21,7,21,2,22,7,22,2,23,7,23,2,24,7,24,2,25,7,25,2,26,7,26,2,27,7,27,2,
        28,7,28,2,29,7,29,2,30,7,30,2,31,7,31,2,32,7,32,2,33,7,33,2,34,7,34,2,
        35,7,35,2,36,7,36,1,0,1,0,1,0,1,0,1,0,1,0,1,0,1,0,1,1,1,1,1,1,1,1,1,1,
        1,1,1,2,1,2,1,2,1,2,1,3,1,3,1,3,1,3,1,3,1,3,1,3,1,4,1,4,1,4,1,5,1,5,1,
        6,1,6,1,6,1,6,1,6,1,6,1,7,1,7,1,7,1,7,1,8,1,8,1,8,1,8,1,8,1,9,1,9,1,
        10,1,10,1,10,1,10,1,10,1,10,1,10,1,10,1,10,1,11,1,11,1,12,1,12,1,13,1,
        13,1,13,1,13,1,13,1,14,1,14,1,14,1,14,1,14,1,14,1,15,1,15,1,15,1,15,1,
        15,1,15,1,15,1,16,1,16,1,17,1,17,1,18,1,18,1,19,1,19,1,20,1,20,1,20,1,
        21,1,21,1,21,1,21,1,21,1,22,1,22,1,22,1,22,1,22,1,22,1,23,1,23,1,24,1,
        24,1,25,1,25,1,26,1,26,1,26,1,27,1,27,1,27,1,28,1,28,1,28,1,29,1,29,1,
        29,1,29,1,29,1,29,1,30,1,30,1,30,1,30,1,30,1,30,1,30,1,30,1,30,1,31,1,
        31,1,31,5,31,209,8,31,10,31,12,31,212,9,31,1,32,4,32,215,8,32,11,32,
        12,32,216,1,33,1,33,5,33,221,8,33,10,33,12,33,224,9,33,1,33,1,33,4,33,
        228,8,33,11,33,12,33,229,1,34,1,34,1,34,5,34,235,8,34,10,34,12,34,238,
        9,34,1,34,1,34,1,35,1,35,1,35,1,35,1,35,5,35,247,8,35,10,35,12,35,250,
        9,35,1,35,1,35,1,36,4,36,255,8,36,11,36,12,36,256,1,36,1,36,0,0,37,1,
        1,3,2,5,3,7,4,9,5,11,6,13,7,15,8,17,9,19,10,21,11,23,12,25,13,27,14,
        29,15,31,16,33,17,35,18,37,19,39,20,41,21,43,22,45,23,47,24,49,25,51,
        26,53,27,55,28,57,29,59,30,61,31,63,32,65,33,67,34,69,35,71,36,73,37,
        1,0,6,2,0,65,90,97,122,3,0,48,57,65,90,97,122,1,0,48,57,1,0,34,34,2,0,
        10,10,13,13,3,0,9,10,13,13,32,32,266,0,1,1,0,0,0,0,3,1,0,0,0,0,5,1,0,
        0,0,0,7,1,0,0,0,0,9,1,0,0,0,0,11,1,0,0,0,0,13,1,0,0,0,0,15,1,0,0,0,0,
        17,1,0,0,0,0,19,1,0,0,0,0,21,1,0,0,0,0,23,1,0,0,0,0,25,1,0,0,0,0,27,1,
        0,0,0,0,29,1,0,0,0,0,31,1,0,0,0,0,33,1,0,0,0,0,35,1,0,0,0,0,37,1,0,0,
        0,0,39,1,0,0,0,0,41,1,0,0,0,0,43,1,0,0,0,0,45,1,0,0,0,0,47,1,0,0,0,0,
        49,1,0,0,0,0,51,1,0,0,0,0,53,1,0,0,0,0,55,1,0,0,0,0,57,1,0,0,0,0,59,1,
        0,0,0,0,61,1,0,0,0,0,63,1,0,0,0,0,65,1,0,0,0,0,67,1,0,0,0,0,69,1,0,0,
        0,0,71,1,0,0,0,0,73,1,0,0,0,1,75,1,0,0,0,3,83,1,0,0,0,5,89,1,0,0,0,7,
        93,1,0,0,0,9,100,1,0,0,0,11,103,1,0,0,0,13,105,1,0,0,0,15,111,1,0,0,0,
        17,115,1,0,0,0,19,120,1,0,0,0,21,122,1,0,0,0,23,131,1,0,0,0,25,133,1,
        0,0,0,27,135,1,0,0,0,29,140,1,0,0,0,31,146,1,0,0,0,33,153,1,0,0,0,35,
        155,1,0,0,0,37,157,1,0,0,0,39,159,1,0,0,0,41,161,1,0,0,0,43,164,1,0,0,
        0,45,169,1,0,0,0,47,175,1,0,0,0,49,177,1,0,0,0,51,179,1,0,0,0,53,181,
        1,0,0,0,55,184,1,0,0,0,57,187,1,0,0,0,59,190,1,0,0,0,61,196,1,0,0,0,
        63,205,1,0,0,0,65,214,1,0,0,0,67,222,1,0,0,0,69,231,1,0,0,0,71,241,1,
        0,0,0,73,254,1,0,0,0,75,76,5,80,0,0,76,77,5,82,0,0,77,78,5,79,0,0,78,
        79,5,71,0,0,79,80,5,82,0,0,80,81,5,65,0,0,81,82,5,77,0,0,82,2,1,0,0,0,
        83,84,5,66,0,0,84,85,5,69,0,0,85,86,5,71,0,0,86,87,5,73,0,0,87,88,5,
        78,0,0,88,4,1,0,0,0,89,90,5,69,0,0,90,91,5,78,0,0,91,92,5,68,0,0,92,6,
        1,0,0,0,93,94,5,83,0,0,94,95,5,84,0,0,95,96,5,82,0,0,96,97,5,73,0,0,
        97,98,5,78,0,0,98,99,5,71,0,0,99,8,1,0,0,0,100,101,5,58,0,0,101,102,5,
        61,0,0,102,10,1,0,0,0,103,104,5,59,0,0,104,12,1,0,0,0,105,106,5,70,0,
        0,106,107,5,76,0,0,107,108,5,79,0,0,108,109,5,65,0,0,109,110,5,84,0,0,
        110,14,1,0,0,0,111,112,5,73,0,0,112,113,5,78,0,0,113,114,5,84,0,0,114,
        16,1,0,0,0,115,116,5,86,0,0,116,117,5,79,0,0,117,118,5,73,0,0,118,119,
        5,68,0,0,119,18,1,0,0,0,120,121,5,44,0,0,121,20,1,0,0,0,122,123,5,70,
        0,0,123,124,5,85,0,0,124,125,5,78,0,0,125,126,5,67,0,0,126,127,5,84,0,
        0,127,128,5,73,0,0,128,129,5,79,0,0,129,130,5,78,0,0,130,22,1,0,0,0,
        131,132,5,40,0,0,132,24,1,0,0,0,133,134,5,41,0,0,134,26,1,0,0,0,135,
        136,5,82,0,0,136,137,5,69,0,0,137,138,5,65,0,0,138,139,5,68,0,0,139,
        28,1,0,0,0,140,141,5,87,0,0,141,142,5,82,0,0,142,143,5,73,0,0,143,144,
        5,84,0,0,144,145,5,69,0,0,145,30,1,0,0,0,146,147,5,82,0,0,147,148,5,
        69,0,0,148,149,5,84,0,0,149,150,5,85,0,0,150,151,5,82,0,0,151,152,5,
        78,0,0,152,32,1,0,0,0,153,154,5,43,0,0,154,34,1,0,0,0,155,156,5,45,0,
        0,156,36,1,0,0,0,157,158,5,42,0,0,158,38,1,0,0,0,159,160,5,47,0,0,160,
        40,1,0,0,0,161,162,5,73,0,0,162,163,5,70,0,0,163,42,1,0,0,0,164,165,5,
        69,0,0,165,166,5,76,0,0,166,167,5,83,0,0,167,168,5,69,0,0,168,44,1,0,
        0,0,169,170,5,69,0,0,170,171,5,78,0,0,171,172,5,68,0,0,172,173,5,73,0,
        0,173,174,5,70,0,0,174,46,1,0,0,0,175,176,5,60,0,0,176,48,1,0,0,0,177,
        178,5,62,0,0,178,50,1,0,0,0,179,180,5,61,0,0,180,52,1,0,0,0,181,182,5,
        33,0,0,182,183,5,61,0,0,183,54,1,0,0,0,184,185,5,60,0,0,185,186,5,61,
        0,0,186,56,1,0,0,0,187,188,5,62,0,0,188,189,5,61,0,0,189,58,1,0,0,0,
        190,191,5,87,0,0,191,192,5,72,0,0,192,193,5,73,0,0,193,194,5,76,0,0,
        194,195,5,69,0,0,195,60,1,0,0,0,196,197,5,69,0,0,197,198,5,78,0,0,198,
        199,5,68,0,0,199,200,5,87,0,0,200,201,5,72,0,0,201,202,5,73,0,0,202,
        203,5,76,0,0,203,204,5,69,0,0,204,62,1,0,0,0,205,210,7,0,0,0,206,207,
        7,1,0,0,207,209,1,0,0,0,208,206,1,0,0,0,209,212,1,0,0,0,210,208,1,0,0,
        0,210,211,1,0,0,0,211,64,1,0,0,0,212,210,1,0,0,0,213,215,7,2,0,0,214,
        213,1,0,0,0,215,216,1,0,0,0,216,214,1,0,0,0,216,217,1,0,0,0,217,66,1,
        0,0,0,218,219,7,2,0,0,219,221,1,0,0,0,220,218,1,0,0,0,221,224,1,0,0,0,
        222,220,1,0,0,0,222,223,1,0,0,0,223,225,1,0,0,0,224,222,1,0,0,0,225,
        227,5,46,0,0,226,228,7,2,0,0,227,226,1,0,0,0,228,229,1,0,0,0,229,227,
        1,0,0,0,229,230,1,0,0,0,230,68,1,0,0,0,231,236,5,34,0,0,232,233,8,3,0,
        0,233,235,1,0,0,0,234,232,1,0,0,0,235,238,1,0,0,0,236,234,1,0,0,0,236,
        237,1,0,0,0,237,239,1,0,0,0,238,236,1,0,0,0,239,240,5,34,0,0,240,70,1,
        0,0,0,241,242,5,45,0,0,242,243,5,45,0,0,243,248,1,0,0,0,244,245,8,4,0,
        0,245,247,1,0,0,0,246,244,1,0,0,0,247,250,1,0,0,0,248,246,1,0,0,0,248,
        249,1,0,0,0,249,251,1,0,0,0,250,248,1,0,0,0,251,252,6,35,0,0,252,72,1,
        0,0,0,253,255,7,5,0,0,254,253,1,0,0,0,255,256,1,0,0,0,256,254,1,0,0,0,
        256,257,1,0,0,0,257,258,1,0,0,0,258,259,6,36,0,0,259,74,1,0,0,0,8,0,
        210,216,222,229,236,248,256,1,6,0,0
    ]

class LittleLexer(Lexer):

    atn = ATNDeserializer().deserialize(serializedATN())

    decisionsToDFA = [ DFA(ds, i) for i, ds in enumerate(atn.decisionToState) ]

    PROGRAM = 1
    BEGIN = 2
    END = 3
    STRING = 4
    ASSIGN = 5
    SEMI = 6
    FLOAT = 7
    INT = 8
    VOID = 9
    COMMA = 10
    FUNCTION = 11
    LPAREN = 12
    RPAREN = 13
    READ = 14
    WRITE = 15
    RETURN = 16
    PLUS = 17
    MINUS = 18
    STAR = 19
    SLASH = 20
    IF = 21
    ELSE = 22
    ENDIF = 23
    LT = 24
    GT = 25
    EQ = 26
    NE = 27
    LE = 28
    GE = 29
    WHILE = 30
    ENDWHILE = 31
    IDENTIFIER = 32
    INTLITERAL = 33
    FLOATLITERAL = 34
    STRINGLITERAL = 35
    COMMENT = 36
    WS = 37

    channelNames = [ u"DEFAULT_TOKEN_CHANNEL", u"HIDDEN" ]

    modeNames = [ "DEFAULT_MODE" ]

    literalNames = [ "<INVALID>",
            "'PROGRAM'", "'BEGIN'", "'END'", "'STRING'", "':='", "';'",
            "'FLOAT'", "'INT'", "'VOID'", "','", "'FUNCTION'", "'('",
            "')'", "'READ'", "'WRITE'", "'RETURN'", "'+'", "'-'",
            "'*'", "'/'", "'IF'", "'ELSE'", "'ENDIF'", "'<'", "'>'",
            "'='", "'!='", "'<='", "'>='", "'WHILE'", "'ENDWHILE'" ]

    symbolicNames = [ "<INVALID>",
            "PROGRAM", "BEGIN", "END", "STRING", "ASSIGN", "SEMI",
            "FLOAT", "INT", "VOID", "COMMA", "FUNCTION", "LPAREN",
            "RPAREN", "READ", "WRITE", "RETURN", "PLUS", "MINUS",
            "STAR", "SLASH", "IF", "ELSE", "ENDIF", "LT", "GT", "EQ",
            "NE", "LE", "GE", "WHILE", "ENDWHILE", "IDENTIFIER",
            "INTLITERAL", "FLOATLITERAL", "STRINGLITERAL", "COMMENT",
            "WS" ]

    ruleNames = [ "PROGRAM", "BEGIN", "END", "STRING", "ASSIGN", "SEMI",
                  "FLOAT", "INT", "VOID", "COMMA", "FUNCTION", "LPAREN",
                  "RPAREN", "READ", "WRITE", "RETURN", "PLUS", "MINUS",
                  "STAR", "SLASH", "IF", "ELSE", "ENDIF", "LT", "GT", "EQ",
                  "NE", "LE", "GE", "WHILE", "ENDWHILE", "IDENTIFIER",
                  "INTLITERAL", "FLOATLITERAL", "STRINGLITERAL", "COMMENT",
                  "WS" ]

    grammarFileName = "Little.g4"

    def __init__(self, input=None, output:TextIO = sys.stdout):
        super().__init__(input, output)
        self.checkVersion("4.13.2")
        self._interp = LexerATNSimulator(self, self.atn, self.decisionsToDFA, PredictionContextCache())
        self._actions = None
        self._predicates = None


