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
        4,1,37,272,2,0,7,0,2,1,7,1,2,2,7,2,2,3,7,3,2,4,7,4,2,5,7,5,2,6,7,6,2,
        7,7,7,2,8,7,8,2,9,7,9,2,10,7,10,2,11,7,11,2,12,7,12,2,13,7,13,2,14,7,
        14,2,15,7,15,2,16,7,16,2,17,7,17,2,18,7,18,2,19,7,19,2,20,7,20,2,21,7,
        21,2,22,7,22,2,23,7,23,2,24,7,24,2,25,7,25,2,26,7,26,2,27,7,27,2,28,7,
        28,2,29,7,29,2,30,7,30,2,31,7,31,2,32,7,32,2,33,7,33,2,34,7,34,1,0,1,
        0,1,0,1,0,1,0,1,0,1,0,1,1,1,1,1,2,1,2,1,2,1,3,1,3,1,3,1,3,5,3,87,8,3,
        10,3,12,3,90,9,3,1,4,1,4,1,4,1,4,1,4,1,4,1,5,1,5,1,6,1,6,1,6,1,6,1,7,
        1,7,1,8,1,8,3,8,108,8,8,1,9,1,9,1,9,1,9,5,9,114,8,9,10,9,12,9,117,9,9,
        1,10,1,10,1,10,1,10,5,10,123,8,10,10,10,12,10,126,9,10,3,10,128,8,10,
        1,11,1,11,1,11,1,12,1,12,5,12,135,8,12,10,12,12,12,138,9,12,1,13,1,13,
        1,13,1,13,1,13,1,13,1,13,1,13,1,13,1,13,1,14,1,14,1,14,1,15,1,15,5,15,
        155,8,15,10,15,12,15,158,9,15,1,16,1,16,1,16,3,16,163,8,16,1,17,1,17,
        1,17,1,17,3,17,169,8,17,1,18,1,18,1,18,1,18,1,18,1,19,1,19,1,19,1,19,
        1,19,1,19,1,20,1,20,1,20,1,20,1,20,1,20,1,21,1,21,1,21,1,21,1,22,1,22,
        1,22,1,22,5,22,196,8,22,10,22,12,22,199,9,22,1,23,1,23,1,23,1,23,5,23,
        205,8,23,10,23,12,23,208,9,23,1,24,1,24,3,24,212,8,24,1,25,1,25,1,25,
        1,25,1,25,1,26,1,26,1,26,1,26,5,26,223,8,26,10,26,12,26,226,9,26,3,26,
        228,8,26,1,27,1,27,1,27,1,27,1,27,1,27,1,27,3,27,237,8,27,1,28,1,28,1,
        29,1,29,1,30,1,30,1,30,1,30,1,30,1,30,1,30,3,30,250,8,30,1,30,1,30,1,
        31,1,31,1,31,1,31,1,32,1,32,1,32,1,32,1,33,1,33,1,34,1,34,1,34,1,34,1,
        34,1,34,1,34,1,34,1,34,0,0,35,0,2,4,6,8,10,12,14,16,18,20,22,24,26,28,
        30,32,34,36,38,40,42,44,46,48,50,52,54,56,58,60,62,64,66,68,0,4,1,0,7,
        8,1,0,17,18,1,0,19,20,1,0,24,29,258,0,70,1,0,0,0,2,77,1,0,0,0,4,79,1,
        0,0,0,6,88,1,0,0,0,8,91,1,0,0,0,10,97,1,0,0,0,12,99,1,0,0,0,14,103,1,
        0,0,0,16,107,1,0,0,0,18,109,1,0,0,0,20,127,1,0,0,0,22,129,1,0,0,0,24,
        136,1,0,0,0,26,139,1,0,0,0,28,149,1,0,0,0,30,156,1,0,0,0,32,162,1,0,0,
        0,34,168,1,0,0,0,36,170,1,0,0,0,38,175,1,0,0,0,40,181,1,0,0,0,42,187,
        1,0,0,0,44,191,1,0,0,0,46,200,1,0,0,0,48,211,1,0,0,0,50,213,1,0,0,0,
        52,227,1,0,0,0,54,236,1,0,0,0,56,238,1,0,0,0,58,240,1,0,0,0,60,242,1,
        0,0,0,62,253,1,0,0,0,64,257,1,0,0,0,66,261,1,0,0,0,68,263,1,0,0,0,70,
        71,5,1,0,0,71,72,3,2,1,0,72,73,5,2,0,0,73,74,3,4,2,0,74,75,5,3,0,0,75,
        76,5,0,0,1,76,1,1,0,0,0,77,78,5,32,0,0,78,3,1,0,0,0,79,80,3,6,3,0,80,
        81,3,24,12,0,81,5,1,0,0,0,82,83,3,8,4,0,83,87,1,0,0,0,84,85,3,12,6,0,
        85,87,1,0,0,0,86,82,1,0,0,0,86,84,1,0,0,0,87,90,1,0,0,0,88,86,1,0,0,0,
        88,89,1,0,0,0,89,7,1,0,0,0,90,88,1,0,0,0,91,92,5,4,0,0,92,93,3,2,1,0,
        93,94,5,5,0,0,94,95,3,10,5,0,95,96,5,6,0,0,96,9,1,0,0,0,97,98,5,35,0,
        0,98,11,1,0,0,0,99,100,3,14,7,0,100,101,3,18,9,0,101,102,5,6,0,0,102,
        13,1,0,0,0,103,104,7,0,0,0,104,15,1,0,0,0,105,108,3,14,7,0,106,108,5,
        9,0,0,107,105,1,0,0,0,107,106,1,0,0,0,108,17,1,0,0,0,109,115,3,2,1,0,
        110,111,5,10,0,0,111,112,3,2,1,0,112,114,1,0,0,0,113,110,1,0,0,0,114,
        117,1,0,0,0,115,113,1,0,0,0,115,116,1,0,0,0,116,19,1,0,0,0,117,115,1,
        0,0,0,118,124,3,22,11,0,119,120,5,10,0,0,120,121,3,22,11,0,121,123,1,
        0,0,0,122,119,1,0,0,0,123,126,1,0,0,0,124,122,1,0,0,0,124,125,1,0,0,0,
        125,128,1,0,0,0,126,124,1,0,0,0,127,118,1,0,0,0,127,128,1,0,0,0,128,
        21,1,0,0,0,129,130,3,14,7,0,130,131,3,2,1,0,131,23,1,0,0,0,132,133,3,
        26,13,0,133,135,1,0,0,0,134,132,1,0,0,0,135,138,1,0,0,0,136,134,1,0,0,
        0,136,137,1,0,0,0,137,25,1,0,0,0,138,136,1,0,0,0,139,140,5,11,0,0,140,
        141,3,16,8,0,141,142,3,2,1,0,142,143,5,12,0,0,143,144,3,20,10,0,144,
        145,5,13,0,0,145,146,5,2,0,0,146,147,3,28,14,0,147,148,5,3,0,0,148,27,
        1,0,0,0,149,150,3,6,3,0,150,151,3,30,15,0,151,29,1,0,0,0,152,153,3,32,
        16,0,153,155,1,0,0,0,154,152,1,0,0,0,155,158,1,0,0,0,156,154,1,0,0,0,
        156,157,1,0,0,0,157,31,1,0,0,0,158,156,1,0,0,0,159,163,3,34,17,0,160,
        163,3,60,30,0,161,163,3,68,34,0,162,159,1,0,0,0,162,160,1,0,0,0,162,
        161,1,0,0,0,163,33,1,0,0,0,164,169,3,36,18,0,165,169,3,38,19,0,166,
        169,3,40,20,0,167,169,3,42,21,0,168,164,1,0,0,0,168,165,1,0,0,0,168,
        166,1,0,0,0,168,167,1,0,0,0,169,35,1,0,0,0,170,171,3,2,1,0,171,172,5,
        5,0,0,172,173,3,44,22,0,173,174,5,6,0,0,174,37,1,0,0,0,175,176,5,14,0,
        0,176,177,5,12,0,0,177,178,3,18,9,0,178,179,5,13,0,0,179,180,5,6,0,0,
        180,39,1,0,0,0,181,182,5,15,0,0,182,183,5,12,0,0,183,184,3,18,9,0,184,
        185,5,13,0,0,185,186,5,6,0,0,186,41,1,0,0,0,187,188,5,16,0,0,188,189,
        3,44,22,0,189,190,5,6,0,0,190,43,1,0,0,0,191,197,3,46,23,0,192,193,3,
        56,28,0,193,194,3,46,23,0,194,196,1,0,0,0,195,192,1,0,0,0,196,199,1,0,
        0,0,197,195,1,0,0,0,197,198,1,0,0,0,198,45,1,0,0,0,199,197,1,0,0,0,
        200,206,3,48,24,0,201,202,3,58,29,0,202,203,3,48,24,0,203,205,1,0,0,0,
        204,201,1,0,0,0,205,208,1,0,0,0,206,204,1,0,0,0,206,207,1,0,0,0,207,
        47,1,0,0,0,208,206,1,0,0,0,209,212,3,50,25,0,210,212,3,54,27,0,211,
        209,1,0,0,0,211,210,1,0,0,0,212,49,1,0,0,0,213,214,3,2,1,0,214,215,5,
        12,0,0,215,216,3,52,26,0,216,217,5,13,0,0,217,51,1,0,0,0,218,224,3,44,
        22,0,219,220,5,10,0,0,220,221,3,44,22,0,221,223,1,0,0,0,222,219,1,0,0,
        0,223,226,1,0,0,0,224,222,1,0,0,0,224,225,1,0,0,0,225,228,1,0,0,0,226,
        224,1,0,0,0,227,218,1,0,0,0,227,228,1,0,0,0,228,53,1,0,0,0,229,230,5,
        12,0,0,230,231,3,44,22,0,231,232,5,13,0,0,232,237,1,0,0,0,233,237,3,2,
        1,0,234,237,5,33,0,0,235,237,5,34,0,0,236,229,1,0,0,0,236,233,1,0,0,0,
        236,234,1,0,0,0,236,235,1,0,0,0,237,55,1,0,0,0,238,239,7,1,0,0,239,57,
        1,0,0,0,240,241,7,2,0,0,241,59,1,0,0,0,242,243,5,21,0,0,243,244,5,12,
        0,0,244,245,3,64,32,0,245,246,5,13,0,0,246,247,3,6,3,0,247,249,3,30,
        15,0,248,250,3,62,31,0,249,248,1,0,0,0,249,250,1,0,0,0,250,251,1,0,0,
        0,251,252,5,23,0,0,252,61,1,0,0,0,253,254,5,22,0,0,254,255,3,6,3,0,
        255,256,3,30,15,0,256,63,1,0,0,0,257,258,3,44,22,0,258,259,3,66,33,0,
        259,260,3,44,22,0,260,65,1,0,0,0,261,262,7,3,0,0,262,67,1,0,0,0,263,
        264,5,30,0,0,264,265,5,12,0,0,265,266,3,64,32,0,266,267,5,13,0,0,267,
        268,3,6,3,0,268,269,3,30,15,0,269,270,5,31,0,0,270,69,1,0,0,0,17,86,
        88,107,115,124,127,136,156,162,168,197,206,211,224,227,236,249
    ]

class LittleParser ( Parser ):

    grammarFileName = "Little.g4"

    atn = ATNDeserializer().deserialize(serializedATN())

    decisionsToDFA = [ DFA(ds, i) for i, ds in enumerate(atn.decisionToState) ]

    sharedContextCache = PredictionContextCache()

    literalNames = [ "<INVALID>", "'PROGRAM'", "'BEGIN'", "'END'", "'STRING'",
                     "':='", "';'", "'FLOAT'", "'INT'", "'VOID'", "','",
                     "'FUNCTION'", "'('", "')'", "'READ'", "'WRITE'",
                     "'RETURN'", "'+'", "'-'", "'*'", "'/'", "'IF'", "'ELSE'",
                     "'ENDIF'", "'<'", "'>'", "'='", "'!='", "'<='", "'>='",
                     "'WHILE'", "'ENDWHILE'" ]

    symbolicNames = [ "<INVALID>", "PROGRAM", "BEGIN", "END", "STRING", "ASSIGN",
                      "SEMI", "FLOAT", "INT", "VOID", "COMMA", "FUNCTION",
                      "LPAREN", "RPAREN", "READ", "WRITE", "RETURN", "PLUS",
                      "MINUS", "STAR", "SLASH", "IF", "ELSE", "ENDIF", "LT",
                      "GT", "EQ", "NE", "LE", "GE", "WHILE", "ENDWHILE",
                      "IDENTIFIER", "INTLITERAL", "FLOATLITERAL",
                      "STRINGLITERAL", "COMMENT", "WS" ]

    RULE_program = 0
    RULE_id = 1
    RULE_pgm_body = 2
    RULE_decl = 3
    RULE_string_decl = 4
    RULE_str = 5
    RULE_var_decl = 6
    RULE_var_type = 7
    RULE_any_type = 8
    RULE_id_list = 9
    RULE_param_decl_list = 10
    RULE_param_decl = 11
    RULE_func_declarations = 12
    RULE_func_decl = 13
    RULE_func_body = 14
    RULE_stmt_list = 15
    RULE_stmt = 16
    RULE_base_stmt = 17
    RULE_assign_stmt = 18
    RULE_read_stmt = 19
    RULE_write_stmt = 20
    RULE_return_stmt = 21
    RULE_expr = 22
    RULE_factor = 23
    RULE_postfix_expr = 24
    RULE_call_expr = 25
    RULE_expr_list = 26
    RULE_primary = 27
    RULE_addop = 28
    RULE_mulop = 29
    RULE_if_stmt = 30
    RULE_else_stmt = 31
    RULE_cond = 32
    RULE_compop = 33
    RULE_while_stmt = 34

    ruleNames =  [ "program", "id", "pgm_body", "decl", "string_decl", "str",
                   "var_decl", "var_type", "any_type", "id_list",
                   "param_decl_list", "param_decl", "func_declarations",
                   "func_decl", "func_body", "stmt_list", "stmt", "base_stmt",
                   "assign_stmt", "read_stmt", "write_stmt", "return_stmt",
                   "expr", "factor", "postfix_expr", "call_expr", "expr_list",
                   "primary", "addop", "mulop", "if_stmt", "else_stmt",
                   "cond", "compop", "while_stmt" ]

    EOF = Token.EOF
    PROGRAM=1
    BEGIN=2
    END=3
    STRING=4
    ASSIGN=5
    SEMI=6
    FLOAT=7
    INT=8
    VOID=9
    COMMA=10
    FUNCTION=11
    LPAREN=12
    RPAREN=13
    READ=14
    WRITE=15
    RETURN=16
    PLUS=17
    MINUS=18
    STAR=19
    SLASH=20
    IF=21
    ELSE=22
    ENDIF=23
    LT=24
    GT=25
    EQ=26
    NE=27
    LE=28
    GE=29
    WHILE=30
    ENDWHILE=31
    IDENTIFIER=32
    INTLITERAL=33
    FLOATLITERAL=34
    STRINGLITERAL=35
    COMMENT=36
    WS=37

    def __init__(self, input:TokenStream, output:TextIO = sys.stdout):
        super().__init__(input, output)
        self.checkVersion("4.13.2")
        self._interp = ParserATNSimulator(self, self.atn, self.decisionsToDFA, self.sharedContextCache)
        self._predicates = None



    class ProgramContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def PROGRAM(self):
            return self.getToken(LittleParser.PROGRAM, 0)

        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def BEGIN(self):
            return self.getToken(LittleParser.BEGIN, 0)

        def pgm_body(self):
            return self.getTypedRuleContext(LittleParser.Pgm_bodyContext,0)


        def END(self):
            return self.getToken(LittleParser.END, 0)

        def EOF(self):
            return self.getToken(LittleParser.EOF, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_program

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterProgram" ):
                listener.enterProgram(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitProgram" ):
                listener.exitProgram(self)



    def program(self):

        localctx = LittleParser.ProgramContext(self, self._ctx, self.state)
        self.enterRule(localctx, 0, self.RULE_program)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 70
            self.match(LittleParser.PROGRAM)
            self.state = 71
            self.id_()
            self.state = 72
            self.match(LittleParser.BEGIN)
            self.state = 73
            self.pgm_body()
            self.state = 74
            self.match(LittleParser.END)
            self.state = 75
            self.match(LittleParser.EOF)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class IdContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def IDENTIFIER(self):
            return self.getToken(LittleParser.IDENTIFIER, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_id

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterId" ):
                listener.enterId(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitId" ):
                listener.exitId(self)



    def id_(self):

        localctx = LittleParser.IdContext(self, self._ctx, self.state)
        self.enterRule(localctx, 2, self.RULE_id)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 77
            self.match(LittleParser.IDENTIFIER)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Pgm_bodyContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def decl(self):
            return self.getTypedRuleContext(LittleParser.DeclContext,0)


        def func_declarations(self):
            return self.getTypedRuleContext(LittleParser.Func_declarationsContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_pgm_body

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterPgm_body" ):
                listener.enterPgm_body(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitPgm_body" ):
                listener.exitPgm_body(self)



    def pgm_body(self):

        localctx = LittleParser.Pgm_bodyContext(self, self._ctx, self.state)
        self.enterRule(localctx, 4, self.RULE_pgm_body)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 79
            self.decl()
            self.state = 80
            self.func_declarations()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class DeclContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def string_decl(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.String_declContext)
            else:
                return self.getTypedRuleContext(LittleParser.String_declContext,i)


        def var_decl(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.Var_declContext)
            else:
                return self.getTypedRuleContext(LittleParser.Var_declContext,i)


        def getRuleIndex(self):
            return LittleParser.RULE_decl

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterDecl" ):
                listener.enterDecl(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitDecl" ):
                listener.exitDecl(self)



    def decl(self):

        localctx = LittleParser.DeclContext(self, self._ctx, self.state)
        self.enterRule(localctx, 6, self.RULE_decl)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 88
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            while (((_la) & ~0x3f) == 0 and ((1 << _la) & 400) != 0):
                self.state = 86
                self._errHandler.sync(self)
                token = self._input.LA(1)
                if token in [LittleParser.STRING]:
                    self.state = 82
                    self.string_decl()
                    pass
                elif token in [LittleParser.FLOAT, LittleParser.INT]:
                    self.state = 84
                    self.var_decl()
                    pass
                else:
                    raise NoViableAltException(self)

                self.state = 90
                self._errHandler.sync(self)
                _la = self._input.LA(1)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class String_declContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def STRING(self):
            return self.getToken(LittleParser.STRING, 0)

        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def ASSIGN(self):
            return self.getToken(LittleParser.ASSIGN, 0)

        def str_(self):
            return self.getTypedRuleContext(LittleParser.StrContext,0)


        def SEMI(self):
            return self.getToken(LittleParser.SEMI, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_string_decl

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterString_decl" ):
                listener.enterString_decl(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitString_decl" ):
                listener.exitString_decl(self)



    def string_decl(self):

        localctx = LittleParser.String_declContext(self, self._ctx, self.state)
        self.enterRule(localctx, 8, self.RULE_string_decl)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 91
            self.match(LittleParser.STRING)
            self.state = 92
            self.id_()
            self.state = 93
            self.match(LittleParser.ASSIGN)
            self.state = 94
            self.str_()
            self.state = 95
            self.match(LittleParser.SEMI)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class StrContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def STRINGLITERAL(self):
            return self.getToken(LittleParser.STRINGLITERAL, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_str

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterStr" ):
                listener.enterStr(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitStr" ):
                listener.exitStr(self)



    def str_(self):

        localctx = LittleParser.StrContext(self, self._ctx, self.state)
        self.enterRule(localctx, 10, self.RULE_str)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 97
            self.match(LittleParser.STRINGLITERAL)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Var_declContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def var_type(self):
            return self.getTypedRuleContext(LittleParser.Var_typeContext,0)


        def id_list(self):
            return self.getTypedRuleContext(LittleParser.Id_listContext,0)


        def SEMI(self):
            return self.getToken(LittleParser.SEMI, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_var_decl

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterVar_decl" ):
                listener.enterVar_decl(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitVar_decl" ):
                listener.exitVar_decl(self)



    def var_decl(self):

        localctx = LittleParser.Var_declContext(self, self._ctx, self.state)
        self.enterRule(localctx, 12, self.RULE_var_decl)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 99
            self.var_type()
            self.state = 100
            self.id_list()
            self.state = 101
            self.match(LittleParser.SEMI)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Var_typeContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def FLOAT(self):
            return self.getToken(LittleParser.FLOAT, 0)

        def INT(self):
            return self.getToken(LittleParser.INT, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_var_type

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterVar_type" ):
                listener.enterVar_type(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitVar_type" ):
                listener.exitVar_type(self)



    def var_type(self):

        localctx = LittleParser.Var_typeContext(self, self._ctx, self.state)
        self.enterRule(localctx, 14, self.RULE_var_type)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 103
            _la = self._input.LA(1)
            if not(_la==LittleParser.FLOAT or _la==LittleParser.INT):
                self._errHandler.recoverInline(self)
            else:
                self._errHandler.reportMatch(self)
                self.consume()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Any_typeContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def var_type(self):
            return self.getTypedRuleContext(LittleParser.Var_typeContext,0)


        def VOID(self):
            return self.getToken(LittleParser.VOID, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_any_type

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterAny_type" ):
                listener.enterAny_type(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitAny_type" ):
                listener.exitAny_type(self)



    def any_type(self):

        localctx = LittleParser.Any_typeContext(self, self._ctx, self.state)
        self.enterRule(localctx, 16, self.RULE_any_type)
        try:
            self.state = 107
            self._errHandler.sync(self)
            token = self._input.LA(1)
            if token in [LittleParser.FLOAT, LittleParser.INT]:
                self.enterOuterAlt(localctx, 1)
                self.state = 105
                self.var_type()
                pass
            elif token in [LittleParser.VOID]:
                self.enterOuterAlt(localctx, 2)
                self.state = 106
                self.match(LittleParser.VOID)
                pass
            else:
                raise NoViableAltException(self)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Id_listContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def id_(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.IdContext)
            else:
                return self.getTypedRuleContext(LittleParser.IdContext,i)


        def COMMA(self, i:int=None):
            if i is None:
                return self.getTokens(LittleParser.COMMA)
            else:
                return self.getToken(LittleParser.COMMA, i)

        def getRuleIndex(self):
            return LittleParser.RULE_id_list

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterId_list" ):
                listener.enterId_list(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitId_list" ):
                listener.exitId_list(self)



    def id_list(self):

        localctx = LittleParser.Id_listContext(self, self._ctx, self.state)
        self.enterRule(localctx, 18, self.RULE_id_list)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 109
            self.id_()
            self.state = 115
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            while _la==LittleParser.COMMA:
                self.state = 110
                self.match(LittleParser.COMMA)
                self.state = 111
                self.id_()
                self.state = 117
                self._errHandler.sync(self)
                _la = self._input.LA(1)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Param_decl_listContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def param_decl(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.Param_declContext)
            else:
                return self.getTypedRuleContext(LittleParser.Param_declContext,i)


        def COMMA(self, i:int=None):
            if i is None:
                return self.getTokens(LittleParser.COMMA)
            else:
                return self.getToken(LittleParser.COMMA, i)

        def getRuleIndex(self):
            return LittleParser.RULE_param_decl_list

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterParam_decl_list" ):
                listener.enterParam_decl_list(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitParam_decl_list" ):
                listener.exitParam_decl_list(self)



    def param_decl_list(self):

        localctx = LittleParser.Param_decl_listContext(self, self._ctx, self.state)
        self.enterRule(localctx, 20, self.RULE_param_decl_list)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 127
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            if _la==LittleParser.FLOAT or _la==LittleParser.INT:
                self.state = 118
                self.param_decl()
                self.state = 124
                self._errHandler.sync(self)
                _la = self._input.LA(1)
                while _la==LittleParser.COMMA:
                    self.state = 119
                    self.match(LittleParser.COMMA)
                    self.state = 120
                    self.param_decl()
                    self.state = 126
                    self._errHandler.sync(self)
                    _la = self._input.LA(1)


        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Param_declContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def var_type(self):
            return self.getTypedRuleContext(LittleParser.Var_typeContext,0)


        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_param_decl

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterParam_decl" ):
                listener.enterParam_decl(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitParam_decl" ):
                listener.exitParam_decl(self)



    def param_decl(self):

        localctx = LittleParser.Param_declContext(self, self._ctx, self.state)
        self.enterRule(localctx, 22, self.RULE_param_decl)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 129
            self.var_type()
            self.state = 130
            self.id_()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Func_declarationsContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def func_decl(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.Func_declContext)
            else:
                return self.getTypedRuleContext(LittleParser.Func_declContext,i)


        def getRuleIndex(self):
            return LittleParser.RULE_func_declarations

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterFunc_declarations" ):
                listener.enterFunc_declarations(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitFunc_declarations" ):
                listener.exitFunc_declarations(self)



    def func_declarations(self):

        localctx = LittleParser.Func_declarationsContext(self, self._ctx, self.state)
        self.enterRule(localctx, 24, self.RULE_func_declarations)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 136
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            while _la==LittleParser.FUNCTION:
                self.state = 132
                self.func_decl()
                self.state = 138
                self._errHandler.sync(self)
                _la = self._input.LA(1)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Func_declContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def FUNCTION(self):
            return self.getToken(LittleParser.FUNCTION, 0)

        def any_type(self):
            return self.getTypedRuleContext(LittleParser.Any_typeContext,0)


        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def param_decl_list(self):
            return self.getTypedRuleContext(LittleParser.Param_decl_listContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def BEGIN(self):
            return self.getToken(LittleParser.BEGIN, 0)

        def func_body(self):
            return self.getTypedRuleContext(LittleParser.Func_bodyContext,0)


        def END(self):
            return self.getToken(LittleParser.END, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_func_decl

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterFunc_decl" ):
                listener.enterFunc_decl(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitFunc_decl" ):
                listener.exitFunc_decl(self)



    def func_decl(self):

        localctx = LittleParser.Func_declContext(self, self._ctx, self.state)
        self.enterRule(localctx, 26, self.RULE_func_decl)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 139
            self.match(LittleParser.FUNCTION)
            self.state = 140
            self.any_type()
            self.state = 141
            self.id_()
            self.state = 142
            self.match(LittleParser.LPAREN)
            self.state = 143
            self.param_decl_list()
            self.state = 144
            self.match(LittleParser.RPAREN)
            self.state = 145
            self.match(LittleParser.BEGIN)
            self.state = 146
            self.func_body()
            self.state = 147
            self.match(LittleParser.END)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Func_bodyContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def decl(self):
            return self.getTypedRuleContext(LittleParser.DeclContext,0)


        def stmt_list(self):
            return self.getTypedRuleContext(LittleParser.Stmt_listContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_func_body

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterFunc_body" ):
                listener.enterFunc_body(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitFunc_body" ):
                listener.exitFunc_body(self)



    def func_body(self):

        localctx = LittleParser.Func_bodyContext(self, self._ctx, self.state)
        self.enterRule(localctx, 28, self.RULE_func_body)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 149
            self.decl()
            self.state = 150
            self.stmt_list()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Stmt_listContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def stmt(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.StmtContext)
            else:
                return self.getTypedRuleContext(LittleParser.StmtContext,i)


        def getRuleIndex(self):
            return LittleParser.RULE_stmt_list

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterStmt_list" ):
                listener.enterStmt_list(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitStmt_list" ):
                listener.exitStmt_list(self)



    def stmt_list(self):

        localctx = LittleParser.Stmt_listContext(self, self._ctx, self.state)
        self.enterRule(localctx, 30, self.RULE_stmt_list)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 156
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            while (((_la) & ~0x3f) == 0 and ((1 << _la) & 5370920960) != 0):
                self.state = 152
                self.stmt()
                self.state = 158
                self._errHandler.sync(self)
                _la = self._input.LA(1)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class StmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def base_stmt(self):
            return self.getTypedRuleContext(LittleParser.Base_stmtContext,0)


        def if_stmt(self):
            return self.getTypedRuleContext(LittleParser.If_stmtContext,0)


        def while_stmt(self):
            return self.getTypedRuleContext(LittleParser.While_stmtContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterStmt" ):
                listener.enterStmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitStmt" ):
                listener.exitStmt(self)



    def stmt(self):

        localctx = LittleParser.StmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 32, self.RULE_stmt)
        try:
            self.state = 162
            self._errHandler.sync(self)
            token = self._input.LA(1)
            if token in [LittleParser.READ, LittleParser.WRITE, LittleParser.RETURN, LittleParser.IDENTIFIER]:
                self.enterOuterAlt(localctx, 1)
                self.state = 159
                self.base_stmt()
                pass
            elif token in [LittleParser.IF]:
                self.enterOuterAlt(localctx, 2)
                self.state = 160
                self.if_stmt()
                pass
            elif token in [LittleParser.WHILE]:
                self.enterOuterAlt(localctx, 3)
                self.state = 161
                self.while_stmt()
                pass
            else:
                raise NoViableAltException(self)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Base_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def assign_stmt(self):
            return self.getTypedRuleContext(LittleParser.Assign_stmtContext,0)


        def read_stmt(self):
            return self.getTypedRuleContext(LittleParser.Read_stmtContext,0)


        def write_stmt(self):
            return self.getTypedRuleContext(LittleParser.Write_stmtContext,0)


        def return_stmt(self):
            return self.getTypedRuleContext(LittleParser.Return_stmtContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_base_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterBase_stmt" ):
                listener.enterBase_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitBase_stmt" ):
                listener.exitBase_stmt(self)



    def base_stmt(self):

        localctx = LittleParser.Base_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 34, self.RULE_base_stmt)
        try:
            self.state = 168
            self._errHandler.sync(self)
            token = self._input.LA(1)
            if token in [LittleParser.IDENTIFIER]:
                self.enterOuterAlt(localctx, 1)
                self.state = 164
                self.assign_stmt()
                pass
            elif token in [LittleParser.READ]:
                self.enterOuterAlt(localctx, 2)
                self.state = 165
                self.read_stmt()
                pass
            elif token in [LittleParser.WRITE]:
                self.enterOuterAlt(localctx, 3)
                self.state = 166
                self.write_stmt()
                pass
            elif token in [LittleParser.RETURN]:
                self.enterOuterAlt(localctx, 4)
                self.state = 167
                self.return_stmt()
                pass
            else:
                raise NoViableAltException(self)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Assign_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def ASSIGN(self):
            return self.getToken(LittleParser.ASSIGN, 0)

        def expr(self):
            return self.getTypedRuleContext(LittleParser.ExprContext,0)


        def SEMI(self):
            return self.getToken(LittleParser.SEMI, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_assign_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterAssign_stmt" ):
                listener.enterAssign_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitAssign_stmt" ):
                listener.exitAssign_stmt(self)



    def assign_stmt(self):

        localctx = LittleParser.Assign_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 36, self.RULE_assign_stmt)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 170
            self.id_()
            self.state = 171
            self.match(LittleParser.ASSIGN)
            self.state = 172
            self.expr()
            self.state = 173
            self.match(LittleParser.SEMI)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Read_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def READ(self):
            return self.getToken(LittleParser.READ, 0)

        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def id_list(self):
            return self.getTypedRuleContext(LittleParser.Id_listContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def SEMI(self):
            return self.getToken(LittleParser.SEMI, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_read_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterRead_stmt" ):
                listener.enterRead_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitRead_stmt" ):
                listener.exitRead_stmt(self)



    def read_stmt(self):

        localctx = LittleParser.Read_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 38, self.RULE_read_stmt)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 175
            self.match(LittleParser.READ)
            self.state = 176
            self.match(LittleParser.LPAREN)
            self.state = 177
            self.id_list()
            self.state = 178
            self.match(LittleParser.RPAREN)
            self.state = 179
            self.match(LittleParser.SEMI)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Write_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def WRITE(self):
            return self.getToken(LittleParser.WRITE, 0)

        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def id_list(self):
            return self.getTypedRuleContext(LittleParser.Id_listContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def SEMI(self):
            return self.getToken(LittleParser.SEMI, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_write_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterWrite_stmt" ):
                listener.enterWrite_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitWrite_stmt" ):
                listener.exitWrite_stmt(self)



    def write_stmt(self):

        localctx = LittleParser.Write_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 40, self.RULE_write_stmt)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 181
            self.match(LittleParser.WRITE)
            self.state = 182
            self.match(LittleParser.LPAREN)
            self.state = 183
            self.id_list()
            self.state = 184
            self.match(LittleParser.RPAREN)
            self.state = 185
            self.match(LittleParser.SEMI)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Return_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def RETURN(self):
            return self.getToken(LittleParser.RETURN, 0)

        def expr(self):
            return self.getTypedRuleContext(LittleParser.ExprContext,0)


        def SEMI(self):
            return self.getToken(LittleParser.SEMI, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_return_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterReturn_stmt" ):
                listener.enterReturn_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitReturn_stmt" ):
                listener.exitReturn_stmt(self)



    def return_stmt(self):

        localctx = LittleParser.Return_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 42, self.RULE_return_stmt)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 187
            self.match(LittleParser.RETURN)
            self.state = 188
            self.expr()
            self.state = 189
            self.match(LittleParser.SEMI)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class ExprContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def factor(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.FactorContext)
            else:
                return self.getTypedRuleContext(LittleParser.FactorContext,i)


        def addop(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.AddopContext)
            else:
                return self.getTypedRuleContext(LittleParser.AddopContext,i)


        def getRuleIndex(self):
            return LittleParser.RULE_expr

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterExpr" ):
                listener.enterExpr(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitExpr" ):
                listener.exitExpr(self)



    def expr(self):

        localctx = LittleParser.ExprContext(self, self._ctx, self.state)
        self.enterRule(localctx, 44, self.RULE_expr)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 191
            self.factor()
            self.state = 197
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            while _la==LittleParser.PLUS or _la==LittleParser.MINUS:
                self.state = 192
                self.addop()
                self.state = 193
                self.factor()
                self.state = 199
                self._errHandler.sync(self)
                _la = self._input.LA(1)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class FactorContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def postfix_expr(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.Postfix_exprContext)
            else:
                return self.getTypedRuleContext(LittleParser.Postfix_exprContext,i)


        def mulop(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.MulopContext)
            else:
                return self.getTypedRuleContext(LittleParser.MulopContext,i)


        def getRuleIndex(self):
            return LittleParser.RULE_factor

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterFactor" ):
                listener.enterFactor(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitFactor" ):
                listener.exitFactor(self)



    def factor(self):

        localctx = LittleParser.FactorContext(self, self._ctx, self.state)
        self.enterRule(localctx, 46, self.RULE_factor)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 200
            self.postfix_expr()
            self.state = 206
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            while _la==LittleParser.STAR or _la==LittleParser.SLASH:
                self.state = 201
                self.mulop()
                self.state = 202
                self.postfix_expr()
                self.state = 208
                self._errHandler.sync(self)
                _la = self._input.LA(1)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Postfix_exprContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def call_expr(self):
            return self.getTypedRuleContext(LittleParser.Call_exprContext,0)


        def primary(self):
            return self.getTypedRuleContext(LittleParser.PrimaryContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_postfix_expr

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterPostfix_expr" ):
                listener.enterPostfix_expr(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitPostfix_expr" ):
                listener.exitPostfix_expr(self)



    def postfix_expr(self):

        localctx = LittleParser.Postfix_exprContext(self, self._ctx, self.state)
        self.enterRule(localctx, 48, self.RULE_postfix_expr)
        try:
            self.state = 211
            self._errHandler.sync(self)
            la_ = self._interp.adaptivePredict(self._input,12,self._ctx)
            if la_ == 1:
                self.enterOuterAlt(localctx, 1)
                self.state = 209
                self.call_expr()
                pass

            elif la_ == 2:
                self.enterOuterAlt(localctx, 2)
                self.state = 210
                self.primary()
                pass


        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Call_exprContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def expr_list(self):
            return self.getTypedRuleContext(LittleParser.Expr_listContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_call_expr

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterCall_expr" ):
                listener.enterCall_expr(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitCall_expr" ):
                listener.exitCall_expr(self)



    def call_expr(self):

        localctx = LittleParser.Call_exprContext(self, self._ctx, self.state)
        self.enterRule(localctx, 50, self.RULE_call_expr)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 213
            self.id_()
            self.state = 214
            self.match(LittleParser.LPAREN)
            self.state = 215
            self.expr_list()
            self.state = 216
            self.match(LittleParser.RPAREN)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Expr_listContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def expr(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.ExprContext)
            else:
                return self.getTypedRuleContext(LittleParser.ExprContext,i)


        def COMMA(self, i:int=None):
            if i is None:
                return self.getTokens(LittleParser.COMMA)
            else:
                return self.getToken(LittleParser.COMMA, i)

        def getRuleIndex(self):
            return LittleParser.RULE_expr_list

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterExpr_list" ):
                listener.enterExpr_list(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitExpr_list" ):
                listener.exitExpr_list(self)



    def expr_list(self):

        localctx = LittleParser.Expr_listContext(self, self._ctx, self.state)
        self.enterRule(localctx, 52, self.RULE_expr_list)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 227
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            if (((_la) & ~0x3f) == 0 and ((1 << _la) & 30064775168) != 0):
                self.state = 218
                self.expr()
                self.state = 224
                self._errHandler.sync(self)
                _la = self._input.LA(1)
                while _la==LittleParser.COMMA:
                    self.state = 219
                    self.match(LittleParser.COMMA)
                    self.state = 220
                    self.expr()
                    self.state = 226
                    self._errHandler.sync(self)
                    _la = self._input.LA(1)


        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class PrimaryContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def expr(self):
            return self.getTypedRuleContext(LittleParser.ExprContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def id_(self):
            return self.getTypedRuleContext(LittleParser.IdContext,0)


        def INTLITERAL(self):
            return self.getToken(LittleParser.INTLITERAL, 0)

        def FLOATLITERAL(self):
            return self.getToken(LittleParser.FLOATLITERAL, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_primary

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterPrimary" ):
                listener.enterPrimary(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitPrimary" ):
                listener.exitPrimary(self)



    def primary(self):

        localctx = LittleParser.PrimaryContext(self, self._ctx, self.state)
        self.enterRule(localctx, 54, self.RULE_primary)
        try:
            self.state = 236
            self._errHandler.sync(self)
            token = self._input.LA(1)
            if token in [LittleParser.LPAREN]:
                self.enterOuterAlt(localctx, 1)
                self.state = 229
                self.match(LittleParser.LPAREN)
                self.state = 230
                self.expr()
                self.state = 231
                self.match(LittleParser.RPAREN)
                pass
            elif token in [LittleParser.IDENTIFIER]:
                self.enterOuterAlt(localctx, 2)
                self.state = 233
                self.id_()
                pass
            elif token in [LittleParser.INTLITERAL]:
                self.enterOuterAlt(localctx, 3)
                self.state = 234
                self.match(LittleParser.INTLITERAL)
                pass
            elif token in [LittleParser.FLOATLITERAL]:
                self.enterOuterAlt(localctx, 4)
                self.state = 235
                self.match(LittleParser.FLOATLITERAL)
                pass
            else:
                raise NoViableAltException(self)

        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class AddopContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def PLUS(self):
            return self.getToken(LittleParser.PLUS, 0)

        def MINUS(self):
            return self.getToken(LittleParser.MINUS, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_addop

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterAddop" ):
                listener.enterAddop(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitAddop" ):
                listener.exitAddop(self)



    def addop(self):

        localctx = LittleParser.AddopContext(self, self._ctx, self.state)
        self.enterRule(localctx, 56, self.RULE_addop)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 238
            _la = self._input.LA(1)
            if not(_la==LittleParser.PLUS or _la==LittleParser.MINUS):
                self._errHandler.recoverInline(self)
            else:
                self._errHandler.reportMatch(self)
                self.consume()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class MulopContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def STAR(self):
            return self.getToken(LittleParser.STAR, 0)

        def SLASH(self):
            return self.getToken(LittleParser.SLASH, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_mulop

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterMulop" ):
                listener.enterMulop(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitMulop" ):
                listener.exitMulop(self)



    def mulop(self):

        localctx = LittleParser.MulopContext(self, self._ctx, self.state)
        self.enterRule(localctx, 58, self.RULE_mulop)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 240
            _la = self._input.LA(1)
            if not(_la==LittleParser.STAR or _la==LittleParser.SLASH):
                self._errHandler.recoverInline(self)
            else:
                self._errHandler.reportMatch(self)
                self.consume()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class If_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def IF(self):
            return self.getToken(LittleParser.IF, 0)

        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def cond(self):
            return self.getTypedRuleContext(LittleParser.CondContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def decl(self):
            return self.getTypedRuleContext(LittleParser.DeclContext,0)


        def stmt_list(self):
            return self.getTypedRuleContext(LittleParser.Stmt_listContext,0)


        def else_stmt(self):
            return self.getTypedRuleContext(LittleParser.Else_stmtContext,0)


        def ENDIF(self):
            return self.getToken(LittleParser.ENDIF, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_if_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterIf_stmt" ):
                listener.enterIf_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitIf_stmt" ):
                listener.exitIf_stmt(self)



    def if_stmt(self):

        localctx = LittleParser.If_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 60, self.RULE_if_stmt)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 242
            self.match(LittleParser.IF)
            self.state = 243
            self.match(LittleParser.LPAREN)
            self.state = 244
            self.cond()
            self.state = 245
            self.match(LittleParser.RPAREN)
            self.state = 246
            self.decl()
            self.state = 247
            self.stmt_list()
            self.state = 249
            self._errHandler.sync(self)
            _la = self._input.LA(1)
            if _la==LittleParser.ELSE:
                self.state = 248
                self.else_stmt()

            self.state = 251
            self.match(LittleParser.ENDIF)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class Else_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def ELSE(self):
            return self.getToken(LittleParser.ELSE, 0)

        def decl(self):
            return self.getTypedRuleContext(LittleParser.DeclContext,0)


        def stmt_list(self):
            return self.getTypedRuleContext(LittleParser.Stmt_listContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_else_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterElse_stmt" ):
                listener.enterElse_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitElse_stmt" ):
                listener.exitElse_stmt(self)



    def else_stmt(self):

        localctx = LittleParser.Else_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 62, self.RULE_else_stmt)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 253
            self.match(LittleParser.ELSE)
            self.state = 254
            self.decl()
            self.state = 255
            self.stmt_list()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class CondContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def expr(self, i:int=None):
            if i is None:
                return self.getTypedRuleContexts(LittleParser.ExprContext)
            else:
                return self.getTypedRuleContext(LittleParser.ExprContext,i)


        def compop(self):
            return self.getTypedRuleContext(LittleParser.CompopContext,0)


        def getRuleIndex(self):
            return LittleParser.RULE_cond

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterCond" ):
                listener.enterCond(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitCond" ):
                listener.exitCond(self)



    def cond(self):

        localctx = LittleParser.CondContext(self, self._ctx, self.state)
        self.enterRule(localctx, 64, self.RULE_cond)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 257
            self.expr()
            self.state = 258
            self.compop()
            self.state = 259
            self.expr()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class CompopContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def LT(self):
            return self.getToken(LittleParser.LT, 0)

        def GT(self):
            return self.getToken(LittleParser.GT, 0)

        def EQ(self):
            return self.getToken(LittleParser.EQ, 0)

        def NE(self):
            return self.getToken(LittleParser.NE, 0)

        def LE(self):
            return self.getToken(LittleParser.LE, 0)

        def GE(self):
            return self.getToken(LittleParser.GE, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_compop

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterCompop" ):
                listener.enterCompop(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitCompop" ):
                listener.exitCompop(self)



    def compop(self):

        localctx = LittleParser.CompopContext(self, self._ctx, self.state)
        self.enterRule(localctx, 66, self.RULE_compop)
        self._la = 0 # Token type
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 261
            _la = self._input.LA(1)
            if not((((_la) & ~0x3f) == 0 and ((1 << _la) & 1056964608) != 0)):
                self._errHandler.recoverInline(self)
            else:
                self._errHandler.reportMatch(self)
                self.consume()
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx


    class While_stmtContext(ParserRuleContext):
        __slots__ = 'parser'

        def __init__(self, parser, parent:ParserRuleContext=None, invokingState:int=-1):
            super().__init__(parent, invokingState)
            self.parser = parser

        def WHILE(self):
            return self.getToken(LittleParser.WHILE, 0)

        def LPAREN(self):
            return self.getToken(LittleParser.LPAREN, 0)

        def cond(self):
            return self.getTypedRuleContext(LittleParser.CondContext,0)


        def RPAREN(self):
            return self.getToken(LittleParser.RPAREN, 0)

        def decl(self):
            return self.getTypedRuleContext(LittleParser.DeclContext,0)


        def stmt_list(self):
            return self.getTypedRuleContext(LittleParser.Stmt_listContext,0)


        def ENDWHILE(self):
            return self.getToken(LittleParser.ENDWHILE, 0)

        def getRuleIndex(self):
            return LittleParser.RULE_while_stmt

        def enterRule(self, listener:ParseTreeListener):
            if hasattr( listener, "enterWhile_stmt" ):
                listener.enterWhile_stmt(self)

        def exitRule(self, listener:ParseTreeListener):
            if hasattr( listener, "exitWhile_stmt" ):
                listener.exitWhile_stmt(self)



    def while_stmt(self):

        localctx = LittleParser.While_stmtContext(self, self._ctx, self.state)
        self.enterRule(localctx, 68, self.RULE_while_stmt)
        try:
            self.enterOuterAlt(localctx, 1)
            self.state = 263
            self.match(LittleParser.WHILE)
            self.state = 264
            self.match(LittleParser.LPAREN)
            self.state = 265
            self.cond()
            self.state = 266
            self.match(LittleParser.RPAREN)
            self.state = 267
            self.decl()
            self.state = 268
            self.stmt_list()
            self.state = 269
            self.match(LittleParser.ENDWHILE)
        except RecognitionException as re:
            localctx.exception = re
            self._errHandler.reportError(self, re)
            self._errHandler.recover(self, re)
        finally:
            self.exitRule()
        return localctx



