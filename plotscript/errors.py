

class PlotscriptError(Exception):
    """ Base class for all plotscript errors"""
    pass

class SemanticError(PlotscriptError):
    """ Raised when an expression cannot be evaluated"""
    pass

class PlotscriptUnboundSymbol(SemanticError):
    """ Raised when a symbol is looked up before it is defined"""

class PlotscriptArityError(SemanticError):
    """ Raised when the number of arguments passed to a form or procedure is incorrect"""

class PlotscriptTypeError(SemanticError):
    """ Raised when the types of arguments passed to a form or procedure are incorrect"""

class PlotscriptRedefinitionError(SemanticError):
    """ Raised when define targets a special form, built-in procedure or constant"""

class PlotscriptInterrupted(SemanticError):
    """ Raised when evaluation is cancelled through the interrupt token"""

class PlotscriptSyntaxError(PlotscriptError):
    """ Raised when source text cannot be parsed into a single expression"""

class PlotscriptRecursionError(SemanticError):
    """ Raised when evaluation nests deeper than the host interpreter allows"""
