class MaltError(Exception):
    """ Base class for all Malt errors"""
    pass

class MaltSyntaxError(MaltError):
    """ Raised when source text cannot be read into a form"""

class MaltEndOfInput(MaltSyntaxError):
    """ Raised when tokens run out in the middle of a form"""

class MaltNoInput(MaltEndOfInput):
    """ Raised when a read is requested from text with no tokens"""

class MaltUnexpectedCloser(MaltSyntaxError):
    """ Raised when a closing bracket appears where a form was expected"""
    def __init__(self, token: str):
        super().__init__(f"unexpected {token}")
        self.token = token

class MaltMalformedCollection(MaltSyntaxError):
    """ Raised when a hash-map literal has an odd number of entries"""

class MaltUnboundSymbol(MaltError):
    """ Raised when a symbol is used before it is bound"""
    def __init__(self, symbol):
        super().__init__(f"'{symbol}' not found")
        self.symbol = symbol

class MaltTypeError(MaltError):
    """ Raised when an operation receives a form of the wrong variant"""

class MaltInvalidSymbol(MaltTypeError):
    """ Raised when a binding key is not a symbol"""

class MaltArityError(MaltError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MaltNotCallable(MaltError):
    """ Raised when the head of an application is not a function"""
    def __init__(self, form, printed: str):
        super().__init__(f"{printed} is not a function")
        self.form = form

class MaltArithmeticError(MaltError):
    """ Raised when integer arithmetic has no defined result"""

class MaltNestingError(MaltError):
    """ Raised when a form is nested deeper than the host stack allows"""
