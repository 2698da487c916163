

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class CalculationError(MathError):
    pass

class NumberFormatError(CalculationError, ValueError):
    """An operand token that is not a floating-point literal."""
    def __init__(self, message, code="3031", equation=None, token=None):
        super().__init__(message, code=code, equation=equation)
        self.token = token

class ConfigurationError(MathError):
    pass






Error_Dictionary= {

    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3031" : "Invalid Number.",
    "3032" : "Expression nested too deeply.",


    "4001" : "Clipboard not available.",


    "5001" : "Invalid setting type.",
    "5002" : "Not all Settings could be saved.",


    "9999" : "Unexpected Error."
}
