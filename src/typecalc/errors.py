class CalculatorError(Exception):
    """Base of the three error kinds a command can fail with.

    str() of an error is its kind label, which is what the driver prints.
    The optional detail explains the failure and is only shown on request.
    """
    label: str = "Error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(self.label)
        self.detail = detail


class TypeCheckError(CalculatorError, TypeError):
    label = "Type Error"


class UndeclaredFunction(CalculatorError, NameError):
    label = "Undeclared Function"


class UndeclaredVariable(CalculatorError, NameError):
    label = "Undeclared Variable"
