class ConfigurationError(Exception):
    """
    A custom error that arises from mistakes in building block, formula or
    configuration definition.
    """

    def __init__(self, message="A configuration error occurred"):
        self.message = message
        super().__init__(self.message)


class FormulaParseError(Exception):
    """
    Raised when an explicit formula cannot be parsed: the formula string is empty,
      is not a syntactically valid expression, or uses a variable that is
      not declared as an alias of one of the formula's object paths.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class UnresolvedMoleculeReference(Exception):
    """
    An application builder applies a molecule that is not defined
      in the molecule building block of the configuration.
    Never raised by the validator; the class name labels the
      corresponding validation messages.
    """


class TypeMismatchError(TypeError):
    """
    Raised when a value origin is compared to an object that is not a value origin.
    """
