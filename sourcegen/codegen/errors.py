class SourceGenError(Exception):
    pass


class ConstructionError(SourceGenError):
    """Raised when an instance of a class cannot be constructed from the
    values that are available.
    """

    def __init__(self, message, class_name=None, parameter_name=None):
        super().__init__(message)
        self.class_name = class_name
        self.parameter_name = parameter_name
