class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class EmptyInputError(DiagramError):
    pass


class NoNodesFoundError(DiagramError):
    pass


class LayoutOverflowError(DiagramError):
    pass
