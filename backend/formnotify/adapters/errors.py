class RenderError(Exception):
    pass


class InvalidInput(RenderError):
    pass


class UnsupportedIntegration(RenderError):
    pass


class UnsupportedEventKind(RenderError):
    pass


class TypeMismatch(RenderError):
    pass
