class StreamXmlError(Exception):
    pass


class ScriptError(StreamXmlError):
    pass


class ScriptParseError(ScriptError):
    pass


class UnknownOperationError(ScriptError):
    pass


class OperationArityError(ScriptError):
    pass
