class NdnestError(Exception):
    pass


class InvalidExtentError(NdnestError, ValueError):
    pass


class InvalidRankError(NdnestError, ValueError):
    pass


class UndefinedZeroError(NdnestError, TypeError):
    pass


class RaggedShapeError(NdnestError, ValueError):
    pass
