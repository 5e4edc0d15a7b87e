class IGESEncodeError(Exception):
    """Base class for every error raised while encoding a surface to IGES"""
    pass


class InvalidDegreeError(IGESEncodeError, ValueError):
    """The degree derived from a knot vector and its control point count is less than 1"""
    pass


class MalformedInputError(IGESEncodeError, ValueError):
    """Empty or non-rectangular control point grid, non-finite values, or inconsistent optional inputs"""
    pass


class FieldOverflowError(IGESEncodeError, ValueError):
    """A field or sequence number does not fit in the columns the IGES layout reserves for it"""
    pass


class IGESFileWriteError(IGESEncodeError, OSError):
    """The IGES file could not be created or written"""
    pass
