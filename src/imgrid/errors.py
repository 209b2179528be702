class ImgridError(Exception):
    pass


class EncodingError(ImgridError):
    """The composited canvas could not be serialized."""


class InvalidArgument(ImgridError, ValueError):
    pass
