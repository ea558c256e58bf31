class ConversionError(RuntimeError):
    pass


class LrcFormatError(ConversionError, ValueError):
    pass


class OffsetApplicationError(ConversionError):
    pass


class TimingOrderError(ConversionError):
    pass


class LrcIOError(ConversionError):
    pass
