class BaseCIDError(Exception):
    pass


class ValidationError(BaseCIDError):
    """Raised when something does not pass a validation check."""


class ParseError(BaseCIDError):
    pass


class HashLengthMismatchError(ValidationError):
    """A digest length disagrees with its hash algorithm's fixed length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"hash length mismatch: expected {expected} bytes, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class InvalidLengthError(ValidationError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"invalid length: expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class UnsupportedEncodingError(ValidationError):
    pass


class EmptyInputError(ParseError):
    def __init__(self, message: str = "empty input") -> None:
        super().__init__(message)


class UnsupportedVersionError(ParseError):
    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported CID version: {version:#04x}")
        self.version = version


class UnknownCodecError(ParseError):
    def __init__(self, code: int | str) -> None:
        if isinstance(code, int):
            super().__init__(f"unknown multicodec: {code:#x}")
        else:
            super().__init__(f"unknown multicodec: {code!r}")
        self.code = code


class UnknownHashAlgorithmError(ParseError):
    def __init__(self, code: int | str) -> None:
        if isinstance(code, int):
            super().__init__(f"unknown hash algorithm: {code:#x}")
        else:
            super().__init__(f"unknown hash algorithm: {code!r}")
        self.code = code


class InsufficientBytesError(ParseError):
    """Fewer bytes remain than the value being read requires."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(
            f"insufficient bytes: needed {needed}, {available} available"
        )
        self.needed = needed
        self.available = available


class HeaderMismatchError(ParseError):
    """A fixed header byte does not hold its required value."""

    def __init__(self, field: str, expected: int, actual: int) -> None:
        super().__init__(
            f"invalid {field}: expected {expected:#04x}, got {actual:#04x}"
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class UnsupportedMultibasePrefixError(ParseError):
    def __init__(self, prefix: str) -> None:
        super().__init__(f"unsupported multibase prefix: {prefix!r}")
        self.prefix = prefix


class TruncatedVarintError(ParseError):
    def __init__(self, message: str = "varint truncated before final byte") -> None:
        super().__init__(message)


class VarintOverflowError(ParseError):
    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"varint exceeds maximum length of {max_bytes} bytes")
        self.max_bytes = max_bytes


class TrailingBytesError(ParseError):
    def __init__(self, count: int) -> None:
        super().__init__(f"{count} unexpected trailing byte(s)")
        self.count = count


class BaseDecodeError(ParseError):
    """The text payload is not valid in its multibase encoding."""

    def __init__(self, encoding: str, message: str) -> None:
        super().__init__(f"{encoding} decode error: {message}")
        self.encoding = encoding
