from cidcodec.io.reader import (
    BytesReader,
    as_reader,
)

__all__ = [
    "BytesReader",
    "as_reader",
]
