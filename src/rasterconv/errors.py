from typing_extensions import override


class UnsupportedFormatError(ValueError):
    """
    Raised when an output format tag is not one of the supported formats.
    Raised before anything is written to the destination.
    """

    def __init__(self, value: object = None, message: str = "unsupported format"):
        self.value: object = value
        self.message: str = message if value is None else f"{message}: {value!r}"
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message
