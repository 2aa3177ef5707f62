class DecodeError(ValueError):
    pass


class DecodeIOError(DecodeError):
    pass


class UnknownSymbolError(DecodeError):
    def __init__(self, symbol: str):
        super().__init__(f"{symbol} could not be understood")
        self.symbol = symbol


class LeadingZeroError(DecodeError):
    def __init__(self):
        super().__init__("Leading 0 before number")


class NegativeZeroError(DecodeError):
    def __init__(self):
        super().__init__("Negative zero")


class InvalidNumberError(DecodeError):
    def __init__(self, char: str):
        super().__init__(f"{char} is not a valid number")
        self.char = char


class KeyNotStringError(DecodeError):
    def __init__(self, key):
        super().__init__(f"{key!r} is not a correct key type")
        self.key = key


class NumberOverflowError(DecodeError):
    def __init__(self, text: str):
        super().__init__(f"{text} does not fit in a signed 64-bit integer")
        self.text = text


class NestingTooDeepError(DecodeError):
    def __init__(self, max_depth: int):
        super().__init__(f"Nesting deeper than {max_depth} levels")
        self.max_depth = max_depth
