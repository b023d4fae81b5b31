class ChaChaStreamException(Exception):
    pass

class InvalidKeyLength(ChaChaStreamException, ValueError):
    pass

class InvalidNonceLength(ChaChaStreamException, ValueError):
    pass

class InvalidRoundCount(ChaChaStreamException, ValueError):
    pass

class LengthMismatch(ChaChaStreamException, ValueError):
    pass

class KeystreamExhausted(ChaChaStreamException):
    """
    Raised when the 64-bit block counter has wrapped and no further keystream can be produced.
    """
