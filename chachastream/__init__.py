from chachastream.stream_ciphers.all import *
from chachastream.utilities.exceptions import ChaChaStreamException, InvalidKeyLength, InvalidNonceLength, InvalidRoundCount, LengthMismatch, KeystreamExhausted
from chachastream.utilities.runtime import RUNTIME

__version__ = "0.1.0"
