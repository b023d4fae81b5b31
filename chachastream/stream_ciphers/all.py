from .chacha import ChaCha
from .synchronized import SynchronizedStream


__all__ = ["ChaCha", "SynchronizedStream"]
