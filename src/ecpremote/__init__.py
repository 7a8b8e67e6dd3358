"""ecpremote -- Remote-control client for the External Control Protocol.

This package implements a small client for devices that expose HTTP
key-press, launch, and query endpoints on port 8060. It pairs a bounded
integer tokenizer with a single-shot, timeout-enforcing transport, and
a sequencer that types parsed integers one keypress at a time.
"""

__version__ = "0.1.0"
