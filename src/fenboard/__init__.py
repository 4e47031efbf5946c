"""fenboard — static chess positions: bit codecs, FEN I/O and text rendering."""

__version__ = "0.1.0"
