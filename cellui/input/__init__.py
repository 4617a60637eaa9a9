"""Terminal input: escape-sequence decoding and the raw-mode session."""

from cellui.input.decoder import InputDecoder, decode_sgr_mouse
from cellui.input.terminal import TerminalSession

__all__ = ["InputDecoder", "TerminalSession", "decode_sgr_mouse"]
