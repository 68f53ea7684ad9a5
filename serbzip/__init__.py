"""serbzip: a quasi-lossless, line-oriented text compressor.

WHY: Prose is dominated by a small set of common words. If both sides of
a conversation share the same wordlist (the codebook), those words can be
replaced by a short reference and restored on the other side, while the
compressed text stays readable plain UTF-8.

HOW: Layers, leaves first:
  core     : vowel reduction, the fingerprint dictionary, its binary
             image format, and the line-by-line stream transcoder
  codecs   : pluggable codecs (Balkanoid) built on the core
  api      : download of the default dictionary image
  cli      : argparse front end that resolves a dictionary and runs a codec

RULES:
- The dictionary is built once and is read-only afterwards
- Compression is total; only expansion can fail
- Adding a new codec = one new module in codecs/, one registry line
"""

__version__ = "0.2.0"
