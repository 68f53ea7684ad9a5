"""Core reduction, dictionary and transcoding modules.

WHY: The core package holds the codec-independent machinery: how a word
is reduced to its fingerprint, how fingerprints map to word groups, how
that mapping is persisted, and how a stream is driven line by line.

HOW: reduction.py defines the vowel set and Reduction; dictionary.py
defines WordVec and Dictionary; image.py encodes/decodes the binary dictionary
image; transcoder.py drives a per-line processor over a text stream.

RULES:
- Nothing in core knows about a specific codec's escape protocol
- Dictionary is read-only once populated
"""
