"""
Extended ASCII Reporter Package

Prints the extended ASCII code table (128-255) as code/glyph pairs and
computes the small set of derived values that go with it:
    - an integer expression over the range bounds
    - a floating-point literal sum
    - a fixed-capacity sequence filled by a recurrence
    - a date record

Everything is process-local. The only side effect is writing to a stream.
"""

__version__ = "0.1.0"
