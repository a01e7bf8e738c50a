"""dicestats — lexical scanner for dice-notation expressions."""

__version__ = "0.1.0"
