"""Collections, encoding records, model decoding and SMT/Alloy signature text for constraint compilation."""

__version__ = "0.1.0"