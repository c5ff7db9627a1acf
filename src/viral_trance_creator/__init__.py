"""viral-trance-creator -- generative AI helpers for trance tracks."""

__version__ = '0.1.0'
