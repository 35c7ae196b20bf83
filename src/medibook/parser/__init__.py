"""Command-line input parsing: tokenizer, field parsers and command parsers."""
