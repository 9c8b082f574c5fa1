"""Coloured dumps of tokens, ASTs and errors for the command line."""
