"""Standard library natives, one module per namespace prefix."""
