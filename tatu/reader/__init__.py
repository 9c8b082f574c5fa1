"""Scanner, parser, syntax sugar, validation and include flattening."""
