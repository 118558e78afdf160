"""Pure domain rules (record shape, identifier policy) with no I/O."""
