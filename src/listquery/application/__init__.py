"""Application layer – the list query engine and its pagination primitives."""
