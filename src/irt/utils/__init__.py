"""Format sniffing, size specs and profiling helpers."""
