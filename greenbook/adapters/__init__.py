"""Storage and chat platform implementations of the ports."""
