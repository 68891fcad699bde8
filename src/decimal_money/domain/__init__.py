"""Domain value types: decimal numbers and money amounts."""
