"""Testing helpers – property-based strategies for Either values."""
