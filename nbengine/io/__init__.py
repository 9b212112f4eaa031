"""Dataset input: readers and label encoding."""
