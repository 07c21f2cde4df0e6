"""extswap - Batch-change file extensions in a directory tree."""
