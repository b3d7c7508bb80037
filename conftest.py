"""Root conftest: lets pytest import blockshuffle from a source checkout."""
