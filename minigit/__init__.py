"""Building blocks for a Git-like tool: objects, hashes, index, diffs, config, logs and HTTP parsing."""

__version__ = "0.1.0"