"""Infrastructure layer - filesystem, subprocess and shell adapters."""
