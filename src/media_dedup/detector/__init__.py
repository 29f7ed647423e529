"""Size and checksum passes."""
