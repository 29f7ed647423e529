"""Constants used throughout the application."""

# Folder that receives rejected copies, next to the kept original
REJECT_FOLDER = "_Rejected"

# File suffixes considered for comparison (matched case-insensitively)
VALID_EXTENSIONS = [
    ".jpg",
    ".jpeg",
    ".mov",
    ".nef",
    ".raf",
    ".mp4",
    ".png",
    ".tiff",
    ".heic",
    ".dng",
    ".mkv",
    ".tgz",
    ".zip",
    ".rar",
]

# Hashing
DIGEST_SIZE = 20  # SHA-1
CHUNK_SIZE = 1024 * 1024

# Original selection
TIE_BREAKS = ("first-seen", "path")
