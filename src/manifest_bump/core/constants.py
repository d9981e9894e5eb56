"""Constants used throughout manifest-bump."""

import re

# Manifest files
DEFAULT_MANIFEST_FILE = "manifest.json"
MANIFEST_ENCODING = "utf-8"
VERSION_KEY = "version"

# Version handling
VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)
BUMP_KEYWORDS = ("major", "minor", "patch")
DEFAULT_BUMP = "patch"

# Git
DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_TAG_PREFIX = "v"
DEFAULT_COMMIT_MESSAGE = "bump version {tag}"

# JSON lexing
WHITESPACE = frozenset(" \t\n\r")
NUMBER_LIKE_CHARS = frozenset("0123456789abcdefghijklmnopqrstuvwxyzE.-+")
VALUE_TERMINATORS = frozenset("],}")
