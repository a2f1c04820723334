from .git import GitConfigReadError, GitError, GitNotInstalledError, read_config_entries

__all__ = [
    "GitConfigReadError",
    "GitError",
    "GitNotInstalledError",
    "read_config_entries",
]
