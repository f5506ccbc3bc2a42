from .repository import GitError, Repository, find_git_root

__all__ = ["GitError", "Repository", "find_git_root"]
